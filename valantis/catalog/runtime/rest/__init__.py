"""REST runtime: HTTP session wrapper and retrying transport."""

from .http_client import HTTPClient, RawResponse
from .transport import CatalogTransport

__all__ = ["CatalogTransport", "HTTPClient", "RawResponse"]
