"""Runtime layer: transport and pagination."""

from .paging import IdentifierPager, dedupe_records, unique_ids
from .rest import CatalogTransport, HTTPClient

__all__ = [
    "CatalogTransport",
    "HTTPClient",
    "IdentifierPager",
    "dedupe_records",
    "unique_ids",
]
