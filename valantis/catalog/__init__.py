"""Valantis Catalog - async client for the Valantis product API."""

from .api import FilterForm, build_filter_params
from .auth import current_token
from .clients import CatalogView, ProductCatalog, ViewState, render_card, render_text
from .core import (
    Action,
    CatalogConfig,
    CatalogError,
    CatalogMode,
    RequestCancelledError,
    RetryExhaustedError,
    RetryPolicy,
    TransportError,
    ValidationError,
)
from .models import Product
from .runtime import CatalogTransport, HTTPClient, IdentifierPager, dedupe_records, unique_ids

__version__ = "0.1.0"

__all__ = [
    "Action",
    "CatalogConfig",
    "CatalogError",
    "CatalogMode",
    "CatalogTransport",
    "CatalogView",
    "FilterForm",
    "HTTPClient",
    "IdentifierPager",
    "Product",
    "ProductCatalog",
    "RequestCancelledError",
    "RetryExhaustedError",
    "RetryPolicy",
    "TransportError",
    "ValidationError",
    "ViewState",
    "build_filter_params",
    "current_token",
    "dedupe_records",
    "render_card",
    "render_text",
    "unique_ids",
]
