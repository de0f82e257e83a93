"""Core components."""

from .config import CatalogConfig, RetryPolicy
from .enums import Action, CatalogMode
from .exceptions import (
    CatalogError,
    RequestCancelledError,
    RetryExhaustedError,
    TransportError,
    ValidationError,
)

__all__ = [
    "Action",
    "CatalogConfig",
    "CatalogError",
    "CatalogMode",
    "RequestCancelledError",
    "RetryExhaustedError",
    "RetryPolicy",
    "TransportError",
    "ValidationError",
]
