"""Request-building helpers for the catalog API."""

from .filters import MIN_QUERY_LENGTH, FilterForm, build_filter_params, parse_price

__all__ = ["MIN_QUERY_LENGTH", "FilterForm", "build_filter_params", "parse_price"]
