"""Pagination over the identifier listing."""

from .dedupe import dedupe_records, unique_ids
from .pager import IdentifierPager, ScanResult, scan_page

__all__ = [
    "IdentifierPager",
    "ScanResult",
    "dedupe_records",
    "scan_page",
    "unique_ids",
]
