"""Core enumerations shared across the catalog client.

Key Types:
    - Action: Remote API actions understood by the product endpoint
    - CatalogMode: Whether the catalog is paging or showing a filter result
"""

from enum import Enum


class Action(str, Enum):
    """Remote API actions.

    String enum so values serialize directly into the request envelope.
    """

    GET_IDS = "get_ids"
    GET_ITEMS = "get_items"
    FILTER = "filter"

    def __str__(self) -> str:
        return self.value


class CatalogMode(str, Enum):
    """Browsing mode of a catalog session."""

    PAGINATED = "paginated"
    FILTERED = "filtered"

    def __str__(self) -> str:
        return self.value
