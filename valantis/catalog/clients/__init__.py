"""Client-facing catalog session and presentation state."""

from .catalog import ProductCatalog
from .view import CatalogView, ViewState, render_card, render_text

__all__ = ["CatalogView", "ProductCatalog", "ViewState", "render_card", "render_text"]
