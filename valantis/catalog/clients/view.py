"""Presentation state for a catalog page.

``CatalogView`` drives a ``ProductCatalog`` and reports what the page should
look like as immutable ``ViewState`` snapshots: which records to draw,
whether the loading indicator is up, whether pagination is visible and which
navigation controls are enabled. Rendering code applies a snapshot; it never
needs to toggle controls itself.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass, replace

from ..api.filters import FilterForm
from ..core.enums import CatalogMode
from ..models import Product
from .catalog import ProductCatalog


@dataclass(frozen=True)
class ViewState:
    """Snapshot of the catalog page."""

    records: tuple[Product, ...] = ()
    mode: CatalogMode = CatalogMode.PAGINATED
    page_number: int = 1
    loading: bool = False
    pagination_visible: bool = False
    prev_enabled: bool = False
    next_enabled: bool = False
    messages: tuple[str, ...] = ()


class CatalogView:
    """State machine between user actions and catalog loads."""

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def begin_load(self) -> ViewState:
        """Enter the loading state: indicator shown, navigation disabled."""
        self._state = replace(
            self._state, loading=True, prev_enabled=False, next_enabled=False
        )
        return self._state

    def _settle(self, records: list[Product]) -> ViewState:
        paginated = self._catalog.mode is CatalogMode.PAGINATED
        self._state = ViewState(
            records=tuple(records),
            mode=self._catalog.mode,
            page_number=self._catalog.page_number,
            loading=False,
            pagination_visible=paginated,
            prev_enabled=paginated,
            next_enabled=paginated,
            messages=() if records else ("No products found.",),
        )
        return self._state

    def _fail(self, before: ViewState) -> ViewState:
        """Leave the loading state after a failed load, keeping the old records."""
        paginated = self._catalog.mode is CatalogMode.PAGINATED
        self._state = replace(
            before,
            mode=self._catalog.mode,
            page_number=self._catalog.page_number,
            loading=False,
            pagination_visible=paginated,
            prev_enabled=paginated,
            next_enabled=paginated,
            messages=("Failed to load products.",),
        )
        return self._state

    async def _run(self, load: Awaitable[list[Product]]) -> ViewState:
        before = self._state
        self.begin_load()
        try:
            records = await load
        except Exception:
            self._fail(before)
            raise
        return self._settle(records)

    async def show(self, form: FilterForm | None = None) -> ViewState:
        """Load the current page, or the filter result when ``form`` is given.

        If the load raises, the view drops the loading state, re-enables
        navigation and the exception propagates.
        """
        if form is not None:
            return await self._run(self._catalog.search(form))
        return await self._run(self._catalog.load_page())

    async def show_next(self) -> ViewState:
        return await self._run(self._catalog.next_page())

    async def show_previous(self) -> ViewState:
        return await self._run(self._catalog.previous_page())


def render_card(product: Product) -> str:
    """Text card for one product."""
    return "\n".join(
        [
            product.product,
            f"  Price: {product.price}",
            f"  Brand: {product.display_brand}",
            f"  Id: {product.id}",
        ]
    )


def render_text(state: ViewState) -> str:
    """Render a whole view state as plain text."""
    if state.loading:
        return "Loading..."
    parts = [render_card(p) for p in state.records]
    parts.extend(state.messages)
    if state.pagination_visible:
        parts.append(f"-- page {state.page_number} --")
    return "\n\n".join(parts)
