"""Unit tests for CatalogView state transitions and text rendering."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from valantis.catalog import (
    CatalogMode,
    CatalogView,
    FilterForm,
    Product,
    ProductCatalog,
    ViewState,
    render_card,
    render_text,
)
from valantis.catalog.core import RetryExhaustedError

RING = Product(id="1-2", product="Ring", price=Decimal("16700.0"), brand="Piaget")
CHAIN = Product(id="3-4", product="Chain", price=Decimal("500"), brand=None)


@pytest.fixture
def catalog():
    mock = MagicMock(spec=ProductCatalog)
    mock.mode = CatalogMode.PAGINATED
    mock.page_number = 1
    mock.load_page = AsyncMock(return_value=[RING, CHAIN])
    mock.next_page = AsyncMock(return_value=[CHAIN])
    mock.previous_page = AsyncMock(return_value=[RING])
    mock.search = AsyncMock(return_value=[RING])
    return mock


class TestCatalogView:
    """Test view state transitions."""

    def test_initial_state(self, catalog):
        view = CatalogView(catalog)
        assert view.state == ViewState()
        assert not view.state.pagination_visible

    def test_begin_load_disables_navigation(self, catalog):
        view = CatalogView(catalog)
        state = view.begin_load()
        assert state.loading
        assert not state.prev_enabled
        assert not state.next_enabled

    @pytest.mark.asyncio
    async def test_show_paginated(self, catalog):
        view = CatalogView(catalog)

        state = await view.show()

        assert state.records == (RING, CHAIN)
        assert not state.loading
        assert state.pagination_visible
        assert state.prev_enabled and state.next_enabled
        assert state.page_number == 1
        catalog.load_page.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_show_filtered_hides_pagination(self, catalog):
        catalog.mode = CatalogMode.FILTERED
        view = CatalogView(catalog)
        form = FilterForm(product="Ring")

        state = await view.show(form)

        catalog.search.assert_awaited_once_with(form)
        assert state.mode is CatalogMode.FILTERED
        assert not state.pagination_visible
        assert not state.next_enabled

    @pytest.mark.asyncio
    async def test_show_next_and_previous(self, catalog):
        view = CatalogView(catalog)

        catalog.page_number = 2
        state = await view.show_next()
        assert state.records == (CHAIN,)
        assert state.page_number == 2

        catalog.page_number = 1
        state = await view.show_previous()
        assert state.records == (RING,)
        assert state.page_number == 1

    @pytest.mark.asyncio
    async def test_failed_load_leaves_loading_state(self, catalog):
        view = CatalogView(catalog)
        await view.show()
        catalog.next_page.side_effect = RetryExhaustedError("get_ids failed", attempts=3)

        with pytest.raises(RetryExhaustedError):
            await view.show_next()

        state = view.state
        assert not state.loading
        assert state.prev_enabled and state.next_enabled
        assert state.pagination_visible
        assert state.records == (RING, CHAIN)
        assert state.page_number == 1
        assert state.messages == ("Failed to load products.",)

    @pytest.mark.asyncio
    async def test_failed_search_keeps_filtered_controls_hidden(self, catalog):
        catalog.mode = CatalogMode.FILTERED
        catalog.search.side_effect = RetryExhaustedError("filter failed", attempts=3)
        view = CatalogView(catalog)

        with pytest.raises(RetryExhaustedError):
            await view.show(FilterForm(brand="Acme"))

        assert not view.state.loading
        assert not view.state.pagination_visible

    @pytest.mark.asyncio
    async def test_recovers_after_failure(self, catalog):
        catalog.load_page.side_effect = [RetryExhaustedError("down", attempts=1), [RING]]
        view = CatalogView(catalog)

        with pytest.raises(RetryExhaustedError):
            await view.show()
        state = await view.show()

        assert state.records == (RING,)
        assert state.messages == ()

    @pytest.mark.asyncio
    async def test_empty_result_message(self, catalog):
        catalog.load_page.return_value = []
        view = CatalogView(catalog)

        state = await view.show()

        assert state.messages == ("No products found.",)


class TestRendering:
    """Test text rendering."""

    def test_render_card(self):
        assert render_card(RING) == (
            "Ring\n  Price: 16700.0\n  Brand: Piaget\n  Id: 1-2"
        )

    def test_render_card_without_brand(self):
        assert "Brand: -" in render_card(CHAIN)

    def test_render_loading(self):
        assert render_text(ViewState(loading=True)) == "Loading..."

    def test_render_page(self):
        state = ViewState(records=(RING, CHAIN), pagination_visible=True, page_number=3)
        text = render_text(state)
        assert text.startswith("Ring")
        assert "Chain" in text
        assert text.endswith("-- page 3 --")
