"""High-level catalog session.

``ProductCatalog`` is the entry point for presentation code. It owns one
pager and one transport and exposes the three operations a catalog page
needs: load the next page, load the previous page, and load the records that
match a filter form. Every operation returns display-ready, deduplicated
``Product`` records.

Example:
    >>> async with ProductCatalog() as catalog:
    ...     first = await catalog.load_page()
    ...     second = await catalog.next_page()
    ...     acme = await catalog.search(FilterForm(brand="Acme"))
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from ..api.filters import FilterForm, build_filter_params
from ..core.config import CatalogConfig
from ..core.enums import Action, CatalogMode
from ..core.exceptions import ValidationError
from ..models import Product
from ..runtime.paging import IdentifierPager, dedupe_records, unique_ids
from ..runtime.rest import CatalogTransport

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Paginated and filtered access to the product catalog."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        *,
        transport: CatalogTransport | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            config: Client settings (defaults to ``CatalogConfig()``)
            transport: Optional transport; injected in tests
        """
        self._config = config or CatalogConfig()
        self._owns_transport = transport is None
        self._transport = transport or CatalogTransport(self._config)
        self._pager = IdentifierPager(self._config.page_size)
        self._mode = CatalogMode.PAGINATED
        self._records: list[Product] = []
        self._lock = asyncio.Lock()

    @property
    def mode(self) -> CatalogMode:
        return self._mode

    @property
    def page_number(self) -> int:
        return self._pager.page_number

    @property
    def pager(self) -> IdentifierPager:
        return self._pager

    @property
    def records(self) -> list[Product]:
        """Records from the most recent load."""
        return list(self._records)

    async def _fetch_ids(self, offset: int, limit: int) -> Sequence[Hashable]:
        result = await self._transport.call(Action.GET_IDS, {"offset": offset, "limit": limit})
        return result or []

    async def fetch_products(self, ids: Sequence[Hashable]) -> list[Product]:
        """Fetch descriptive records for ``ids``, one record per id."""
        if not ids:
            return []
        items = await self._transport.call(Action.GET_ITEMS, {"ids": list(ids)})
        try:
            return [Product.model_validate(item) for item in dedupe_records(items or [])]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed product record: {e}") from e

    def _seek(self, cursor: int) -> None:
        while self._pager.cursor < cursor:
            self._pager.advance_page()
        while self._pager.cursor > cursor and self._pager.retreat_page():
            pass

    @contextmanager
    def _rollback_on_error(self) -> Iterator[None]:
        """Restore cursor, mode and records if the wrapped load raises.

        Checkpoints discovered before the failure are kept; they stay valid.
        """
        cursor, mode, records = self._pager.cursor, self._mode, self._records
        try:
            yield
        except Exception:
            self._seek(cursor)
            self._mode = mode
            self._records = records
            raise

    async def _load_current(self) -> list[Product]:
        self._mode = CatalogMode.PAGINATED
        ids = await self._pager.next_identifier_page(self._fetch_ids)
        self._records = await self.fetch_products(ids)
        logger.info(
            "page_loaded",
            extra={"page": self._pager.page_number, "records": len(self._records)},
        )
        return self.records

    async def load_page(self) -> list[Product]:
        """Load the page under the cursor."""
        async with self._lock:
            with self._rollback_on_error():
                return await self._load_current()

    async def next_page(self) -> list[Product]:
        """Advance one page and load it."""
        async with self._lock:
            with self._rollback_on_error():
                self._pager.advance_page()
                return await self._load_current()

    async def previous_page(self) -> list[Product]:
        """Go back one page and load it.

        On the first page the cursor stays put and the current page is
        returned again.
        """
        async with self._lock:
            with self._rollback_on_error():
                moved = self._pager.retreat_page()
                if not moved and self._mode is CatalogMode.PAGINATED and self._records:
                    return self.records
                return await self._load_current()

    async def search(self, form: FilterForm) -> list[Product]:
        """Load every product matching ``form``.

        Entering search mode resets pagination to the first page. A form with
        no filled fields yields ``[]`` without contacting the API.
        """
        async with self._lock:
            with self._rollback_on_error():
                params: dict[str, Any] = build_filter_params(form)
                self._pager.reset()
                self._mode = CatalogMode.FILTERED
                if not params:
                    self._records = []
                    return []
                ids = unique_ids(await self._transport.call(Action.FILTER, params) or [])
                self._records = await self.fetch_products(ids)
                logger.info(
                    "filter_loaded",
                    extra={"filters": sorted(params), "records": len(self._records)},
                )
                return self.records

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> ProductCatalog:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
