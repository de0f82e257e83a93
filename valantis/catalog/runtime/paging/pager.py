"""Checkpoint-based pager over a duplicate-prone identifier listing.

The ``get_ids`` listing is offset based but repeats identifiers, so a fixed
``offset = page * size`` scheme would give pages with fewer unique ids than
requested. The pager instead discovers page boundaries lazily: the first
visit to a page over-fetches ``2 * page_size`` raw ids and scans until it has
``page_size`` unique ones, recording where the next page starts. Revisits
reuse the recorded boundaries.

State:
    checkpoints: Strictly increasing raw offsets; ``checkpoints[n]`` is where
        page ``n`` starts. Starts as ``[0]`` and only ever grows by appending.
    cursor: Index of the current page.
    exhausted: Set once a fetch came back shorter than requested, meaning the
        listing has no data past the last checkpoint.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Hashable, Sequence
from dataclasses import dataclass

from .dedupe import unique_ids

logger = logging.getLogger(__name__)

FetchIds = Callable[[int, int], Awaitable[Sequence[Hashable]]]


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one over-fetched batch.

    Attributes:
        ids: Unique ids in first-seen order
        consumed: Number of raw entries that belong to the page
        complete: Whether ``page_size`` unique ids were found
    """

    ids: list[Hashable]
    consumed: int
    complete: bool


def scan_page(raw: Sequence[Hashable], page_size: int) -> ScanResult:
    """Collect ``page_size`` unique ids from the head of ``raw``.

    Stops at the first raw position ``i`` where the unique count equals
    ``page_size`` and ``raw[i]`` differs from ``raw[i - 1]``. If that never
    happens the whole batch is consumed and the result is incomplete.
    """
    seen: dict[Hashable, None] = {}
    for i, value in enumerate(raw):
        seen[value] = None
        if len(seen) == page_size and (i == 0 or value != raw[i - 1]):
            return ScanResult(ids=list(seen), consumed=i + 1, complete=True)
    return ScanResult(ids=list(seen), consumed=len(raw), complete=False)


class IdentifierPager:
    """Tracks page boundaries and the current page of an id listing."""

    def __init__(self, page_size: int = 50) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = page_size
        self._checkpoints: list[int] = [0]
        self._cursor = 0
        self._exhausted = False

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def checkpoints(self) -> tuple[int, ...]:
        return tuple(self._checkpoints)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def page_number(self) -> int:
        """One-based page number for display."""
        return self._cursor + 1

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance_page(self) -> None:
        """Move to the next page. Unbounded; unknown pages are discovered on load."""
        self._cursor += 1

    def retreat_page(self) -> bool:
        """Move to the previous page. Returns False (no-op) on the first page."""
        if self._cursor < 1:
            return False
        self._cursor -= 1
        return True

    def reset(self) -> None:
        """Return to the first page. Discovered checkpoints are kept."""
        self._cursor = 0

    def is_known(self, page: int) -> bool:
        """Whether both boundaries of ``page`` have been discovered."""
        return page + 1 < len(self._checkpoints)

    async def next_identifier_page(self, fetch: FetchIds) -> list[Hashable]:
        """Return the unique ids of the page under the cursor.

        Args:
            fetch: ``fetch(offset, limit)`` returning raw ids from the listing
        """
        # Pages skipped by repeated advance_page() calls are discovered in order
        while len(self._checkpoints) <= self._cursor:
            if self._exhausted:
                return []
            await self._discover(len(self._checkpoints) - 1, fetch)

        if self.is_known(self._cursor):
            start = self._checkpoints[self._cursor]
            limit = self._checkpoints[self._cursor + 1] - start
            return unique_ids(await fetch(start, limit))

        if self._exhausted:
            return []
        return await self._discover(self._cursor, fetch)

    async def _discover(self, page: int, fetch: FetchIds) -> list[Hashable]:
        offset = self._checkpoints[page]
        limit = self._page_size * 2
        raw = list(await fetch(offset, limit))
        result = scan_page(raw, self._page_size)

        if len(raw) < limit and not result.complete:
            self._exhausted = True
        if result.consumed:
            self._checkpoints.append(offset + result.consumed)

        logger.debug(
            "checkpoint_discovered",
            extra={
                "page": page,
                "offset": offset,
                "raw_count": len(raw),
                "unique_count": len(result.ids),
                "next_offset": self._checkpoints[-1],
                "exhausted": self._exhausted,
            },
        )
        return result.ids
