"""Order-preserving deduplication of identifiers and records."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def unique_ids(ids: Iterable[H]) -> list[H]:
    """Drop repeated identifiers, keeping first-seen order."""
    return list(dict.fromkeys(ids))


def _key_of(record: Any, key: str) -> Hashable:
    if isinstance(record, Mapping):
        return record[key]
    return getattr(record, key)


def dedupe_records(records: Iterable[T], key: str = "id") -> list[T]:
    """Keep the first record for each ``key`` value, in input order.

    Records may be mappings (raw API items) or objects exposing ``key`` as an
    attribute (``Product`` models).
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for record in records:
        k = _key_of(record, key)
        if k in seen:
            continue
        seen.add(k)
        result.append(record)
    return result
