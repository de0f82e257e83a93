"""Daily authentication token for the product API.

The API expects an ``X-Auth`` header holding the MD5 digest of
``"<secret>_<YYYYMMDD>"`` for the current UTC date. Tokens roll over at UTC
midnight, so the value is recomputed for every request.
"""

from __future__ import annotations

import hashlib
from datetime import UTC, datetime

from .core.config import DEFAULT_SECRET

AUTH_HEADER = "X-Auth"


def date_stamp(now: datetime | None = None) -> str:
    """Format the UTC calendar date of ``now`` as ``YYYYMMDD``.

    Naive datetimes are taken to be UTC already.
    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is not None:
        now = now.astimezone(UTC)
    return now.strftime("%Y%m%d")


def current_token(now: datetime | None = None, *, secret: str = DEFAULT_SECRET) -> str:
    """Return the auth token valid for the UTC date of ``now``."""
    raw = f"{secret}_{date_stamp(now)}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def auth_headers(now: datetime | None = None, *, secret: str = DEFAULT_SECRET) -> dict[str, str]:
    """Headers carrying a freshly computed token."""
    return {AUTH_HEADER: current_token(now, secret=secret)}
