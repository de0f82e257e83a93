"""Client configuration.

Configuration is plain frozen dataclasses validated in ``__post_init__``.
``CatalogConfig.from_env`` overlays ``VALANTIS_*`` environment variables on
top of the defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_ENDPOINT = "https://api.valantis.store:41000/"
DEFAULT_SECRET = "Valantis"
DEFAULT_PAGE_SIZE = 50
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class RetryPolicy:
    """Retry behaviour for transport calls.

    Attributes:
        max_attempts: Maximum attempts per call, or None to retry forever
        backoff: Initial delay in seconds between attempts (0 = no delay)
        multiplier: Growth factor applied to the delay after each failure
        max_backoff: Upper bound for the delay in seconds
    """

    max_attempts: int | None = None
    backoff: float = 0.0
    multiplier: float = 2.0
    max_backoff: float = 30.0

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 or None")
        if self.backoff < 0:
            raise ValueError("backoff must be non-negative")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if self.max_backoff < 0:
            raise ValueError("max_backoff must be non-negative")

    def delay_for(self, attempt: int) -> float:
        """Delay to wait after failed attempt number ``attempt`` (1-based)."""
        if self.backoff <= 0:
            return 0.0
        return min(self.backoff * self.multiplier ** (attempt - 1), self.max_backoff)

    def allows(self, attempt: int) -> bool:
        """Whether attempt number ``attempt`` (1-based) may be made."""
        return self.max_attempts is None or attempt <= self.max_attempts


@dataclass(frozen=True)
class CatalogConfig:
    """Settings for a catalog session."""

    endpoint: str = DEFAULT_ENDPOINT
    secret: str = DEFAULT_SECRET
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ValueError("endpoint must be a non-empty URL")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CatalogConfig:
        """Build a config from ``VALANTIS_*`` environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        max_attempts = env.get("VALANTIS_MAX_ATTEMPTS")
        retry = RetryPolicy(
            max_attempts=int(max_attempts) if max_attempts else None,
            backoff=float(env.get("VALANTIS_BACKOFF", 0.0)),
        )
        return cls(
            endpoint=env.get("VALANTIS_ENDPOINT", DEFAULT_ENDPOINT),
            secret=env.get("VALANTIS_SECRET", DEFAULT_SECRET),
            page_size=int(env.get("VALANTIS_PAGE_SIZE", DEFAULT_PAGE_SIZE)),
            timeout=float(env.get("VALANTIS_TIMEOUT", DEFAULT_TIMEOUT)),
            retry=retry,
        )
