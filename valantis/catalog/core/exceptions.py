"""Custom exception hierarchy."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(CatalogError):
    """Error talking to the remote product API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RetryExhaustedError(TransportError):
    """A bounded retry policy ran out of attempts.

    Only raised when ``RetryPolicy.max_attempts`` is set. The default policy
    retries forever and never surfaces a failure to the caller.
    """

    def __init__(
        self,
        message: str,
        attempts: int,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.attempts = attempts


class RequestCancelledError(TransportError):
    """Retry loop was stopped through its cancel event."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class ValidationError(CatalogError):
    """Input validation failure."""

    pass
