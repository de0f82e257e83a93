"""Retrying transport for the product API.

Every logical call is a ``POST`` of ``{"action": ..., "params": ...}`` to a
single endpoint, authenticated by a token recomputed per attempt. A call only
returns once the endpoint answers with a 2xx status and a JSON envelope with
a ``result`` field. Failed attempts are logged and retried according to the
configured ``RetryPolicy``; the default policy retries forever without delay.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...auth import auth_headers
from ...core.config import CatalogConfig, RetryPolicy
from ...core.exceptions import RequestCancelledError, RetryExhaustedError
from .http_client import HTTPClient, RawResponse

logger = logging.getLogger(__name__)


class _MalformedEnvelope(Exception):
    pass


def _decode_result(response: RawResponse) -> Any:
    try:
        payload = json.loads(response.text)
    except ValueError as e:
        raise _MalformedEnvelope(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict) or "result" not in payload:
        raise _MalformedEnvelope("response has no 'result' field")
    return payload["result"]


def _log_failure(action: str, attempt: int, status: int | None, detail: object) -> None:
    logger.error(
        "Request error with code: %s and text: %s",
        status,
        detail,
        extra={"action": str(action), "attempt": attempt},
    )


class CatalogTransport:
    """Issues actions against the product endpoint."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        *,
        http: HTTPClient | None = None,
    ) -> None:
        self._config = config or CatalogConfig()
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=self._config.timeout)

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._config.retry

    async def call(
        self,
        action: str,
        params: Mapping[str, Any],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """Run ``action`` with ``params`` and return the envelope's ``result``.

        Args:
            action: Remote action name (see ``Action``)
            params: Action parameters, sent as the ``params`` object
            cancel_event: When set, the retry loop stops before its next attempt

        Raises:
            RetryExhaustedError: A bounded retry policy ran out of attempts
            RequestCancelledError: ``cancel_event`` was set
        """
        policy = self._config.retry
        body = {"action": str(action), "params": dict(params)}
        attempt = 0
        last_status: int | None = None

        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError(f"{action} cancelled", attempts=attempt)
            attempt += 1
            headers = auth_headers(secret=self._config.secret)

            try:
                response = await self._http.post(
                    self._config.endpoint, json_body=body, headers=headers
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_status = None
                _log_failure(action, attempt, None, e)
            else:
                last_status = response.status
                if response.ok:
                    try:
                        return _decode_result(response)
                    except _MalformedEnvelope as e:
                        _log_failure(action, attempt, response.status, e)
                else:
                    _log_failure(action, attempt, response.status, response.text)

            if not policy.allows(attempt + 1):
                raise RetryExhaustedError(
                    f"{action} failed after {attempt} attempts",
                    attempts=attempt,
                    status_code=last_status,
                )
            # sleep(0) still yields, so an unbounded loop stays cancellable
            await asyncio.sleep(policy.delay_for(attempt))

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> CatalogTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
