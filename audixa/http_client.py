"""HttpClient — request dispatcher for the Audixa REST API.

Responsibilities:
- Compose the request URL from the configured base URL, a path and query params.
- Send JSON with the ``x-api-key`` header.
- Enforce the client timeout over the whole exchange.
- Honor the caller's cancellation event (abort-on-either with the timeout).
- Parse the response by content type and normalize every failure into
  ``AudixaError``.

No retries are performed; a failed attempt is surfaced immediately.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Mapping
from typing import Any

import httpx

from audixa._types import HTTPMethod
from audixa.config.settings import load_settings
from audixa.exceptions import AudixaError, ErrorCode
from audixa.logging import get_logger

logger = get_logger("http_client")

API_KEY_HEADER = "x-api-key"


class HttpClient:
    """Internal HTTP client shared by the ``Audixa`` operations.

    Holds only immutable configuration. Every ``request()`` creates its own
    timer and cancellation watcher. It also opens its own ``httpx.AsyncClient``
    unless the caller passes a session from ``open_session()``, which lets a
    sequence of calls reuse one connection.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create the client.

        Args:
            api_key: Audixa API key. Required, non-empty string.
            base_url: API base URL. Defaults to ``AUDIXA_BASE_URL`` or the public endpoint.
            timeout_ms: Request timeout in milliseconds. Defaults to ``AUDIXA_TIMEOUT_MS`` (30000).
            transport: Optional httpx transport (custom networking, tests).

        Raises:
            AudixaError: INVALID_PARAMS if the API key is missing or not a string,
                or if an ``AUDIXA_*`` environment value is invalid.
        """
        if not isinstance(api_key, str) or not api_key:
            raise AudixaError(
                "API key is required and must be a string",
                ErrorCode.INVALID_PARAMS,
            )

        settings = load_settings().client
        self._api_key = api_key
        self._base_url = base_url or settings.base_url
        self._timeout_ms = timeout_ms or settings.timeout_ms
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    def build_url(self, path: str, params: Mapping[str, str] | None = None) -> str:
        """Join base URL and path with exactly one slash, then append query params."""
        base = self._base_url.rstrip("/")
        url = httpx.URL(f"{base}/{path.lstrip('/')}")
        if params:
            url = url.copy_merge_params(dict(params))
        return str(url)

    def open_session(self) -> httpx.AsyncClient:
        """Open an ``httpx.AsyncClient`` for this API; close it with ``async with``."""
        # Timeout is enforced by request(), not by httpx
        return httpx.AsyncClient(transport=self._transport, timeout=None)

    async def request(
        self,
        method: HTTPMethod | str,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
        cancel_event: asyncio.Event | None = None,
        session: httpx.AsyncClient | None = None,
    ) -> Any:
        """Make a request to the Audixa API.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            body: JSON body, sent only for POST/PUT/PATCH.
            params: Query parameters.
            cancel_event: Caller's cancellation event. Setting it aborts the request.
            session: Open client from ``open_session()``. A fresh one is used when None.

        Returns:
            Parsed JSON (or raw text for non-JSON responses). Not validated.

        Raises:
            AudixaError: On HTTP error status, network failure, timeout or cancellation.
        """
        method = HTTPMethod(method.upper()) if isinstance(method, str) else method
        url = self.build_url(path, params)

        if cancel_event is not None and cancel_event.is_set():
            logger.debug("request_cancelled_before_send", method=method.value, path=path)
            raise AudixaError.cancelled()

        start = time.monotonic()
        request_task = asyncio.ensure_future(self._send(method, url, body, session))
        cancel_task = (
            asyncio.ensure_future(cancel_event.wait()) if cancel_event is not None else None
        )
        waiters: set[asyncio.Future[Any]] = {request_task}
        if cancel_task is not None:
            waiters.add(cancel_task)

        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=self._timeout_ms / 1000,
                return_when=asyncio.FIRST_COMPLETED,
            )
            if request_task in done:
                return request_task.result()
            # Caller's event has priority over the timer when both fired
            if cancel_event is not None and cancel_event.is_set():
                raise AudixaError.cancelled()
            raise AudixaError.timeout()
        except AudixaError as exc:
            self._log_failure(method, path, exc, start)
            raise
        except httpx.TimeoutException as exc:
            error = AudixaError.timeout()
            self._log_failure(method, path, error, start)
            raise error from exc
        except httpx.HTTPError as exc:
            error = AudixaError.network_error(exc)
            self._log_failure(method, path, error, start)
            raise error from exc
        except Exception as exc:
            error = AudixaError(f"An unknown error occurred: {exc}", ErrorCode.UNKNOWN)
            self._log_failure(method, path, error, start)
            raise error from exc
        finally:
            await _dispose(request_task, cancel_task)

    async def _send(
        self,
        method: HTTPMethod,
        url: str,
        body: Mapping[str, Any] | None,
        session: httpx.AsyncClient | None,
    ) -> Any:
        headers = {
            "Content-Type": "application/json",
            API_KEY_HEADER: self._api_key,
        }
        json_body = dict(body) if body is not None and method.has_body else None

        if session is None:
            async with self.open_session() as client:
                response = await client.request(
                    method.value, url, headers=headers, json=json_body
                )
        else:
            response = await session.request(method.value, url, headers=headers, json=json_body)

        data: Any
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type and response.content:
            data = response.json()
        else:
            data = response.text

        logger.debug(
            "response_received",
            method=method.value,
            url=url,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise AudixaError.from_response(response.status_code, data)
        return data

    @staticmethod
    def _log_failure(
        method: HTTPMethod,
        path: str,
        error: AudixaError,
        start: float,
    ) -> None:
        logger.warning(
            "request_failed",
            method=method.value,
            path=path,
            code=error.code.value,
            status=error.status,
            error=error.message,
            elapsed_ms=round((time.monotonic() - start) * 1000, 1),
        )


async def _dispose(*tasks: asyncio.Future[Any] | None) -> None:
    """Cancel and await pending tasks; consume results of finished ones."""
    for task in tasks:
        if task is None:
            continue
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        elif not task.cancelled():
            # Mark exception as retrieved (no "never retrieved" warning)
            task.exception()
