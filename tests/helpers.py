"""Shared test helpers for HTTP-level tests.

Usage:
    from tests.helpers import RecordingHandler, make_audixa, make_http_client
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from audixa.client import Audixa
from audixa.http_client import HttpClient

API_KEY = "test-api-key"
BASE_URL = "https://api.test/v2"

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


class RecordingHandler:
    """MockTransport handler that records requests and replays responses.

    ``responses`` items are either an ``httpx.Response`` or a callable taking
    the request. An ``Exception`` item is raised instead. The last item is
    reused once the list is exhausted. ``delay_s`` makes every response wait,
    so timeouts and cancellation can be exercised.
    """

    def __init__(self, responses: list[Any], *, delay_s: float = 0.0) -> None:
        self._responses = list(responses)
        self._delay_s = delay_s
        self.requests: list[httpx.Request] = []
        self.times: list[float] = []
        self.completed = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.times.append(time.monotonic())
        index = min(len(self.requests), len(self._responses)) - 1
        item = self._responses[index]
        if self._delay_s:
            await asyncio.sleep(self._delay_s)
        self.completed += 1
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)  # type: ignore[no-any-return]
        return item  # type: ignore[no-any-return]

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


def make_http_client(handler: Handler, **kwargs: Any) -> HttpClient:
    kwargs.setdefault("base_url", BASE_URL)
    return HttpClient(API_KEY, transport=httpx.MockTransport(handler), **kwargs)


def make_audixa(handler: Handler, **kwargs: Any) -> Audixa:
    kwargs.setdefault("base_url", BASE_URL)
    return Audixa(API_KEY, transport=httpx.MockTransport(handler), **kwargs)


def status_response(status: str, url: str | None = None, generation_id: str = "gen-1") -> httpx.Response:
    return httpx.Response(
        200,
        json={"status": status, "url": url, "generation_id": generation_id},
    )
