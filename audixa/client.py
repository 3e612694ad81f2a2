"""Audixa — public client for the Audixa text-to-speech API.

Three pass-through operations (``start_tts``, ``get_status``, ``get_voices``)
and one composite, ``generate_tts``, which submits a job and polls its status
until the audio URL is available.

Example::

    audixa = Audixa("your-api-key")

    job = await audixa.start_tts(
        StartTTSRequest(text="Hello, this is a test of the Audixa API.", voice="en-US-female-1")
    )
    status = await audixa.get_status(job.generation_id)

    # Or submit and wait in one call
    url = await audixa.generate_tts(payload, poll_interval_ms=1000, max_wait_ms=60_000)
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from audixa._types import HTTPMethod, TTSModel, TTSStatus
from audixa.config.settings import load_settings
from audixa.exceptions import (
    AudixaError,
    ErrorCode,
    GenerationCancelledError,
    GenerationFailedError,
    GenerationTimeoutError,
)
from audixa.http_client import HttpClient
from audixa.logging import get_logger
from audixa.models.tts import StartTTSRequest, StartTTSResponse, TTSStatusResponse
from audixa.models.voices import GetVoicesResponse

logger = get_logger("client")

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class Audixa:
    """Client for the Audixa text-to-speech API.

    Stateless between calls: a generation is tracked only by the
    ``generation_id`` returned from ``start_tts``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: Audixa API key.
            base_url: Custom API base URL (default ``https://api.audixa.ai/v2``).
            timeout_ms: Per-request timeout in milliseconds (default 30000).
            transport: Optional httpx transport.

        Raises:
            AudixaError: INVALID_PARAMS if the API key is missing or not a string,
                or if an ``AUDIXA_*`` environment value is invalid.
        """
        self._http = HttpClient(
            api_key,
            base_url=base_url,
            timeout_ms=timeout_ms,
            transport=transport,
        )

    @property
    def http(self) -> HttpClient:
        return self._http

    async def start_tts(
        self,
        payload: StartTTSRequest | Mapping[str, Any],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> StartTTSResponse:
        """Start a new generation (POST /tts).

        Use ``get_status`` with the returned ``generation_id`` to poll for the result.

        Raises:
            AudixaError: When the request fails.
        """
        return await self._start_tts(payload, cancel_event, None)

    async def get_status(
        self,
        generation_id: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> TTSStatusResponse:
        """Get the status of a generation (GET /status).

        When ``status`` is ``Completed``, ``url`` points to the generated audio.

        Raises:
            AudixaError: When the request fails.
        """
        return await self._get_status(generation_id, cancel_event, None)

    async def get_voices(
        self,
        model: TTSModel | str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> GetVoicesResponse:
        """List the voices available for a model (GET /voices).

        Voices keep the order returned by the service.

        Raises:
            AudixaError: When the request fails.
        """
        model_name = model.value if isinstance(model, TTSModel) else model
        data = await self._http.request(
            HTTPMethod.GET,
            "/voices",
            params={"model": model_name},
            cancel_event=cancel_event,
        )
        return _parse(GetVoicesResponse, data, "/voices")

    async def generate_tts(
        self,
        payload: StartTTSRequest | Mapping[str, Any],
        *,
        poll_interval_ms: int | None = None,
        max_wait_ms: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> str:
        """Start a generation and wait until its audio URL is available.

        Polls ``get_status`` sequentially, sleeping ``poll_interval_ms`` between
        polls. A cancellation requested during the sleep is observed before
        the next poll. The submission and every poll share one
        HTTP session.

        Args:
            payload: Generation parameters.
            poll_interval_ms: Delay between polls (default 1000).
            max_wait_ms: Maximum time to wait after submission (default 120000).
            cancel_event: Caller's cancellation event.

        Returns:
            URL of the generated audio.

        Raises:
            GenerationFailedError: The service reported the job as failed.
            GenerationTimeoutError: ``max_wait_ms`` elapsed before completion.
            GenerationCancelledError: ``cancel_event`` was set between polls.
            AudixaError: When a request fails.
        """
        polling = load_settings().polling
        interval_ms = poll_interval_ms if poll_interval_ms is not None else polling.poll_interval_ms
        wait_ms = max_wait_ms if max_wait_ms is not None else polling.max_wait_ms

        async with self._http.open_session() as session:
            return await self._wait_for_audio(
                payload, interval_ms, wait_ms, cancel_event, session
            )

    async def _wait_for_audio(
        self,
        payload: StartTTSRequest | Mapping[str, Any],
        interval_ms: int,
        wait_ms: int,
        cancel_event: asyncio.Event | None,
        session: httpx.AsyncClient,
    ) -> str:
        job = await self._start_tts(payload, cancel_event, session)
        generation_id = job.generation_id
        logger.info("generation_started", generation_id=generation_id)

        start = time.monotonic()
        polls = 0

        while True:
            elapsed_ms = (time.monotonic() - start) * 1000
            if elapsed_ms > wait_ms:
                logger.warning(
                    "generation_timeout",
                    generation_id=generation_id,
                    max_wait_ms=wait_ms,
                    polls=polls,
                )
                raise GenerationTimeoutError(generation_id, wait_ms)

            if cancel_event is not None and cancel_event.is_set():
                logger.info("generation_cancelled", generation_id=generation_id, polls=polls)
                raise GenerationCancelledError(generation_id)

            status = await self._get_status(generation_id, cancel_event, session)
            polls += 1
            logger.debug(
                "generation_poll",
                generation_id=generation_id,
                status=status.status.value,
                poll=polls,
            )

            if status.status == TTSStatus.COMPLETED and status.url:
                logger.info(
                    "generation_completed",
                    generation_id=generation_id,
                    polls=polls,
                    elapsed_ms=round((time.monotonic() - start) * 1000, 1),
                )
                return status.url

            if status.status == TTSStatus.FAILED:
                logger.warning("generation_failed", generation_id=generation_id, polls=polls)
                raise GenerationFailedError(generation_id, status.model_dump(mode="json"))

            # Completed without a URL is treated as still in progress
            await asyncio.sleep(interval_ms / 1000)

    async def _start_tts(
        self,
        payload: StartTTSRequest | Mapping[str, Any],
        cancel_event: asyncio.Event | None,
        session: httpx.AsyncClient | None,
    ) -> StartTTSResponse:
        body = payload.to_payload() if isinstance(payload, StartTTSRequest) else dict(payload)
        data = await self._http.request(
            HTTPMethod.POST,
            "/tts",
            body=body,
            cancel_event=cancel_event,
            session=session,
        )
        return _parse(StartTTSResponse, data, "/tts")

    async def _get_status(
        self,
        generation_id: str,
        cancel_event: asyncio.Event | None,
        session: httpx.AsyncClient | None,
    ) -> TTSStatusResponse:
        data = await self._http.request(
            HTTPMethod.GET,
            "/status",
            params={"generation_id": generation_id},
            cancel_event=cancel_event,
            session=session,
        )
        return _parse(TTSStatusResponse, data, "/status")


def _parse(model: type[_ModelT], data: Any, path: str) -> _ModelT:
    """Validate a success body against the expected model."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise AudixaError(
            f"Unexpected response payload from {path}: {exc.error_count()} validation error(s)",
            ErrorCode.UNKNOWN,
            response=data if isinstance(data, (Mapping, str)) else None,
        ) from exc
