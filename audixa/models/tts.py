"""Pydantic models for the generation endpoints (POST /tts, GET /status)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from audixa._types import TTSEmotion, TTSModel, TTSStatus


class StartTTSRequest(BaseModel):
    """Request body for POST /tts.

    Ranges are documented but not enforced here; the service validates them
    and answers 400 (INVALID_PARAMS) when they are out of bounds.
    """

    text: str = Field(description="Text to synthesize (the service requires at least 30 chars).")
    voice: str = Field(description="Voice identifier, see GET /voices.")
    model: TTSModel | None = Field(default=None, description="Model to use (service default: base).")
    speed: float | None = Field(default=None, description="Speech speed multiplier (0.5-2.0).")
    # Advance model only
    emotion: TTSEmotion | None = Field(default=None, description="Voice emotion.")
    temperature: float | None = Field(default=None, description="Sampling temperature (0.7-0.9).")
    top_p: float | None = Field(default=None, description="Nucleus sampling parameter (0.7-0.98).")
    do_sample: bool | None = Field(default=None, description="Whether to use sampling.")

    def to_payload(self) -> dict[str, Any]:
        """JSON body with unset fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)


class StartTTSResponse(BaseModel):
    """Response for POST /tts."""

    model_config = ConfigDict(extra="allow")

    generation_id: str = Field(description="Opaque job handle used to poll GET /status.")


class TTSStatusResponse(BaseModel):
    """Response for GET /status.

    Extra fields sent by the service are kept on the model.
    """

    model_config = ConfigDict(extra="allow")

    status: TTSStatus
    url: str | None = Field(default=None, description="Audio URL, set once completed.")
    generation_id: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (TTSStatus.COMPLETED, TTSStatus.FAILED)
