"""Pydantic models for GET /voices."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from audixa._types import TTSModel


class Voice(BaseModel):
    """A single voice offered by the service."""

    model_config = ConfigDict(frozen=True)

    voice_id: str = Field(description="Unique identifier for the voice.")
    name: str = Field(description="Display name.")
    gender: str
    accent: str
    free: bool = Field(description="Whether the voice is available on the free tier.")
    description: str = ""


class GetVoicesResponse(BaseModel):
    """Response for GET /voices. ``voices`` keeps the order sent by the service."""

    user_id: str
    model: TTSModel
    voices: list[Voice] = Field(default_factory=list)
