"""Pydantic models for the Audixa REST payloads."""

from audixa.models.tts import StartTTSRequest, StartTTSResponse, TTSStatusResponse
from audixa.models.voices import GetVoicesResponse, Voice

__all__ = [
    "GetVoicesResponse",
    "StartTTSRequest",
    "StartTTSResponse",
    "TTSStatusResponse",
    "Voice",
]
