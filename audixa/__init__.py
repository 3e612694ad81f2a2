"""Audixa — async Python client for the Audixa text-to-speech API."""

from audixa._types import HTTPMethod, TTSEmotion, TTSModel, TTSStatus
from audixa.client import Audixa
from audixa.exceptions import (
    AudixaError,
    ErrorCode,
    GenerationCancelledError,
    GenerationError,
    GenerationFailedError,
    GenerationTimeoutError,
)
from audixa.models import (
    GetVoicesResponse,
    StartTTSRequest,
    StartTTSResponse,
    TTSStatusResponse,
    Voice,
)

__version__ = "0.1.0"

__all__ = [
    "Audixa",
    "AudixaError",
    "ErrorCode",
    "GenerationCancelledError",
    "GenerationError",
    "GenerationFailedError",
    "GenerationTimeoutError",
    "GetVoicesResponse",
    "HTTPMethod",
    "StartTTSRequest",
    "StartTTSResponse",
    "TTSEmotion",
    "TTSModel",
    "TTSStatus",
    "TTSStatusResponse",
    "Voice",
    "__version__",
]
