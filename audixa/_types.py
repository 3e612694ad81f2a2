"""Core types for the Audixa client.

Enums shared by the wire models, the HTTP layer, and the CLI.
"""

from __future__ import annotations

from enum import Enum


class TTSModel(Enum):
    """Synthesis model offered by the service."""

    BASE = "base"
    ADVANCE = "advance"


class TTSEmotion(Enum):
    """Voice emotion (advance model only)."""

    NEUTRAL = "neutral"
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    SURPRISED = "surprised"


class TTSStatus(Enum):
    """Status of a generation job.

    Valid transitions:
        GENERATING -> COMPLETED
        GENERATING -> FAILED

    COMPLETED and FAILED are terminal. Transitions are only observed by
    polling; the service does not push updates.
    """

    GENERATING = "Generating"
    COMPLETED = "Completed"
    FAILED = "Failed"


class HTTPMethod(Enum):
    """HTTP methods accepted by the request dispatcher."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @property
    def has_body(self) -> bool:
        return self in (HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH)
