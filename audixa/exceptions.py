"""Typed exceptions for the Audixa client.

Every failure the client surfaces is an ``AudixaError`` carrying an
``ErrorCode``, so callers can branch on ``err.code`` alone.

Hierarchy:
    AudixaError (base)
    +-- GenerationError
        +-- GenerationFailedError     (UNKNOWN)
        +-- GenerationTimeoutError    (TIMEOUT)
        +-- GenerationCancelledError  (UNKNOWN)
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Closed set of error kinds."""

    INVALID_PARAMS = "INVALID_PARAMS"
    INVALID_API_KEY = "INVALID_API_KEY"
    INSUFFICIENT_CREDITS = "INSUFFICIENT_CREDITS"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"


_STATUS_TO_CODE: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_PARAMS,
    401: ErrorCode.INVALID_API_KEY,
    402: ErrorCode.INSUFFICIENT_CREDITS,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
}


def error_code_from_status(status: int) -> ErrorCode:
    """Map an unsuccessful HTTP status code to an ``ErrorCode``."""
    return _STATUS_TO_CODE.get(status, ErrorCode.UNKNOWN)


class AudixaError(Exception):
    """Base for all Audixa client errors.

    Attributes:
        message: Human-readable description.
        code: Error kind for programmatic handling.
        status: HTTP status code, when the failure came from a response.
        response: Parsed response payload (JSON object or raw text), for diagnostics.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        status: int | None = None,
        response: Mapping[str, Any] | str | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status = status
        self.response = response
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, code={self.code.value}, "
            f"status={self.status!r})"
        )

    @classmethod
    def from_response(
        cls,
        status: int,
        response: Mapping[str, Any] | str | None = None,
    ) -> AudixaError:
        """Build an error from a completed but unsuccessful HTTP response.

        The message prefers the body's ``message`` field, then its ``error``
        field, and falls back to a generic text containing the status code.
        """
        message: Any = None
        if isinstance(response, Mapping):
            message = response.get("message") or response.get("error")
        if not message:
            message = f"Request failed with status {status}"
        return cls(str(message), error_code_from_status(status), status, response)

    @classmethod
    def network_error(cls, original: BaseException) -> AudixaError:
        """Transport-level failure (DNS, refused connection, TLS, protocol)."""
        return cls(f"Network error: {original}", ErrorCode.NETWORK_ERROR)

    @classmethod
    def timeout(cls) -> AudixaError:
        """The configured request timeout elapsed."""
        return cls("Request timed out", ErrorCode.TIMEOUT)

    @classmethod
    def cancelled(cls) -> AudixaError:
        """The caller's cancellation event fired before the response arrived.

        Cancellation is not a kind of its own; it is reported as UNKNOWN.
        """
        return cls("Request was cancelled", ErrorCode.UNKNOWN)


# --- generate_tts polling outcomes ---


class GenerationError(AudixaError):
    """A generation job did not produce an audio URL."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        generation_id: str,
        response: Mapping[str, Any] | str | None = None,
    ) -> None:
        self.generation_id = generation_id
        super().__init__(message, code, response=response)


class GenerationFailedError(GenerationError):
    """The service reported the job as failed."""

    def __init__(
        self,
        generation_id: str,
        response: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__("TTS generation failed", ErrorCode.UNKNOWN, generation_id, response)


class GenerationTimeoutError(GenerationError):
    """The job did not finish within the maximum wait time."""

    def __init__(self, generation_id: str, max_wait_ms: int) -> None:
        self.max_wait_ms = max_wait_ms
        super().__init__(
            f"Generation timed out after {max_wait_ms}ms",
            ErrorCode.TIMEOUT,
            generation_id,
        )


class GenerationCancelledError(GenerationError):
    """The caller cancelled while waiting for the job."""

    def __init__(self, generation_id: str) -> None:
        super().__init__("Generation was cancelled", ErrorCode.UNKNOWN, generation_id)
