"""Centralized configuration via pydantic-settings.

All ``AUDIXA_*`` environment variables are read, validated, and exposed here.
Logging env vars (``AUDIXA_LOG_FORMAT``, ``AUDIXA_LOG_LEVEL``) are intentionally
excluded — they stay in ``audixa.logging`` for bootstrap-safety.

Settings only provide defaults. Arguments passed to ``Audixa(...)`` or to a
call always win, and the library never reads the API key from the
environment (only the CLI does).

Usage::

    from audixa.config.settings import get_settings

    settings = get_settings()
    print(settings.client.timeout_ms)         # int, validated
    print(settings.polling.poll_interval_ms)  # int, validated

``.env`` files in the working directory are loaded automatically.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from audixa.exceptions import AudixaError, ErrorCode

DEFAULT_BASE_URL = "https://api.audixa.ai/v2"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_POLL_INTERVAL_MS = 1_000
DEFAULT_MAX_WAIT_MS = 120_000


class ClientSettings(BaseSettings):
    """HTTP client settings."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="AUDIXA_BASE_URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, validation_alias="AUDIXA_TIMEOUT_MS")


class PollingSettings(BaseSettings):
    """Defaults for ``Audixa.generate_tts`` polling."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    poll_interval_ms: int = Field(
        default=DEFAULT_POLL_INTERVAL_MS, gt=0, validation_alias="AUDIXA_POLL_INTERVAL_MS"
    )
    max_wait_ms: int = Field(
        default=DEFAULT_MAX_WAIT_MS, gt=0, validation_alias="AUDIXA_MAX_WAIT_MS"
    )


class CLISettings(BaseSettings):
    """CLI settings."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    api_key: str = Field(default="", validation_alias="AUDIXA_API_KEY")


class AudixaSettings(BaseSettings):
    """Root settings — aggregates all settings groups.

    Loads ``.env`` from the current directory when present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    client: ClientSettings = Field(default_factory=ClientSettings)
    polling: PollingSettings = Field(default_factory=PollingSettings)
    cli: CLISettings = Field(default_factory=CLISettings)


@lru_cache(maxsize=1)
def get_settings() -> AudixaSettings:
    """Return the singleton ``AudixaSettings`` instance.

    The result is cached — subsequent calls return the same object.
    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return AudixaSettings()


def load_settings() -> AudixaSettings:
    """Return ``get_settings()``, reporting invalid ``AUDIXA_*`` values as ``AudixaError``.

    Raises:
        AudixaError: INVALID_PARAMS if an environment value fails validation.
    """
    try:
        return get_settings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][-1]) for err in exc.errors() if err["loc"])
        raise AudixaError(
            f"Invalid AUDIXA_* configuration: {fields or exc.error_count()}",
            ErrorCode.INVALID_PARAMS,
        ) from exc
