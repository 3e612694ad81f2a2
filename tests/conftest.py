"""Shared fixtures for all tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

# Ensure repo root is on sys.path so tests can import the `audixa` package
# when running pytest from the repository root without an editable install.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from audixa.config.settings import get_settings  # noqa: E402
from tests.helpers import API_KEY  # noqa: E402

_ENV_VARS = (
    "AUDIXA_API_KEY",
    "AUDIXA_BASE_URL",
    "AUDIXA_TIMEOUT_MS",
    "AUDIXA_POLL_INTERVAL_MS",
    "AUDIXA_MAX_WAIT_MS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Clear AUDIXA_* env vars and the settings cache around each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def voices_payload() -> dict[str, Any]:
    """GET /voices body with voices deliberately not in alphabetical order."""
    return {
        "user_id": "user-42",
        "model": "base",
        "voices": [
            {
                "voice_id": "en-US-male-3",
                "name": "Zack",
                "gender": "male",
                "accent": "american",
                "free": False,
                "description": "Deep and calm.",
            },
            {
                "voice_id": "en-GB-female-1",
                "name": "Amelia",
                "gender": "female",
                "accent": "british",
                "free": True,
                "description": "Bright, clear narration voice.",
            },
            {
                "voice_id": "en-US-female-2",
                "name": "Maya",
                "gender": "female",
                "accent": "american",
                "free": True,
                "description": "Warm conversational tone.",
            },
        ],
    }


@pytest.fixture
def tts_payload() -> dict[str, Any]:
    return {
        "text": "Hello world, this is a test of the text-to-speech API.",
        "voice": "en-US-female-2",
    }
