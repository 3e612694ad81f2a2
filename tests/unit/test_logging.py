"""Tests for audixa.logging — structlog configuration helpers."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

import audixa.logging as audixa_logging

ROOT = Path(__file__).resolve().parents[2]


class TestConfigureLogging:
    def test_idempotent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(audixa_logging, "_configured", False)
        audixa_logging.configure_logging(log_format="json", level="DEBUG")
        handlers = list(logging.getLogger("audixa").handlers)

        audixa_logging.configure_logging(log_format="console", level="ERROR")

        assert logging.getLogger("audixa").handlers == handlers
        assert logging.getLogger("audixa").level == logging.DEBUG

    def test_leaves_root_logger_alone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        root_handlers = list(logging.getLogger().handlers)
        monkeypatch.setattr(audixa_logging, "_configured", False)

        audixa_logging.configure_logging(level="INFO")

        assert logging.getLogger().handlers == root_handlers
        assert logging.getLogger("audixa").propagate is False

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(audixa_logging, "_configured", False)
        monkeypatch.setenv("AUDIXA_LOG_LEVEL", "warning")

        audixa_logging.configure_logging()

        assert logging.getLogger("audixa").level == logging.WARNING


class TestGetLogger:
    def test_binds_component(self) -> None:
        logger = audixa_logging.get_logger("http_client")
        bound = logger.bind()
        assert bound._context["component"] == "http_client"  # type: ignore[attr-defined]

    def test_does_not_configure_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(audixa_logging, "_configured", False)

        audixa_logging.get_logger("client")

        assert audixa_logging._configured is False


_HOST_APP = """
import structlog

def marker(logger, method_name, event_dict):
    return event_dict

structlog.configure(processors=[marker, structlog.processors.KeyValueRenderer()])

import audixa
from audixa.logging import get_logger

audixa.Audixa("key")
get_logger("client")

assert marker in structlog.get_config()["processors"], structlog.get_config()["processors"]
"""


class TestImportSideEffects:
    def test_host_structlog_config_survives_import(self) -> None:
        env = {k: v for k, v in os.environ.items() if not k.startswith("AUDIXA_")}
        env["PYTHONPATH"] = str(ROOT)

        result = subprocess.run(
            [sys.executable, "-c", _HOST_APP],
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 0, result.stderr
