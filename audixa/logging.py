"""Structured logging for the Audixa client.

Uses structlog with stdlib logging as the backend. Two formats:
- console: human-readable for development (default)
- json: structured for production

The library only emits events. ``configure_logging()`` is called by the CLI
(or by an application that wants this setup); it attaches handlers to the
``audixa`` logger only and leaves the root logger alone.
"""

from __future__ import annotations

import logging
import os

import structlog

_configured = False


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
) -> None:
    """Configure structured logging.

    Idempotent — subsequent calls are ignored.

    Args:
        log_format: "json" or "console". Default via AUDIXA_LOG_FORMAT env or "console".
        level: Log level (DEBUG, INFO, WARNING, ERROR). Default via AUDIXA_LOG_LEVEL env or "INFO".
    """
    global _configured
    if _configured:
        return

    resolved_format = log_format or os.environ.get("AUDIXA_LOG_FORMAT", "console")
    resolved_level = level or os.environ.get("AUDIXA_LOG_LEVEL", "INFO")

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if resolved_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    audixa_logger = logging.getLogger("audixa")
    audixa_logger.handlers.clear()
    audixa_logger.addHandler(handler)
    audixa_logger.setLevel(getattr(logging, resolved_level.upper(), logging.INFO))
    audixa_logger.propagate = False

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger with component context.

    Args:
        component: Component name (e.g., "http_client", "client").

    Returns:
        Lazy logger with the component field bound. Configuration is resolved
        on first use, so importing the library never touches the host's
        structlog setup.
    """
    return structlog.get_logger(f"audixa.{component}", component=component)  # type: ignore[no-any-return]
