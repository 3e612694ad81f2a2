"""Main CLI command group for Audixa."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any, TypeVar

import click

import audixa
from audixa.client import Audixa
from audixa.config.settings import load_settings
from audixa.exceptions import AudixaError
from audixa.logging import configure_logging

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Options shared by every command."""

    api_key: str
    base_url: str | None
    timeout_ms: int | None


@click.group()
@click.version_option(version=audixa.__version__, prog_name="audixa")
@click.option(
    "--api-key",
    default=None,
    help="Audixa API key. Defaults to AUDIXA_API_KEY.",
)
@click.option(
    "--base-url",
    default=None,
    help="API base URL. Defaults to AUDIXA_BASE_URL or the public endpoint.",
)
@click.option(
    "--timeout-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Per-request timeout in milliseconds.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    base_url: str | None,
    timeout_ms: int | None,
) -> None:
    """Audixa — text-to-speech from the command line."""
    configure_logging()
    try:
        settings = load_settings()
    except AudixaError as exc:
        click.echo(f"Error ({exc.code.value}): {exc.message}", err=True)
        sys.exit(1)
    ctx.obj = CLIContext(
        api_key=api_key or settings.cli.api_key,
        base_url=base_url,
        timeout_ms=timeout_ms,
    )


def make_client(ctx: CLIContext) -> Audixa:
    """Build the client, exiting with a readable message when the key is missing."""
    try:
        return Audixa(ctx.api_key, base_url=ctx.base_url, timeout_ms=ctx.timeout_ms)
    except AudixaError:
        click.echo("Error: API key is required. Pass --api-key or set AUDIXA_API_KEY.", err=True)
        sys.exit(1)


def run(coro: Coroutine[Any, Any, _T]) -> _T:
    """Run a client coroutine, reporting ``AudixaError`` on stderr with exit code 1."""
    try:
        return asyncio.run(coro)
    except AudixaError as exc:
        click.echo(f"Error ({exc.code.value}): {exc.message}", err=True)
        sys.exit(1)
