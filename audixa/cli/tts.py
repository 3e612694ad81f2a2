"""`audixa generate` and `audixa status` commands."""

from __future__ import annotations

import click

from audixa._types import TTSEmotion, TTSModel
from audixa.cli.main import CLIContext, cli, make_client, run
from audixa.models.tts import StartTTSRequest


@cli.command()
@click.argument("text")
@click.option("--voice", required=True, help="Voice ID (see `audixa voices`).")
@click.option(
    "--model",
    type=click.Choice([m.value for m in TTSModel]),
    default=None,
    help="Model to use (service default: base).",
)
@click.option("--speed", type=float, default=None, help="Speech speed multiplier (0.5-2.0).")
@click.option(
    "--emotion",
    type=click.Choice([e.value for e in TTSEmotion]),
    default=None,
    help="Voice emotion (advance model only).",
)
@click.option("--temperature", type=float, default=None, help="Temperature (advance model only).")
@click.option("--top-p", type=float, default=None, help="Top-p sampling (advance model only).")
@click.option(
    "--do-sample/--no-do-sample",
    default=None,
    help="Whether to use sampling (advance model only).",
)
@click.option(
    "--poll-interval-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Status polling interval in milliseconds.",
)
@click.option(
    "--max-wait-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum time to wait for the audio in milliseconds.",
)
@click.pass_obj
def generate(
    ctx: CLIContext,
    text: str,
    voice: str,
    model: str | None,
    speed: float | None,
    emotion: str | None,
    temperature: float | None,
    top_p: float | None,
    do_sample: bool | None,
    poll_interval_ms: int | None,
    max_wait_ms: int | None,
) -> None:
    """Generates speech for TEXT and prints the audio URL."""
    client = make_client(ctx)
    payload = StartTTSRequest(
        text=text,
        voice=voice,
        model=TTSModel(model) if model else None,
        speed=speed,
        emotion=TTSEmotion(emotion) if emotion else None,
        temperature=temperature,
        top_p=top_p,
        do_sample=do_sample,
    )
    url = run(
        client.generate_tts(
            payload,
            poll_interval_ms=poll_interval_ms,
            max_wait_ms=max_wait_ms,
        )
    )
    click.echo(url)


@cli.command()
@click.argument("generation_id")
@click.pass_obj
def status(ctx: CLIContext, generation_id: str) -> None:
    """Shows the status of a generation."""
    client = make_client(ctx)
    response = run(client.get_status(generation_id))

    click.echo(f"Status: {response.status.value}")
    if response.url:
        click.echo(f"URL: {response.url}")
