"""`audixa voices` command — lists the voices available for a model."""

from __future__ import annotations

import click

from audixa._types import TTSModel
from audixa.cli.main import CLIContext, cli, make_client, run


@cli.command()
@click.option(
    "--model",
    type=click.Choice([m.value for m in TTSModel]),
    default=TTSModel.BASE.value,
    show_default=True,
    help="Model to list voices for.",
)
@click.option("--free-only", is_flag=True, help="Only show voices available on the free tier.")
@click.pass_obj
def voices(ctx: CLIContext, model: str, free_only: bool) -> None:
    """Lists the voices available for a model, in the order returned by the API."""
    client = make_client(ctx)
    response = run(client.get_voices(model))

    listed = [v for v in response.voices if v.free or not free_only]
    if not listed:
        click.echo("No voices available.")
        return

    name_w = max(max(len(v.name) for v in listed), 4)
    id_w = max(max(len(v.voice_id) for v in listed), 8)
    header = f"{'NAME':<{name_w}}  {'VOICE ID':<{id_w}}  {'GENDER':<8}  {'ACCENT':<12}  FREE"
    click.echo(header)

    for v in listed:
        free = "yes" if v.free else "no"
        click.echo(
            f"{v.name:<{name_w}}  {v.voice_id:<{id_w}}  {v.gender:<8}  {v.accent:<12}  {free}"
        )
