"""Codecs command for checking what ffmpeg can record with."""

import json
from dataclasses import asdict

import click

from screencap.capture import select_capture_codecs
from screencap.cli.errors import report_errors
from screencap.config.models import ScreencapConfig


@click.command("codecs")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output results as JSON",
)
@click.pass_context
def codecs_command(ctx: click.Context, json_output: bool) -> None:
    """Show the formats and encoders a recording would use.

    Exits non-zero if ffmpeg lacks any capability needed for recording.
    """
    config: ScreencapConfig = ctx.obj["config"]

    with report_errors(ctx):
        codecs = select_capture_codecs(config.codecs, config.tools.ffmpeg)

    if json_output:
        click.echo(json.dumps(asdict(codecs), indent=2))
        return

    click.echo(f"Container:     {codecs.container}")
    click.echo(f"Screen input:  {codecs.screen_input}")
    click.echo(f"Audio input:   {codecs.audio_input}")
    click.echo(f"Audio encoder: {codecs.audio_encoder}")
    click.echo(f"Video encoder: {codecs.video_encoder}")
