"""Region command for inspecting capture geometry."""

import json

import click

from screencap.capture import CaptureRegion, resolve_region
from screencap.cli.errors import report_errors
from screencap.config.models import ScreencapConfig


@click.command("region")
@click.option(
    "--region",
    "-r",
    type=click.Choice([CaptureRegion.SCREEN.value, CaptureRegion.WINDOW.value]),
    default=CaptureRegion.SCREEN.value,
    show_default=True,
    help="The region to resolve.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output results as JSON",
)
@click.pass_context
def region_command(ctx: click.Context, region: str, json_output: bool) -> None:
    """Show the x11grab geometry a capture region resolves to."""
    config: ScreencapConfig = ctx.obj["config"]

    with report_errors(ctx):
        descriptor = resolve_region(CaptureRegion(region), config.tools)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "region": region,
                    "resolution": descriptor.resolution,
                    "offset": descriptor.offset,
                },
                indent=2,
            )
        )
        return

    click.echo(f"Resolution: {descriptor.resolution}")
    click.echo(f"Offset:     {descriptor.offset}")
