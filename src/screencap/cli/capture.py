"""Capture command."""

import click

from screencap.capture import (
    CaptureMode,
    CaptureRegion,
    CaptureRequest,
    capture_filename,
    capture_image,
    capture_video,
    ensure_output_dir,
)
from screencap.cli.errors import report_errors
from screencap.cli.exit_codes import ExitCode
from screencap.config.models import ScreencapConfig


@click.command("capture")
@click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in CaptureMode]),
    default=CaptureMode.IMAGE.value,
    show_default=True,
    help="Whether to capture an image or video.",
)
@click.option(
    "--region",
    "-r",
    type=click.Choice([r.value for r in CaptureRegion]),
    default=CaptureRegion.SCREEN.value,
    show_default=True,
    help="The region to capture.",
)
@click.option(
    "--rate",
    "-R",
    type=int,
    default=None,
    help="Framerate (fps) when capturing video (default: 30).",
)
@click.pass_context
def capture_command(
    ctx: click.Context, mode: str, region: str, rate: int | None
) -> None:
    """Capture the screen, a window, or a selection.

    Images are saved as PNG to ~/Pictures/Screenshot and videos as Matroska
    to ~/Videos/Screenshot, named after the host and the current time.
    """
    config: ScreencapConfig = ctx.obj["config"]

    try:
        request = CaptureRequest(
            mode=CaptureMode(mode),
            region=CaptureRegion(region),
            framerate=rate,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.INVALID_REQUEST)

    path = capture_filename(request.mode, settings=config.capture)

    with report_errors(ctx):
        ensure_output_dir(path)
        if request.mode is CaptureMode.IMAGE:
            capture_image(path, request.region, config.tools)
        else:
            capture_video(
                path,
                request.region,
                request.framerate or config.capture.framerate,
                settings=config.capture,
                preferences=config.codecs,
                tools=config.tools,
            )

    click.echo(f"Capture saved to {path}")
