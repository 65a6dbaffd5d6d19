"""Error reporting shared by CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from screencap.cli.exit_codes import ExitCode, exit_code_for
from screencap.exceptions import ScreencapError

logger = logging.getLogger(__name__)


@contextmanager
def report_errors(ctx: click.Context) -> Iterator[None]:
    """Turn screencap errors and interrupts into a diagnostic and exit code."""
    try:
        yield
    except ScreencapError as e:
        logger.debug("Command failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(exit_code_for(e))
    except KeyboardInterrupt:
        click.echo("Interrupted", err=True)
        ctx.exit(ExitCode.INTERRUPTED)
