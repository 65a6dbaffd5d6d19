"""CLI module for screencap."""

import logging
from pathlib import Path

import click

from screencap.cli.exit_codes import ExitCode
from screencap.config import configure_logging_from_cli, get_config

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="screencap")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.screencap/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """screencap - Capture the screen as an image or video."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(config_path=config_path)
        except ValueError as e:
            click.echo(f"Error: Invalid configuration: {e}", err=True)
            ctx.exit(ExitCode.CONFIG_ERROR)

    configure_logging_from_cli(
        ctx.obj["config"].logging,
        level=log_level,
        file=log_file,
        json_format=log_json,
    )


# Defer import to avoid circular dependency
def _register_commands():
    from screencap.cli.capture import capture_command
    from screencap.cli.codecs import codecs_command
    from screencap.cli.region import region_command

    main.add_command(capture_command)
    main.add_command(codecs_command)
    main.add_command(region_command)


_register_commands()
