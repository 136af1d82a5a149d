"""CLI module for dlnaneg."""

import logging
from pathlib import Path

import click

from dlnaneg.config import ConfigError, NegotiatorConfig, load_config
from dlnaneg.profiles import ProfileError, ProfileRegistry, load_registry

logger = logging.getLogger(__name__)


def _configure_logging(
    config: NegotiatorConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    session_log_level: str | None = None,
) -> None:
    """Configure logging from the config file with CLI overrides applied."""
    from dataclasses import replace

    from dlnaneg.logging import configure_logging

    overrides: dict = {}
    if log_level is not None:
        overrides["level"] = log_level
    if log_file is not None:
        overrides["file"] = log_file
    if log_json:
        overrides["format"] = "json"
    if session_log_level is not None:
        overrides["session_level"] = session_log_level
    configure_logging(replace(config.logging, **overrides))


def get_registry(ctx: click.Context) -> ProfileRegistry:
    """Return the profile registry for this invocation, loading it once."""
    obj = ctx.find_root().obj
    if "registry" not in obj:
        config: NegotiatorConfig = obj["config"]
        try:
            obj["registry"] = load_registry(config.profiles.directory)
        except ProfileError as e:
            raise click.ClickException(str(e)) from e
    return obj["registry"]


def get_default_device(ctx: click.Context) -> str | None:
    """Return the configured default device friendly name, if any."""
    config: NegotiatorConfig = ctx.find_root().obj["config"]
    return config.profiles.default_device


@click.group()
@click.version_option(package_name="dlnaneg")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.dlnaneg/config.toml).",
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
@click.option(
    "--session-log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for negotiation sessions (default: --log-level).",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    session_log_level: str | None,
) -> None:
    """Negotiate DLNA playback: transcode decisions, headers and ffmpeg options."""
    ctx.ensure_object(dict)

    # Preserve config passed in by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = load_config(config_path)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e

    _configure_logging(
        ctx.obj["config"], log_level, log_file, log_json, session_log_level
    )


def _register_commands():
    from dlnaneg.cli.negotiate import header_command, negotiate_command, remap_command
    from dlnaneg.cli.profiles import profiles_group

    main.add_command(negotiate_command)
    main.add_command(header_command)
    main.add_command(remap_command)
    main.add_command(profiles_group)


_register_commands()
