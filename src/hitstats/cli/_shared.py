from __future__ import annotations

import logging
import sys
from pathlib import Path

import click.utils as click_utils
import typer

from hitstats._meta import logger
from hitstats.cli.exit_codes import EXIT_CONFIG
from hitstats.core.config import DEFAULT_STATS_FILE, LOG_FORMAT, Settings, load_settings
from hitstats.errors import ConfigError


def configure_logging(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def _is_tty_stdout() -> bool:
    try:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False


def color_allowed(settings: Settings) -> bool:
    if settings.color is not None:
        return settings.color
    return _is_tty_stdout() and not click_utils.should_strip_ansi(sys.stdout)


def resolve_use_color(*, color: bool, no_color: bool, color_allowed: bool) -> bool:
    # CLI flags take precedence over the configured/detected default.
    if no_color:
        return False
    if color:
        return True
    return color_allowed


def settings_or_exit() -> Settings:
    try:
        return load_settings()
    except ConfigError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc


def resolve_stats_file(option: Path | None, settings: Settings) -> Path:
    if option is not None:
        return option
    if settings.stats_file is not None:
        logger.info("Using stats file from config: %s", settings.stats_file)
        return settings.stats_file
    return Path(DEFAULT_STATS_FILE)
