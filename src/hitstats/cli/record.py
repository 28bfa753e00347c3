from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from hitstats._meta import logger
from hitstats.cli._shared import resolve_stats_file, settings_or_exit
from hitstats.cli.exit_codes import EXIT_CANTCREAT, EXIT_DATAERR, EXIT_OK
from hitstats.errors import InvalidStatsFileError
from hitstats.store import MemoryStatsStore, load_stats, save_stats


def record_cmd(
    names: Annotated[
        list[str],
        typer.Argument(help="Counter names to increment."),
    ],
    amount: Annotated[
        int,
        typer.Option("-n", "--amount", help="Amount added to each counter.", min=0),
    ] = 1,
    stats_file: Annotated[
        Path | None,
        typer.Option("--stats-file", help="JSON file holding the counters (default: stats.json)."),
    ] = None,
) -> None:
    """Increment counters in the stats file, creating it when missing."""
    settings = settings_or_exit()
    path = resolve_stats_file(stats_file, settings)

    try:
        store = load_stats(path) if path.is_file() else MemoryStatsStore()
    except InvalidStatsFileError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc

    for name in names:
        value = store.record(name, amount)
        logger.debug("%s -> %d", name, value)

    try:
        save_stats(store, path)
    except OSError as exc:
        typer.echo(f"ERROR: failed to write stats file: {exc}", err=True)
        raise typer.Exit(code=EXIT_CANTCREAT) from exc
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("record")(record_cmd)


__all__ = ["register"]
