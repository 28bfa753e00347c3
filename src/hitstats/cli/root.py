from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from hitstats._meta import __version__
from hitstats.cli import record, stats
from hitstats.cli._shared import configure_logging


def _show_version(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"hitstats {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Report request counters recorded in a stats file.")

    @app.callback()
    def _root(
        *,
        version: Annotated[  # noqa: ARG001
            bool,
            typer.Option("--version", callback=_show_version, is_eager=True, help="Show version and exit"),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Suppress INFO logs, emit only errors"),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
        ] = False,
    ) -> None:
        configure_logging(quiet=quiet, verbose=verbose)

    stats.register(app)
    record.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
