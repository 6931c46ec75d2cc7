"""CLI application for the database driver catalog."""

from pathlib import Path

import typer

from drivercat.cli.commands.datastores import app as datastores_app
from drivercat.cli.commands.drivers import app as drivers_app
from drivercat.cli.common.context import build_catalog_context
from drivercat.cli.common.options import ClasspathOpt, PreferencesOpt, VerboseOpt

app = typer.Typer(
    help="drivercat - database driver and datastore catalog",
    no_args_is_help=True,
)

app.add_typer(drivers_app, name="drivers", help="Known database drivers and their state.")
app.add_typer(datastores_app, name="datastores", help="Available datastore types.")


@app.callback()
def _init(
    ctx: typer.Context,
    classpath: list[Path] = ClasspathOpt,
    preferences: Path | None = PreferencesOpt,
    verbose: bool = VerboseOpt,
):
    """Build the catalog context shared by all commands."""
    ctx.obj = build_catalog_context(classpath, preferences, verbose=verbose)


if __name__ == "__main__":
    app()
