"""Commands for inspecting and registering database drivers."""

import typer

from drivercat.cli.common.context import CatalogAppContext
from drivercat.cli.common.exits import die, exit_from_exc, ok_exit, warn_exit
from drivercat.cli.common.options import (
    DisplayNameOpt,
    FileOpt,
    InstalledOpt,
    StateOpt,
)
from drivercat.cli.common.output import out, state_markup
from drivercat.core.drivers import DriverState, UserDatabaseDriver
from drivercat.core.preferences import PreferencesError, parse_state
from drivercat.core.registry import find_driver_by_name, resolve_icon_path

app = typer.Typer(
    help="Inspect known database drivers and their installation state.",
    no_args_is_help=True,
)


@app.command("list")
def list_drivers(ctx: typer.Context, installed: bool = InstalledOpt):
    """List database drivers with their installation state."""
    appctx: CatalogAppContext = ctx.obj
    catalog = appctx.catalog

    try:
        with out.status("Probing drivers..."):
            if installed:
                drivers = catalog.installed_working_database_drivers()
                rows = [(d, DriverState.INSTALLED_WORKING) for d in drivers]
            else:
                rows = [(d, catalog.get_state(d)) for d in catalog.database_drivers()]
    except PreferencesError as exc:
        exit_from_exc(exc, message=str(exc), code=1)

    if not rows:
        warn_exit("No installed drivers found", code=0)

    out.drivers_table(rows, title="Installed drivers" if installed else "Database drivers")


@app.command()
def show(ctx: typer.Context, name: str = typer.Argument(..., help="Driver display name")):
    """Show details of one database driver."""
    appctx: CatalogAppContext = ctx.obj

    driver = find_driver_by_name(name)
    if driver is None:
        die(f"Unknown database driver '{name}'", code=1)

    try:
        state = appctx.catalog.get_state(driver)
    except PreferencesError as exc:
        exit_from_exc(exc, message=str(exc), code=1)

    out.header(driver.display_name)
    out.kv(
        {
            "Driver class": driver.driver_class_name,
            "Icon": resolve_icon_path(driver),
            "State": state_markup(state),
            "Default URL": driver.default_url_template or "",
        }
    )
    out.header("URL templates")
    out.bullets(driver.url_templates)
    out.header("Download URLs")
    out.bullets(driver.download_urls, empty="(bundled or user-supplied only)")


@app.command()
def register(
    ctx: typer.Context,
    driver_class: str = typer.Argument(..., help="Fully qualified driver class name"),
    state: str = StateOpt,
    display_name: str | None = DisplayNameOpt,
    file: list[str] = FileOpt,
):
    """Record a driver in the user preferences, overriding classpath probing."""
    appctx: CatalogAppContext = ctx.obj

    try:
        parsed = parse_state(state)
    except ValueError as exc:
        exit_from_exc(exc, message=str(exc), code=2)

    try:
        appctx.preferences.register_driver(
            UserDatabaseDriver(
                driver_class_name=driver_class,
                state=parsed,
                display_name=display_name,
                files=tuple(file),
            )
        )
    except (PreferencesError, OSError) as exc:
        exit_from_exc(exc, message=f"Could not update user preferences: {exc}", code=1)

    out.success(f"Registered {driver_class} as {parsed.value}")


@app.command()
def unregister(
    ctx: typer.Context,
    driver_class: str = typer.Argument(..., help="Fully qualified driver class name"),
):
    """Remove a driver from the user preferences."""
    appctx: CatalogAppContext = ctx.obj

    try:
        removed = appctx.preferences.unregister_driver(driver_class)
    except (PreferencesError, OSError) as exc:
        exit_from_exc(exc, message=f"Could not update user preferences: {exc}", code=1)

    if not removed:
        warn_exit(f"{driver_class} is not registered", code=0)
    ok_exit(f"Unregistered {driver_class}")
