"""Commands for listing the datastore types the product can offer."""

import typer

from drivercat.cli.common.context import CatalogAppContext
from drivercat.cli.common.exits import exit_from_exc, ok_exit
from drivercat.cli.common.output import out
from drivercat.cli.tui import select_datastore
from drivercat.core.datastores import DatastoreDescriptor
from drivercat.core.preferences import PreferencesError

app = typer.Typer(
    help="List available datastore types.",
    no_args_is_help=True,
)


def _load_descriptors(appctx: CatalogAppContext) -> list[DatastoreDescriptor]:
    try:
        with out.status("Probing drivers..."):
            return appctx.catalog.available_datastore_descriptors()
    except PreferencesError as exc:
        exit_from_exc(exc, message=str(exc), code=1)


@app.command("list")
def list_datastores(ctx: typer.Context):
    """List available datastore types in the order they are offered."""
    appctx: CatalogAppContext = ctx.obj
    descriptors = _load_descriptors(appctx)

    out.datastores_table(descriptors)


@app.command()
def select(ctx: typer.Context):
    """Pick a datastore type interactively and show its details."""
    appctx: CatalogAppContext = ctx.obj
    descriptors = _load_descriptors(appctx)

    chosen = select_datastore(descriptors)
    if chosen is None:
        ok_exit("Cancelled")

    out.header(chosen.name)
    out.kv(
        {
            "Description": chosen.description,
            "Kind": chosen.kind.value,
            "Categories": ", ".join(chosen.categories) or "-",
        }
    )
