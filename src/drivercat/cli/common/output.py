"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from drivercat.core.drivers import DriverState

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)

_STATE_STYLES = {
    DriverState.INSTALLED_WORKING: "ok",
    DriverState.INSTALLED_NOT_WORKING: "err",
    DriverState.NOT_INSTALLED: "meta",
}


def state_markup(state: DriverState) -> str:
    """Return a Rich-markup label for a driver state."""
    style = _STATE_STYLES.get(state, "meta")
    return f"[{style}]{state.value}[/{style}]"


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def bullets(self, items: Iterable[str], *, empty: str = "(none)") -> None:
        """Print a bulleted list, or a placeholder when it is empty."""
        items = list(items)
        if not items:
            console.print(f"  [meta]{empty}[/]")
            return
        for item in items:
            console.print(f"  • {item}", markup=False, highlight=False)

    def drivers_table(
        self, rows: Iterable[tuple[Any, DriverState]], title: str = "Database drivers"
    ) -> None:
        """
        Expects tuples of (DatabaseDriverDescriptor, DriverState)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Database", style="ok", no_wrap=True)
        t.add_column("Driver class", style="meta")
        t.add_column("State")

        for driver, state in rows:
            t.add_row(driver.display_name, driver.driver_class_name, state_markup(state))

        console.print(t)

    def datastores_table(
        self, descriptors: Iterable[Any], title: str = "Datastore types"
    ) -> None:
        """
        Expects objects with .name .kind .categories .description
        (like drivercat.core.datastores.DatastoreDescriptor)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Name", style="ok", no_wrap=True)
        t.add_column("Kind", style="meta")
        t.add_column("Categories", style="meta")
        t.add_column("Description")

        for d in descriptors:
            kind = d.kind.value if hasattr(d.kind, "value") else str(d.kind)
            t.add_row(d.name, kind, ", ".join(d.categories or ()), d.description)

        console.print(t)


out = Out()
