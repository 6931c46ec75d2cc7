"""Terminal UI utilities for picking datastore types."""

from __future__ import annotations

import questionary

from drivercat.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from drivercat.core.datastores import DatastoreDescriptor

_MAX_NAME_WIDTH = 40


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _datastore_choice_title(descriptor: DatastoreDescriptor, *, name_width: int) -> str:
    """Format one choice as `<name>  [<categories>]` with an aligned category column."""
    short_name = _truncate(descriptor.name, _MAX_NAME_WIDTH)
    if not descriptor.categories:
        return short_name
    return f"{short_name.ljust(name_width)}  [{', '.join(descriptor.categories)}]"


def select_datastore(descriptors: list[DatastoreDescriptor]) -> DatastoreDescriptor | None:
    """Display a select prompt over datastore descriptors.

    Returns:
        The chosen descriptor, or None if the prompt was cancelled.
    """
    if not descriptors:
        return None

    name_width = max(len(_truncate(d.name, _MAX_NAME_WIDTH)) for d in descriptors)
    choices = [
        questionary.Choice(
            title=_datastore_choice_title(d, name_width=name_width),
            value=d,
        )
        for d in descriptors
    ]

    return questionary.select(
        "Select a datastore type:",
        choices=choices,
        style=QUESTIONARY_STYLE_SELECT,
    ).ask()
