"""Application context management for the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from drivercat.core.adapters.classpath import ClasspathResolver
from drivercat.core.catalog import DatabaseDriverCatalog
from drivercat.core.preferences import JsonUserPreferences
from drivercat.core.settings import Settings, load_settings


@dataclass
class CatalogAppContext:
    """Application context holding settings, user preferences and the catalog."""

    settings: Settings
    preferences: JsonUserPreferences
    catalog: DatabaseDriverCatalog


def configure_logging(level: int) -> None:
    """Send `drivercat` log records to stderr through Rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    root = logging.getLogger("drivercat")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def build_catalog_context(
    classpath: list[Path] | None = None,
    preferences_path: Path | None = None,
    *,
    verbose: bool = False,
) -> CatalogAppContext:
    """Build the catalog context from the environment and CLI overrides.

    Args:
        classpath: Classpath entries; replaces DRIVERCAT_CLASSPATH when given.
        preferences_path: Preferences file; replaces the configured one when given.
        verbose: Log at DEBUG level regardless of DRIVERCAT_LOG_LEVEL.

    Returns:
        CatalogAppContext: Context with JSON preferences and a classpath-backed catalog.
    """
    settings = load_settings()
    if classpath:
        settings = replace(settings, classpath=tuple(classpath))
    if preferences_path is not None:
        settings = replace(settings, preferences_path=preferences_path)
    if verbose:
        settings = replace(settings, log_level=logging.DEBUG)

    configure_logging(settings.log_level)

    preferences = JsonUserPreferences(settings.preferences_path)
    catalog = DatabaseDriverCatalog(
        user_preferences=preferences,
        resolver=ClasspathResolver(settings.classpath),
    )
    return CatalogAppContext(settings=settings, preferences=preferences, catalog=catalog)
