"""Database driver catalog.

The catalog binds the built-in driver registry to a user preferences store
and a class resolver, and answers the queries used by frontends: which
drivers exist, which are installed, and which datastore types can be offered.
It holds no mutable state of its own; every query reflects the preferences
and classpath at call time.
"""

from __future__ import annotations

from functools import lru_cache

from drivercat.core import registry
from drivercat.core.adapters.classpath import ClasspathResolver
from drivercat.core.datastores import DatastoreDescriptor, compose_datastore_descriptors
from drivercat.core.drivers import DatabaseDriverDescriptor, DriverState
from drivercat.core.preferences import JsonUserPreferences, UserPreferences
from drivercat.core.probe import ClassResolver, probe_driver_state
from drivercat.core.settings import Settings, load_settings


class DatabaseDriverCatalog:
    """Metadata about database drivers and their current installation state."""

    def __init__(
        self,
        user_preferences: UserPreferences | None = None,
        resolver: ClassResolver | None = None,
    ) -> None:
        self.user_preferences = user_preferences
        self.resolver = resolver if resolver is not None else ClasspathResolver()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseDriverCatalog":
        """Build a catalog using the JSON preferences and classpath from settings."""
        return cls(
            user_preferences=JsonUserPreferences(settings.preferences_path),
            resolver=ClasspathResolver(settings.classpath),
        )

    def database_drivers(self) -> tuple[DatabaseDriverDescriptor, ...]:
        """Return all built-in drivers, sorted by display name."""
        return registry.database_drivers()

    def get_state(self, driver: DatabaseDriverDescriptor) -> DriverState:
        """Return the installation state of a driver."""
        return probe_driver_state(driver, self.user_preferences, self.resolver)

    def installed_working_database_drivers(self) -> list[DatabaseDriverDescriptor]:
        """Return the drivers in INSTALLED_WORKING state, in registry order."""
        return [
            d
            for d in registry.database_drivers()
            if self.get_state(d) == DriverState.INSTALLED_WORKING
        ]

    def is_installed(self, display_name: str | None) -> bool:
        """Return True if the named built-in driver is installed and working."""
        driver = registry.find_driver_by_name(display_name)
        if driver is None:
            return False
        return self.get_state(driver) == DriverState.INSTALLED_WORKING

    def available_datastore_descriptors(self) -> list[DatastoreDescriptor]:
        """Return the descriptors of datastore types that can be offered."""
        return compose_datastore_descriptors(self.installed_working_database_drivers())


@lru_cache(maxsize=1)
def get_default_catalog() -> DatabaseDriverCatalog:
    """Return the process-wide catalog configured from the environment."""
    return DatabaseDriverCatalog.from_settings(load_settings())
