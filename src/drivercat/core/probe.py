"""Driver installation state probing.

User-registered drivers take precedence over the classpath: the user may have
side-loaded a driver under a non-standard identity, or marked a bundled driver
as broken. Everything else is decided by asking a class resolver whether the
driver class can be found.
"""

from __future__ import annotations

import logging
from typing import Protocol

from drivercat.core.adapters.classpath import ClasspathResolver, DriverClassNotFoundError
from drivercat.core.drivers import DatabaseDriverDescriptor, DriverState
from drivercat.core.preferences import UserPreferences

logger = logging.getLogger(__name__)


class ClassResolver(Protocol):
    """Interface for checking that a driver class is available."""

    def resolve(self, class_name: str) -> None:
        """
        Return if the class can be found, raise otherwise.

        Raises:
            DriverClassNotFoundError: The class is unknown.
            Exception: Any other failure means the driver is present but broken.
        """
        ...


def find_user_override(
    preferences: UserPreferences | None, driver_class_name: str
) -> DriverState | None:
    """Return the state the user recorded for a driver class, if any."""
    if preferences is None:
        return None
    for user_driver in preferences.database_drivers():
        if user_driver.driver_class_name == driver_class_name:
            return user_driver.state
    return None


def probe_driver_state(
    driver: DatabaseDriverDescriptor,
    preferences: UserPreferences | None,
    resolver: ClassResolver | None = None,
) -> DriverState:
    """
    Determine the installation state of a driver.

    Args:
        driver: Driver to probe.
        preferences: Optional user preferences holding driver overrides.
        resolver: Class resolver used when no override matches. Defaults to
            a ClasspathResolver with no entries.

    Returns:
        The user's override state if one exists for the driver class,
        otherwise INSTALLED_WORKING / NOT_INSTALLED / INSTALLED_NOT_WORKING
        depending on the resolver outcome.
    """
    class_name = driver.driver_class_name

    override = find_user_override(preferences, class_name)
    if override is not None:
        return override

    if resolver is None:
        resolver = ClasspathResolver()

    try:
        resolver.resolve(class_name)
    except DriverClassNotFoundError:
        return DriverState.NOT_INSTALLED
    except Exception:  # noqa: BLE001
        logger.warning(
            "Unexpected error occurred while resolving driver class: %s",
            class_name,
            exc_info=True,
        )
        return DriverState.INSTALLED_NOT_WORKING
    return DriverState.INSTALLED_WORKING
