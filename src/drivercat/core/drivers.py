"""Core driver domain models.

These models describe database drivers known to the catalog and the
installation state reported for them. They are immutable and free of any
probing, preferences or CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class DriverState(str, Enum):
    """
    Installation state of a database driver.

    Values:
        INSTALLED_WORKING: The driver class is present and usable.
        INSTALLED_NOT_WORKING: The driver is present but broken.
        NOT_INSTALLED: The driver class could not be found.
    """

    INSTALLED_WORKING = "INSTALLED_WORKING"
    INSTALLED_NOT_WORKING = "INSTALLED_NOT_WORKING"
    NOT_INSTALLED = "NOT_INSTALLED"


@total_ordering
@dataclass(frozen=True)
class DatabaseDriverDescriptor:
    """
    Metadata about one database driver, independent of its installation state.

    Descriptors order by display name, ignoring case. Equality compares every
    field, so two descriptors with the same name but different classes are
    unequal although neither sorts before the other.

    Attributes:
        display_name: Human-readable name, unique within the built-in registry.
        icon_image_path: Asset path of the icon, or None for the default icon.
        driver_class_name: Fully qualified driver class name.
        download_urls: URLs of the archive(s) needed by the driver.
        url_templates: Connection string templates with `<placeholder>` parts.
    """

    display_name: str
    icon_image_path: str | None
    driver_class_name: str
    download_urls: tuple[str, ...] = ()
    url_templates: tuple[str, ...] = ()

    @property
    def sort_key(self) -> str:
        return self.display_name.casefold()

    @property
    def default_url_template(self) -> str | None:
        """Return the first connection string template, if any."""
        return self.url_templates[0] if self.url_templates else None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DatabaseDriverDescriptor):
            return NotImplemented
        return self.sort_key < other.sort_key


@dataclass(frozen=True)
class UserDatabaseDriver:
    """
    A driver registered (or marked broken) by the user.

    The state stored here takes precedence over probing the classpath.
    """

    driver_class_name: str
    state: DriverState
    display_name: str | None = None
    files: tuple[str, ...] = ()
