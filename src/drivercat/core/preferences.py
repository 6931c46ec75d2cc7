"""User preferences holding driver registrations.

The catalog only needs the list of drivers the user registered (or marked as
broken). Two implementations are provided: an in-memory store, useful for
embedding and tests, and a JSON file store used by the CLI. Both are read on
every query, so changes are visible to the next catalog call.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Protocol

from drivercat.core.drivers import DriverState, UserDatabaseDriver

logger = logging.getLogger(__name__)


class PreferencesError(RuntimeError):
    """Raised when the user preferences cannot be read."""


class UserPreferences(Protocol):
    """Interface for the user preferences consulted by the catalog."""

    def database_drivers(self) -> list[UserDatabaseDriver]:
        """Return the drivers registered by the user."""
        ...


def parse_state(value: str | DriverState) -> DriverState:
    """Return a DriverState from its name (case-insensitive)."""
    if isinstance(value, DriverState):
        return value
    try:
        return DriverState(str(value).strip().upper())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in DriverState)
        raise ValueError(f"Unknown driver state '{value}'. Allowed: {allowed}") from exc


class InMemoryUserPreferences:
    """Mutable, process-local user preferences."""

    def __init__(self, drivers: Iterable[UserDatabaseDriver] = ()) -> None:
        self._drivers: list[UserDatabaseDriver] = list(drivers)

    def database_drivers(self) -> list[UserDatabaseDriver]:
        return list(self._drivers)

    def register_driver(self, driver: UserDatabaseDriver) -> None:
        """Add a driver, replacing any registration of the same class."""
        self._drivers = [
            d for d in self._drivers if d.driver_class_name != driver.driver_class_name
        ]
        self._drivers.append(driver)

    def unregister_driver(self, driver_class_name: str) -> bool:
        """Remove a driver registration. Returns True if one was removed."""
        before = len(self._drivers)
        self._drivers = [
            d for d in self._drivers if d.driver_class_name != driver_class_name
        ]
        return len(self._drivers) != before


def _driver_from_json(item: Any) -> UserDatabaseDriver:
    if not isinstance(item, dict):
        raise TypeError("driver entry must be an object")
    files = item.get("files") or []
    if not isinstance(files, list):
        raise TypeError("files must be a list")
    return UserDatabaseDriver(
        driver_class_name=str(item["driver_class_name"]),
        state=parse_state(item["state"]),
        display_name=item.get("display_name"),
        files=tuple(str(f) for f in files),
    )


def _has_class_name(item: Any, driver_class_name: str) -> bool:
    return isinstance(item, dict) and item.get("driver_class_name") == driver_class_name


def _driver_to_json(driver: UserDatabaseDriver) -> dict[str, Any]:
    return {
        "driver_class_name": driver.driver_class_name,
        "state": driver.state.value,
        "display_name": driver.display_name,
        "files": list(driver.files),
    }


class JsonUserPreferences:
    """
    User preferences persisted as a JSON file.

    Layout:
        {"database_drivers": [{"driver_class_name": ..., "state": ...,
                               "display_name": ..., "files": [...]}]}

    A missing file means no registrations. The file is re-read on every call.
    Writes keep unrelated keys and any driver entries that fail to parse.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PreferencesError(
                f"Could not read user preferences from {self.path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise PreferencesError(
                f"User preferences in {self.path} must be a JSON object."
            )
        entries = payload.get("database_drivers")
        if entries is not None and not isinstance(entries, list):
            raise PreferencesError(
                f"'database_drivers' in {self.path} must be a JSON list."
            )
        return payload

    def database_drivers(self) -> list[UserDatabaseDriver]:
        drivers: list[UserDatabaseDriver] = []
        for item in self._load().get("database_drivers") or []:
            try:
                drivers.append(_driver_from_json(item))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Ignoring invalid driver entry in %s: %s", self.path, exc)
                continue
        return drivers

    def _store(self, payload: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    def register_driver(self, driver: UserDatabaseDriver) -> None:
        """Add a driver, replacing any registration of the same class."""
        payload = self._load()
        entries = [
            item
            for item in payload.get("database_drivers") or []
            if not _has_class_name(item, driver.driver_class_name)
        ]
        entries.append(_driver_to_json(driver))
        payload["database_drivers"] = entries
        self._store(payload)

    def unregister_driver(self, driver_class_name: str) -> bool:
        """
        Remove a driver registration. Returns True if one was removed.

        Entries that cannot be parsed are left in the file untouched.
        """
        payload = self._load()
        entries = payload.get("database_drivers") or []
        kept = [item for item in entries if not _has_class_name(item, driver_class_name)]
        if len(kept) == len(entries):
            return False
        payload["database_drivers"] = kept
        self._store(payload)
        return True
