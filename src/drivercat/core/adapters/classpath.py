from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

CLASS_FILE_MAGIC = b"\xca\xfe\xba\xbe"
_ARCHIVE_SUFFIXES = (".jar", ".zip")


class DriverClassNotFoundError(LookupError):
    """Raised when a driver class is not present on the classpath."""


class DriverClassFormatError(RuntimeError):
    """Raised when a driver class is present but its class file is unusable."""


def class_member_name(class_name: str) -> str:
    """Map `com.example.Driver` to the archive member `com/example/Driver.class`."""
    return class_name.replace(".", "/") + ".class"


def parse_classpath(raw: str | None) -> list[Path]:
    """Split an `os.pathsep`-separated classpath string into paths."""
    if not raw:
        return []
    return [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]


class ClasspathResolver:
    """
    Locate compiled driver classes in directories and jar/zip archives.

    Nothing is loaded or initialised; the resolver only checks that the
    class file exists and starts with the class-file magic number. The
    classpath is re-scanned on every call.
    """

    def __init__(self, entries: Iterable[str | os.PathLike[str]] = ()) -> None:
        self.entries = [Path(e) for e in entries]

    def resolve(self, class_name: str) -> None:
        """
        Check that `class_name` can be found on the classpath.

        Raises:
            DriverClassNotFoundError: The class is not on the classpath.
            DriverClassFormatError: The class file exists but is not valid.
        """
        member = class_member_name(class_name)
        for entry in self.entries:
            if entry.is_dir():
                if self._resolve_in_directory(entry, member, class_name):
                    return
            elif entry.is_file():
                if self._resolve_in_archive(entry, member, class_name):
                    return
        raise DriverClassNotFoundError(class_name)

    def _resolve_in_directory(self, directory: Path, member: str, class_name: str) -> bool:
        class_file = directory / member
        if class_file.is_file():
            with class_file.open("rb") as handle:
                _check_magic(handle.read(4), class_name, str(class_file))
            return True

        archives = sorted(
            p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in _ARCHIVE_SUFFIXES
        )
        return any(self._resolve_in_archive(a, member, class_name) for a in archives)

    def _resolve_in_archive(self, archive: Path, member: str, class_name: str) -> bool:
        try:
            zf = zipfile.ZipFile(archive)
        except (OSError, zipfile.BadZipFile) as exc:
            logger.debug("Skipping unreadable archive %s: %s", archive, exc)
            return False

        with zf:
            try:
                zf.getinfo(member)
            except KeyError:
                return False
            with zf.open(member) as handle:
                _check_magic(handle.read(4), class_name, f"{archive}!{member}")
        return True


def _check_magic(head: bytes, class_name: str, location: str) -> None:
    if head != CLASS_FILE_MAGIC:
        raise DriverClassFormatError(
            f"Invalid class file for {class_name} at {location}"
        )
