from __future__ import annotations

import sys
import zipfile
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

CLASS_BYTES = b"\xca\xfe\xba\xbe\x00\x00\x00\x34"


class ResolverStub:
    """Class resolver that knows a fixed set of classes and failures."""

    def __init__(self, present=(), failures=None):
        self.present = set(present)
        self.failures = dict(failures or {})
        self.calls: list[str] = []

    def resolve(self, class_name: str) -> None:
        from drivercat.core.adapters.classpath import DriverClassNotFoundError

        self.calls.append(class_name)
        if class_name in self.failures:
            raise self.failures[class_name]
        if class_name not in self.present:
            raise DriverClassNotFoundError(class_name)


@pytest.fixture()
def make_jar(tmp_path):
    """Write a jar containing the given members and return its path."""

    def _make(name: str, members: dict[str, bytes]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for member, data in members.items():
                zf.writestr(member, data)
        return path

    return _make
