import os

import pytest

from conftest import CLASS_BYTES
from drivercat.core.adapters.classpath import (
    ClasspathResolver,
    DriverClassFormatError,
    DriverClassNotFoundError,
    class_member_name,
    parse_classpath,
)


def test_class_member_name():
    assert class_member_name("org.postgresql.Driver") == "org/postgresql/Driver.class"


def test_parse_classpath_splits_on_pathsep(tmp_path):
    raw = os.pathsep.join([str(tmp_path / "a.jar"), "", str(tmp_path / "lib")])

    assert parse_classpath(raw) == [tmp_path / "a.jar", tmp_path / "lib"]
    assert parse_classpath(None) == []
    assert parse_classpath("") == []


def test_resolve_finds_class_in_jar(make_jar):
    jar = make_jar("postgresql.jar", {"org/postgresql/Driver.class": CLASS_BYTES})

    ClasspathResolver([jar]).resolve("org.postgresql.Driver")


def test_resolve_finds_class_in_exploded_directory(tmp_path):
    class_file = tmp_path / "classes" / "org" / "h2" / "Driver.class"
    class_file.parent.mkdir(parents=True)
    class_file.write_bytes(CLASS_BYTES)

    ClasspathResolver([tmp_path / "classes"]).resolve("org.h2.Driver")


def test_resolve_scans_jars_inside_directory(tmp_path, make_jar):
    lib = tmp_path / "lib"
    lib.mkdir()
    jar = make_jar("sqlite.jar", {"org/sqlite/JDBC.class": CLASS_BYTES})
    jar.rename(lib / "sqlite.jar")

    ClasspathResolver([lib]).resolve("org.sqlite.JDBC")


def test_resolve_raises_not_found(make_jar, tmp_path):
    jar = make_jar("other.jar", {"com/example/Other.class": CLASS_BYTES})

    with pytest.raises(DriverClassNotFoundError):
        ClasspathResolver([jar, tmp_path / "missing"]).resolve("org.postgresql.Driver")


def test_resolve_with_empty_classpath_raises_not_found():
    with pytest.raises(LookupError):
        ClasspathResolver().resolve("org.postgresql.Driver")


def test_resolve_skips_unreadable_archives(tmp_path, make_jar):
    broken = tmp_path / "broken.jar"
    broken.write_bytes(b"not a zip")
    good = make_jar("good.jar", {"org/h2/Driver.class": CLASS_BYTES})

    ClasspathResolver([broken, good]).resolve("org.h2.Driver")


def test_resolve_rejects_invalid_class_file(make_jar):
    jar = make_jar("oracle.jar", {"oracle/jdbc/OracleDriver.class": b"garbage"})

    with pytest.raises(DriverClassFormatError, match="oracle.jdbc.OracleDriver"):
        ClasspathResolver([jar]).resolve("oracle.jdbc.OracleDriver")


def test_resolve_sees_archives_added_later(tmp_path, make_jar):
    resolver = ClasspathResolver([tmp_path])
    with pytest.raises(DriverClassNotFoundError):
        resolver.resolve("org.h2.Driver")

    make_jar("h2.jar", {"org/h2/Driver.class": CLASS_BYTES})

    resolver.resolve("org.h2.Driver")
