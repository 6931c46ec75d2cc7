import logging

from conftest import CLASS_BYTES, ResolverStub
from drivercat.core.adapters.classpath import DriverClassFormatError
from drivercat.core.catalog import DatabaseDriverCatalog, get_default_catalog
from drivercat.core.datastores import DatastoreKind
from drivercat.core.drivers import DriverState, UserDatabaseDriver
from drivercat.core.preferences import InMemoryUserPreferences, JsonUserPreferences
from drivercat.core.registry import DATABASE_DRIVERS, find_driver_by_name
from drivercat.core.settings import CLASSPATH_ENV, PREFERENCES_ENV, Settings

MYSQL = "com.mysql.jdbc.Driver"
CUBRID = "cubrid.jdbc.driver.CUBRIDDriver"
POSTGRES = "org.postgresql.Driver"
ORACLE = "oracle.jdbc.OracleDriver"

MANUAL_COUNT = 15


def _names(descriptors):
    return [d.name for d in descriptors]


def test_no_drivers_installed_yields_manual_plus_trailing_entries():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub())

    result = catalog.available_datastore_descriptors()

    assert len(result) == 17
    assert _names(result[MANUAL_COUNT:]) == ["Other database", "Composite datastore"]
    assert all(d.kind != DatastoreKind.JDBC for d in result[:MANUAL_COUNT])
    assert catalog.installed_working_database_drivers() == []


def test_only_mysql_installed():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub(present={MYSQL}))

    result = catalog.available_datastore_descriptors()

    assert catalog.is_installed("MySQL") is True
    assert len(result) == 18
    mysql = result[MANUAL_COUNT]
    assert mysql.name == "MySQL"
    assert mysql.categories == ("Database",)
    assert mysql.kind == DatastoreKind.JDBC
    assert _names(result[MANUAL_COUNT + 1:]) == ["Other database", "Composite datastore"]


def test_mysql_and_cubrid_installed():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub(present={MYSQL, CUBRID}))

    tail = catalog.available_datastore_descriptors()[MANUAL_COUNT:]

    assert _names(tail) == ["MySQL", "Cubrid", "Other database", "Composite datastore"]
    assert tail[1].description == "Connect to Cubrid"
    assert tail[1].categories == ()


def test_user_override_marks_postgresql_not_working():
    prefs = InMemoryUserPreferences(
        [UserDatabaseDriver(POSTGRES, DriverState.INSTALLED_NOT_WORKING)]
    )
    catalog = DatabaseDriverCatalog(prefs, ResolverStub(present={POSTGRES}))

    assert catalog.is_installed("PostgreSQL") is False
    assert "PostgreSQL" not in _names(catalog.available_datastore_descriptors())


def test_unexpected_probe_failure_for_oracle(caplog):
    resolver = ResolverStub(failures={ORACLE: DriverClassFormatError("bad class")})
    catalog = DatabaseDriverCatalog(resolver=resolver)
    oracle = find_driver_by_name("Oracle")

    with caplog.at_level(logging.WARNING):
        state = catalog.get_state(oracle)

    assert state == DriverState.INSTALLED_NOT_WORKING
    assert any(ORACLE in r.getMessage() for r in caplog.records)
    assert catalog.is_installed("Oracle") is False


def test_is_installed_unknown_or_missing_name():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub(present={MYSQL}))

    assert catalog.is_installed("Redshift") is False
    assert catalog.is_installed(None) is False


def test_installed_filter_preserves_registry_order():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub(present={MYSQL, CUBRID, POSTGRES}))

    assert [d.display_name for d in catalog.installed_working_database_drivers()] == [
        "Cubrid",
        "MySQL",
        "PostgreSQL",
    ]


def test_jtds_backs_both_sql_server_and_sybase():
    catalog = DatabaseDriverCatalog(
        resolver=ResolverStub(present={"net.sourceforge.jtds.jdbc.Driver"})
    )

    tail = _names(catalog.available_datastore_descriptors()[MANUAL_COUNT:])

    assert tail == ["Microsoft SQL Server", "Sybase", "Other database", "Composite datastore"]


def test_preference_changes_are_seen_on_next_query():
    prefs = InMemoryUserPreferences()
    catalog = DatabaseDriverCatalog(prefs, ResolverStub())
    assert catalog.is_installed("H2") is False

    prefs.register_driver(UserDatabaseDriver("org.h2.Driver", DriverState.INSTALLED_WORKING))

    assert catalog.is_installed("H2") is True
    assert "H2" in _names(catalog.available_datastore_descriptors())


def test_repeated_queries_are_equal():
    catalog = DatabaseDriverCatalog(resolver=ResolverStub(present={MYSQL, CUBRID}))

    assert catalog.available_datastore_descriptors() == catalog.available_datastore_descriptors()


def test_composition_probes_each_driver_once():
    resolver = ResolverStub(present={MYSQL})
    catalog = DatabaseDriverCatalog(resolver=resolver)

    catalog.available_datastore_descriptors()

    assert len(resolver.calls) == len(DATABASE_DRIVERS)


def test_database_drivers_is_the_registry():
    assert DatabaseDriverCatalog(resolver=ResolverStub()).database_drivers() is DATABASE_DRIVERS


def test_from_settings_uses_json_preferences_and_classpath(tmp_path, make_jar):
    jar = make_jar("mysql.jar", {"com/mysql/jdbc/Driver.class": CLASS_BYTES})
    prefs_path = tmp_path / "prefs.json"
    JsonUserPreferences(prefs_path).register_driver(
        UserDatabaseDriver(CUBRID, DriverState.INSTALLED_WORKING)
    )

    catalog = DatabaseDriverCatalog.from_settings(
        Settings(classpath=(jar,), preferences_path=prefs_path)
    )

    assert [d.display_name for d in catalog.installed_working_database_drivers()] == [
        "Cubrid",
        "MySQL",
    ]


def test_default_catalog_is_a_process_wide_instance(monkeypatch, tmp_path):
    monkeypatch.setenv(CLASSPATH_ENV, str(tmp_path))
    monkeypatch.setenv(PREFERENCES_ENV, str(tmp_path / "prefs.json"))
    get_default_catalog.cache_clear()
    try:
        first = get_default_catalog()
        assert get_default_catalog() is first
        assert first.user_preferences.path == tmp_path / "prefs.json"
    finally:
        get_default_catalog.cache_clear()
