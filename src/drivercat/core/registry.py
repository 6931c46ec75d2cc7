"""Built-in registry of database drivers known to the catalog.

The registry is a module-level constant built once at import time and sorted
by display name. The display names and driver class names are referenced by
persisted configuration, so they must not change.
"""

from __future__ import annotations

from typing import Iterable

from drivercat.core.drivers import DatabaseDriverDescriptor

DEFAULT_ICON_IMAGE_PATH = "images/model/datastore.png"

DATABASE_NAME_JDBC_ODBC_BRIDGE = "JDBC-ODBC bridge"
DATABASE_NAME_TERADATA = "Teradata"
DATABASE_NAME_H2 = "H2"
DATABASE_NAME_HSQLDB_HYPER_SQL = "Hsqldb/HyperSQL"
DATABASE_NAME_ORACLE = "Oracle"
DATABASE_NAME_APACHE_DERBY_EMBEDDED = "Apache Derby (embedded)"
DATABASE_NAME_APACHE_DERBY_CLIENT = "Apache Derby (client)"
DATABASE_NAME_SQLITE = "SQLite"
DATABASE_NAME_SYBASE = "Sybase"
DATABASE_NAME_MICROSOFT_SQL_SERVER_JTDS = "Microsoft SQL Server"
DATABASE_NAME_MICROSOFT_SQL_SERVER_OFFICIAL = "Microsoft SQL Server (official)"
DATABASE_NAME_POSTGRESQL = "PostgreSQL"
DATABASE_NAME_SAP_DB = "SAP DB"
DATABASE_NAME_FIREBIRD = "Firebird"
DATABASE_NAME_INGRES = "Ingres"
DATABASE_NAME_DB2 = "DB2"
DATABASE_NAME_MYSQL = "MySQL"
DATABASE_NAME_PENTAHO_DATA_INTEGRATION = "Pentaho Data Integration"
DATABASE_NAME_LUCIDDB = "LucidDB"
DATABASE_NAME_PERVASIVE = "Pervasive"
DATABASE_NAME_CUBRID = "Cubrid"
DATABASE_NAME_HIVE = "Apache Hive"

# Java's Integer.MIN_VALUE, which makes the MySQL driver stream result sets.
_MYSQL_FETCH_SIZE = -2147483648

_ICONS = "images/datastore-types/databases"
_MAVEN = "http://repo1.maven.org/maven2"


def _driver(
    name: str,
    icon: str,
    driver_class: str,
    download_urls: Iterable[str],
    url_templates: Iterable[str],
) -> DatabaseDriverDescriptor:
    """Build a descriptor from the full form (several download URLs)."""
    return DatabaseDriverDescriptor(
        display_name=name,
        icon_image_path=icon,
        driver_class_name=driver_class,
        download_urls=tuple(download_urls),
        url_templates=tuple(url_templates),
    )


def _simple_driver(
    name: str,
    icon: str,
    driver_class: str,
    download_url: str | None,
    *url_templates: str,
) -> DatabaseDriverDescriptor:
    """Build a descriptor with at most one download URL."""
    urls = () if download_url is None else (download_url,)
    return _driver(name, icon, driver_class, urls, url_templates)


_DRIVERS = [
    _simple_driver(
        DATABASE_NAME_MYSQL,
        f"{_ICONS}/mysql.png",
        "com.mysql.jdbc.Driver",
        f"{_MAVEN}/mysql/mysql-connector-java/5.1.18/mysql-connector-java-5.1.18.jar",
        "jdbc:mysql://<hostname>:3306/<database>"
        f"?defaultFetchSize={_MYSQL_FETCH_SIZE}&largeRowSizeThreshold=1024",
        "jdbc:mysql://<hostname>:<port>/<database>"
        f"?defaultFetchSize={_MYSQL_FETCH_SIZE}&largeRowSizeThreshold=1024",
    ),
    _simple_driver(
        DATABASE_NAME_DB2,
        f"{_ICONS}/db2.png",
        "com.ibm.db2.jcc.DB2Driver",
        None,
        "jdbc:db2://<hostname>:<port>/<database>",
        "jdbc:db2j:net://<hostname>:<port>/<database>",
    ),
    _simple_driver(
        DATABASE_NAME_INGRES,
        f"{_ICONS}/ingres.png",
        "com.ingres.jdbc.IngresDriver",
        f"{_MAVEN}/com/ingres/jdbc/iijdbc/9.3-3.8.2/iijdbc-9.3-3.8.2.jar",
        "jdbc:ingres://<hostname>:II7/<database>",
    ),
    _driver(
        DATABASE_NAME_FIREBIRD,
        f"{_ICONS}/firebird.png",
        "org.firebirdsql.jdbc.FBDriver",
        # jaybird also needs the j2ee spec archive
        [
            f"{_MAVEN}/org/firebirdsql/jdbc/jaybird/2.1.6/jaybird-2.1.6.jar",
            f"{_MAVEN}/geronimo-spec/geronimo-spec-j2ee/1.4-rc4/geronimo-spec-j2ee-1.4-rc4.jar",
        ],
        ["jdbc:firebirdsql:<hostname>:<path/to/database>.fdb"],
    ),
    _simple_driver(
        DATABASE_NAME_SAP_DB,
        f"{_ICONS}/sapdb.png",
        "com.sap.dbtech.jdbc.DriverSapDB",
        None,
        "jdbc:sapdb://<hostname>/<database>",
    ),
    _simple_driver(
        DATABASE_NAME_POSTGRESQL,
        f"{_ICONS}/postgresql.png",
        "org.postgresql.Driver",
        f"{_MAVEN}/postgresql/postgresql/9.3-1102-jdbc4/postgresql-9.3-1102-jdbc4.jar",
        "jdbc:postgresql://<hostname>:5432/<database>",
    ),
    _simple_driver(
        DATABASE_NAME_MICROSOFT_SQL_SERVER_JTDS,
        f"{_ICONS}/microsoft.png",
        "net.sourceforge.jtds.jdbc.Driver",
        f"{_MAVEN}/net/sourceforge/jtds/jtds/1.3.1/jtds-1.3.1.jar",
        "jdbc:jtds:sqlserver://<hostname>/<database>;useUnicode=true;characterEncoding=UTF-8",
        "jdbc:jtds:sqlserver://<hostname>:<port>/<database>;instance=<instance>;"
        "useUnicode=true;characterEncoding=UTF-8",
    ),
    _simple_driver(
        DATABASE_NAME_SYBASE,
        f"{_ICONS}/sybase.png",
        "net.sourceforge.jtds.jdbc.Driver",
        f"{_MAVEN}/net/sourceforge/jtds/jtds/1.2.4/jtds-1.2.4.jar",
        "jdbc:jtds:sybase://<hostname>/<database>",
    ),
    _simple_driver(
        DATABASE_NAME_SQLITE,
        f"{_ICONS}/sqlite.png",
        "org.sqlite.JDBC",
        f"{_MAVEN}/org/xerial/sqlite-jdbc/3.7.2/sqlite-jdbc-3.7.2.jar",
        "jdbc:sqlite:<path/to/database>.db",
    ),
    _simple_driver(
        DATABASE_NAME_APACHE_DERBY_CLIENT,
        f"{_ICONS}/derby.png",
        "org.apache.derby.jdbc.ClientDriver",
        f"{_MAVEN}/org/apache/derby/derbyclient/10.8.2.2/derbyclient-10.8.2.2.jar",
        "jdbc:derby://<hostname>:1527/<path/to/database>",
    ),
    _simple_driver(
        DATABASE_NAME_APACHE_DERBY_EMBEDDED,
        f"{_ICONS}/derby.png",
        "org.apache.derby.jdbc.EmbeddedDriver",
        f"{_MAVEN}/org/apache/derby/derby/10.8.2.2/derby-10.8.2.2.jar",
        "jdbc:derby:<database>",
    ),
    _simple_driver(
        DATABASE_NAME_ORACLE,
        f"{_ICONS}/oracle.png",
        "oracle.jdbc.OracleDriver",
        None,
        "jdbc:oracle:thin:@<hostname>:1521:<sid>",
        "jdbc:oracle:thin:@<hostname>:<port>:<sid>",
        "jdbc:oracle:thin:@<hostname>:<port>/<service>:<server>/<instance>",
    ),
    _simple_driver(
        DATABASE_NAME_MICROSOFT_SQL_SERVER_OFFICIAL,
        f"{_ICONS}/microsoft.png",
        "com.microsoft.sqlserver.jdbc.SQLServerDriver",
        None,
        "jdbc:sqlserver://<hostname>:3341;databaseName=<database>",
        "jdbc:sqlserver://<hostname>:<port>;databaseName=<database>;integratedSecurity=true",
    ),
    _simple_driver(
        DATABASE_NAME_HSQLDB_HYPER_SQL,
        f"{_ICONS}/hsqldb.png",
        "org.hsqldb.jdbcDriver",
        f"{_MAVEN}/hsqldb/hsqldb/1.8.0.10/hsqldb-1.8.0.10.jar",
        "jdbc:hsqldb:hsql://<hostname>:9001/<database>",
        "jdbc:hsqldb:file:<path/to/database>",
    ),
    _simple_driver(
        DATABASE_NAME_H2,
        f"{_ICONS}/h2.png",
        "org.h2.Driver",
        f"{_MAVEN}/com/h2database/h2/1.3.162/h2-1.3.162.jar",
        "jdbc:h2:<path/to/database>",
    ),
    _simple_driver(
        DATABASE_NAME_TERADATA,
        f"{_ICONS}/teradata.png",
        "com.teradata.jdbc.TeraDriver",
        None,
        "jdbc:teradata:<hostname>",
        "jdbc:teradata:<hostname>/database=<database>",
    ),
    _simple_driver(
        DATABASE_NAME_PERVASIVE,
        f"{_ICONS}/pervasive.png",
        "com.pervasive.jdbc.v2.Driver",
        None,
        "jdbc:pervasive://<hostname>:1583/<datasource>",
    ),
    _simple_driver(
        DATABASE_NAME_CUBRID,
        f"{_ICONS}/cubrid.png",
        "cubrid.jdbc.driver.CUBRIDDriver",
        "http://clojars.org/repo/cubrid/cubrid-jdbc/8.4.1.0564/cubrid-jdbc-8.4.1.0564.jar",
        "jdbc:cubrid:<hostname>:30000:<database>:::",
    ),
    _simple_driver(
        DATABASE_NAME_LUCIDDB,
        f"{_ICONS}/luciddb.png",
        "org.luciddb.jdbc.LucidDbClientDriver",
        "http://repository.pentaho.org/artifactory/third-party/luciddb/"
        "LucidDbClient-minimal/0.9.4/LucidDbClient-minimal-0.9.4.jar",
        "jdbc:luciddb:http://<hostname>",
    ),
    _simple_driver(
        DATABASE_NAME_PENTAHO_DATA_INTEGRATION,
        f"{_ICONS}/kettle.png",
        "org.pentaho.di.jdbc.KettleDriver",
        None,
        "jdbc:kettle:file://<filename>",
    ),
    _simple_driver(
        DATABASE_NAME_JDBC_ODBC_BRIDGE,
        f"{_ICONS}/odbc.png",
        "sun.jdbc.odbc.JdbcOdbcDriver",
        None,
        "jdbc:odbc:<data-source-name>",
    ),
    _simple_driver(
        DATABASE_NAME_HIVE,
        f"{_ICONS}/hive.png",
        "org.apache.hive.jdbc.HiveDriver",
        f"{_MAVEN}/org/apache/hive/hive-jdbc/1.2.1/hive-jdbc-1.2.1.jar",
        "jdbc:hive://<hostname>:10000/<database>",
    ),
]

DATABASE_DRIVERS: tuple[DatabaseDriverDescriptor, ...] = tuple(sorted(_DRIVERS))

del _DRIVERS


def database_drivers() -> tuple[DatabaseDriverDescriptor, ...]:
    """Return all built-in drivers, sorted by display name."""
    return DATABASE_DRIVERS


def find_driver_by_name(display_name: str | None) -> DatabaseDriverDescriptor | None:
    """Return the built-in driver with the given display name, or None."""
    if display_name is None:
        return None
    for driver in DATABASE_DRIVERS:
        if driver.display_name == display_name:
            return driver
    return None


def find_driver_by_class(driver_class_name: str | None) -> DatabaseDriverDescriptor | None:
    """
    Return the first built-in driver using the given driver class, or None.

    jTDS backs both "Microsoft SQL Server" and "Sybase"; the first one in
    display name order wins.
    """
    if driver_class_name is None:
        return None
    for driver in DATABASE_DRIVERS:
        if driver.driver_class_name == driver_class_name:
            return driver
    return None


def resolve_icon_path(driver: DatabaseDriverDescriptor | None) -> str:
    """Return the icon path of a driver, falling back to the generic datastore icon."""
    icon = driver.icon_image_path if driver is not None else None
    return icon or DEFAULT_ICON_IMAGE_PATH
