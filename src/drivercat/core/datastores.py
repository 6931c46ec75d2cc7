"""Datastore descriptors and composition of the datastore catalog.

A datastore descriptor is a user-facing entry for a type of data source. The
available list is the concatenation of:

  1) manual descriptors (file formats, cloud services, NoSQL stores), always
     present and in a fixed order;
  2) driver-gated descriptors for a few well-known databases, present only
     when their driver is installed and working;
  3) one generic descriptor per remaining installed driver, followed by the
     "Other database" and "Composite datastore" entries.

Names are unique in the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from drivercat.core.drivers import DatabaseDriverDescriptor
from drivercat.core.registry import (
    DATABASE_NAME_HIVE,
    DATABASE_NAME_MICROSOFT_SQL_SERVER_JTDS,
    DATABASE_NAME_MYSQL,
    DATABASE_NAME_ORACLE,
    DATABASE_NAME_POSTGRESQL,
)

CATEGORY_DATABASE = "Database"
CATEGORY_CLOUD_SERVICE = "Cloud service"

OTHER_DATABASE_NAME = "Other database"
COMPOSITE_DATASTORE_NAME = "Composite datastore"


class DatastoreKind(str, Enum):
    """Opaque tag for the datastore implementation a descriptor stands for."""

    CSV = "CSV"
    EXCEL = "EXCEL"
    ACCESS = "ACCESS"
    SAS = "SAS"
    DBASE = "DBASE"
    FIXED_WIDTH = "FIXED_WIDTH"
    XML = "XML"
    JSON = "JSON"
    SALESFORCE = "SALESFORCE"
    SUGARCRM = "SUGARCRM"
    MONGODB = "MONGODB"
    COUCHDB = "COUCHDB"
    ELASTICSEARCH = "ELASTICSEARCH"
    CASSANDRA = "CASSANDRA"
    HBASE = "HBASE"
    JDBC = "JDBC"
    COMPOSITE = "COMPOSITE"


@dataclass(frozen=True)
class DatastoreDescriptor:
    """
    A type of datastore offered to the user.

    Attributes:
        name: Unique name of the entry.
        description: Free-form description.
        kind: Which datastore implementation to instantiate when selected.
        categories: Optional tags such as "Database" or "Cloud service".
    """

    name: str
    description: str
    kind: DatastoreKind
    categories: tuple[str, ...] = ()


MANUAL_DATASTORE_DESCRIPTORS: tuple[DatastoreDescriptor, ...] = (
    DatastoreDescriptor(
        "CSV file",
        "Comma-separated values (CSV) file (or file with other separators)",
        DatastoreKind.CSV,
    ),
    DatastoreDescriptor(
        "Excel spreadsheet",
        "Microsoft Excel spreadsheet. Either .xls (97-2003) or .xlsx (2007+) format.",
        DatastoreKind.EXCEL,
    ),
    DatastoreDescriptor(
        "Access database",
        "Microsoft Access database file (.mdb).",
        DatastoreKind.ACCESS,
    ),
    DatastoreDescriptor(
        "SAS library",
        "A directory of SAS library files (.sas7bdat).",
        DatastoreKind.SAS,
    ),
    DatastoreDescriptor(
        "DBase database",
        "DBase database file (.dbf)",
        DatastoreKind.DBASE,
    ),
    DatastoreDescriptor(
        "Fixed width file",
        "Text file with fixed width values. Each value spans a fixed amount of text characters.",
        DatastoreKind.FIXED_WIDTH,
    ),
    DatastoreDescriptor(
        "XML file",
        "Extensible Markup Language file (.xml)",
        DatastoreKind.XML,
    ),
    DatastoreDescriptor(
        "JSON file",
        "JavaScript Object NOtation file (.json).",
        DatastoreKind.JSON,
    ),
    DatastoreDescriptor(
        "Salesforce.com",
        "Connect to a Salesforce.com account",
        DatastoreKind.SALESFORCE,
        (CATEGORY_CLOUD_SERVICE,),
    ),
    DatastoreDescriptor(
        "SugarCRM",
        "Connect to a SugarCRM system",
        DatastoreKind.SUGARCRM,
        (CATEGORY_CLOUD_SERVICE,),
    ),
    DatastoreDescriptor(
        "MongoDB database",
        "Connect to a MongoDB database",
        DatastoreKind.MONGODB,
        (CATEGORY_DATABASE,),
    ),
    DatastoreDescriptor(
        "CouchDB database",
        "Connect to an Apache CouchDB database",
        DatastoreKind.COUCHDB,
        (CATEGORY_DATABASE,),
    ),
    DatastoreDescriptor(
        "ElasticSearch index",
        "Connect to an ElasticSearch index",
        DatastoreKind.ELASTICSEARCH,
        (CATEGORY_DATABASE,),
    ),
    DatastoreDescriptor(
        "Cassandra database",
        "Connect to an Apache Cassandra database",
        DatastoreKind.CASSANDRA,
        (CATEGORY_DATABASE,),
    ),
    DatastoreDescriptor(
        "HBase database",
        "Connect to an Apache HBase database",
        DatastoreKind.HBASE,
        (CATEGORY_DATABASE,),
    ),
)

# (driver display name, description), in the order they are offered
DRIVER_BASED_DATASTORES: tuple[tuple[str, str], ...] = (
    (DATABASE_NAME_HIVE, "Connect to an Apache Hive database"),
    (DATABASE_NAME_MYSQL, "Connect to a MySQL database"),
    (DATABASE_NAME_POSTGRESQL, "Connect to a PostgreSQL database"),
    (DATABASE_NAME_ORACLE, "Connect to a Oracle database"),
    (DATABASE_NAME_MICROSOFT_SQL_SERVER_JTDS, "Connect to a Microsoft SQL Server database"),
)


def driver_based_datastore_descriptors(
    installed_names: set[str],
) -> list[DatastoreDescriptor]:
    """Return the driver-gated descriptors whose driver is installed."""
    return [
        DatastoreDescriptor(name, description, DatastoreKind.JDBC, (CATEGORY_DATABASE,))
        for name, description in DRIVER_BASED_DATASTORES
        if name in installed_names
    ]


def other_datastore_descriptors(
    installed_drivers: Iterable[DatabaseDriverDescriptor],
    already_added: set[str],
) -> list[DatastoreDescriptor]:
    """Return generic entries for installed drivers plus the trailing entries."""
    descriptors: list[DatastoreDescriptor] = []

    for driver in installed_drivers:
        name = driver.display_name
        if name not in already_added:
            descriptors.append(
                DatastoreDescriptor(name, f"Connect to {name}", DatastoreKind.JDBC)
            )

    if OTHER_DATABASE_NAME not in already_added:
        descriptors.append(
            DatastoreDescriptor(
                OTHER_DATABASE_NAME, "Connect to other database", DatastoreKind.JDBC
            )
        )

    if COMPOSITE_DATASTORE_NAME not in already_added:
        descriptors.append(
            DatastoreDescriptor(
                COMPOSITE_DATASTORE_NAME, "Create composite datastore", DatastoreKind.COMPOSITE
            )
        )

    return descriptors


def compose_datastore_descriptors(
    installed_drivers: Sequence[DatabaseDriverDescriptor],
    manual: Sequence[DatastoreDescriptor] = MANUAL_DATASTORE_DESCRIPTORS,
) -> list[DatastoreDescriptor]:
    """
    Compose the ordered list of available datastore descriptors.

    Args:
        installed_drivers: Drivers currently in INSTALLED_WORKING state, in
            registry order. Evaluated once by the caller.
        manual: Descriptors that are always offered, in order.

    Returns:
        Manual descriptors, then driver-gated ones, then generic driver
        entries and the "Other database" / "Composite datastore" entries.
        Driver-based entries colliding with an earlier name are skipped.
    """
    descriptors = list(manual)
    added = {d.name for d in descriptors}

    installed_names = {d.display_name for d in installed_drivers}
    for descriptor in driver_based_datastore_descriptors(installed_names):
        if descriptor.name in added:
            continue
        descriptors.append(descriptor)
        added.add(descriptor.name)

    descriptors.extend(other_datastore_descriptors(installed_drivers, added))
    return descriptors
