"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_VERSION = 2
    INVENTORY_MISMATCH = 3


class ChangeLogKinds(Enum):
    """Kinds of change log assets known to the catalog.

    Args:
        Enum (string): Kinds of change log assets.
    """

    SNAPSHOT = "snapshot"
    UPDATE = "update"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SNAPSHOTS_FOLDER_NAME = "liquibase-snapshots"
    UPDATES_FOLDER_NAME = "liquibase-updates"
    SNAPSHOTS_SCHEMA_ONLY_FILENAME = "liquibase-schema-only.xml"
    SNAPSHOTS_CORE_DATA_FILENAME = "liquibase-core-data.xml"
    UPDATES_FILENAME = "liquibase-update-to-latest.xml"
    VERSION_WILDCARD = "x"

    # Keep in sync with the sub-folders of the resources tree; `changelog-catalog check`
    # reports any divergence.
    LIQUIBASE_SNAPSHOT_VERSIONS = (
        "1.9.x",
        "2.1.x",
        "2.2.x",
        "2.3.x",
    )
    LIQUIBASE_UPDATE_VERSIONS = (
        "1.9.x",
        "2.0.x",
        "2.1.x",
        "2.2.x",
        "2.3.x",
        "2.4.x",
    )

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "CHANGELOG_CATALOG_LOG_LEVEL"
    ENV_CONFIG = "CHANGELOG_CATALOG_CONFIG"
    OUTPUT_FORMATS = ["json", "csv"]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
