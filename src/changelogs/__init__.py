"""Liquibase change log catalog.

This package answers which snapshot and update change logs have to be run to
bring a database from a given release line up to the latest state:
- versions.py: release line normalization and ordering
- inventory.py: the compiled-in list of snapshot and update versions
- finder.py: resolution of change log paths against an inventory
- consistency.py: comparison of an inventory with the resources tree
"""

from .errors import ChangeLogError, InvalidVersionError, InventoryError, UnknownVersionError
from .inventory import DEFAULT_INVENTORY, VersionInventory
from .finder import ChangeLogVersionFinder, default_finder
from .consistency import InventoryReport, check_inventory, scan_resource_versions
from .versions import compare_versions, is_normalized, normalize, sort_versions, version_key

__all__ = [
    "ChangeLogError",
    "InvalidVersionError",
    "InventoryError",
    "UnknownVersionError",
    "DEFAULT_INVENTORY",
    "VersionInventory",
    "ChangeLogVersionFinder",
    "default_finder",
    "InventoryReport",
    "check_inventory",
    "scan_resource_versions",
    "compare_versions",
    "is_normalized",
    "normalize",
    "sort_versions",
    "version_key",
]
