"""Resolve which Liquibase change logs bring a database up to date.

A database is initialised from a snapshot (schema file followed by core data
file) and then brought up to the latest state by every update change log of
a later release line, applied in ascending order.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Optional, Sequence

from constants import Constants

from .errors import UnknownVersionError
from .inventory import DEFAULT_INVENTORY, VersionInventory
from .versions import compare_versions, normalize, sort_versions, version_key


class ChangeLogVersionFinder:
    """Provides information about available snapshot and update change logs.

    Holds a read-only reference to a :class:`VersionInventory`; all queries
    are pure functions of their arguments and that inventory.
    """

    def __init__(self, inventory: Optional[VersionInventory] = None, separator: str = os.sep):
        """Initialize the finder.

        Args:
            inventory: Inventory to resolve against; the compiled-in one if omitted.
            separator: Path separator used when assembling change log paths.
        """
        self._inventory = inventory if inventory is not None else DEFAULT_INVENTORY
        self._separator = separator

    @property
    def inventory(self) -> VersionInventory:
        """The inventory this finder resolves against."""
        return self._inventory

    def _path(self, folder: str, version: str, filename: str) -> str:
        return self._separator.join((folder, version, filename))

    def normalize(self, version: str) -> str:
        """Return ``version`` as a ``major.minor.x`` release line."""
        return normalize(version)

    def snapshot_versions(self) -> Sequence[str]:
        return self._inventory.snapshot_versions()

    def update_versions(self) -> Sequence[str]:
        return self._inventory.update_versions()

    def change_log_combinations(self) -> Dict[str, List[str]]:
        """Map each snapshot version to every change log needed to reach the latest state.

        Each value starts with the schema and core data snapshot files and
        continues with the update files of all later release lines.
        """
        combinations: Dict[str, List[str]] = {}
        for snapshot_version in self.snapshot_versions():
            filenames = list(self.snapshot_filenames(snapshot_version))
            filenames.extend(
                self.update_filenames(self.update_versions_greater_than(snapshot_version))
            )
            combinations[snapshot_version] = filenames
        return combinations

    def snapshot_combinations(self) -> Dict[str, List[str]]:
        """Map each snapshot version to its schema and core data files only."""
        return {
            snapshot_version: self.snapshot_filenames(snapshot_version)
            for snapshot_version in self.snapshot_versions()
        }

    def snapshot_filenames(self, version: str) -> List[str]:
        """Return the schema and core data snapshot paths for a version, in that order.

        The version is normalized but not checked against the inventory.

        Raises:
            InvalidVersionError: If the version has no ``major.minor.`` prefix.
        """
        version_as_dot_x = normalize(version)
        return [
            self._path(
                Constants.SNAPSHOTS_FOLDER_NAME,
                version_as_dot_x,
                Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME,
            ),
            self._path(
                Constants.SNAPSHOTS_FOLDER_NAME,
                version_as_dot_x,
                Constants.SNAPSHOTS_CORE_DATA_FILENAME,
            ),
        ]

    def latest_snapshot_version(self) -> Optional[str]:
        """Return the highest snapshot version, or None for an empty inventory."""
        versions = self.snapshot_versions()
        if not versions:
            return None
        return max(versions, key=version_key)

    def latest_schema_snapshot_filename(self) -> Optional[str]:
        latest = self.latest_snapshot_version()
        if latest is None:
            return None
        return self._path(
            Constants.SNAPSHOTS_FOLDER_NAME, latest, Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME
        )

    def latest_core_data_snapshot_filename(self) -> Optional[str]:
        latest = self.latest_snapshot_version()
        if latest is None:
            return None
        return self._path(
            Constants.SNAPSHOTS_FOLDER_NAME, latest, Constants.SNAPSHOTS_CORE_DATA_FILENAME
        )

    def update_versions_equal_to_or_greater_than(self, version: str) -> List[str]:
        """Return the update version of ``version`` followed by all later ones.

        Raises:
            InvalidVersionError: If the version has no ``major.minor.`` prefix.
            UnknownVersionError: If the release line has no update change log.
        """
        shortest_version = normalize(version)
        if shortest_version not in self.update_versions():
            raise UnknownVersionError(shortest_version)
        return [shortest_version] + self.update_versions_greater_than(shortest_version)

    def update_versions_greater_than(self, version: str) -> List[str]:
        """Return update versions strictly after ``version``, ascending.

        Unlike :meth:`update_versions_equal_to_or_greater_than` the version
        does not have to be part of the update inventory.
        """
        version_as_dot_x = normalize(version)
        return sort_versions(
            update_version
            for update_version in self.update_versions()
            if compare_versions(update_version, version_as_dot_x) > 0
        )

    def update_filenames(self, versions: Iterable[str]) -> List[str]:
        """Return the update change log path for each (already normalized) version."""
        return [
            self._path(Constants.UPDATES_FOLDER_NAME, version, Constants.UPDATES_FILENAME)
            for version in versions
        ]


def default_finder() -> ChangeLogVersionFinder:
    """Return a finder over the compiled-in inventory."""
    return ChangeLogVersionFinder(DEFAULT_INVENTORY)
