"""Compare a version inventory against the change log resources on disk.

The inventory is maintained by hand next to the resources tree. This check
catches folders that were added without registering their release line, and
registered release lines whose folders are missing or incomplete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from constants import ChangeLogKinds, Constants

from .inventory import DEFAULT_INVENTORY, VersionInventory
from .versions import is_normalized, sort_versions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class InventoryReport:
    """Differences between an inventory and a resources tree."""

    resources_dir: str
    snapshots_missing_on_disk: List[str] = field(default_factory=list)
    snapshots_not_in_inventory: List[str] = field(default_factory=list)
    updates_missing_on_disk: List[str] = field(default_factory=list)
    updates_not_in_inventory: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when inventory and resources agree."""
        return not (
            self.snapshots_missing_on_disk
            or self.snapshots_not_in_inventory
            or self.updates_missing_on_disk
            or self.updates_not_in_inventory
        )

    def to_dict(self) -> dict:
        return {
            "resources_dir": self.resources_dir,
            "ok": self.ok,
            ChangeLogKinds.SNAPSHOT.value: {
                "missing_on_disk": list(self.snapshots_missing_on_disk),
                "not_in_inventory": list(self.snapshots_not_in_inventory),
            },
            ChangeLogKinds.UPDATE.value: {
                "missing_on_disk": list(self.updates_missing_on_disk),
                "not_in_inventory": list(self.updates_not_in_inventory),
            },
        }


def _versions_with_files(folder: Path, required: Sequence[str]) -> List[str]:
    """Return version sub-folders of ``folder`` containing every required file."""
    if not folder.is_dir():
        logger.debug("Change log folder not found: %s", folder)
        return []
    found = []
    for child in folder.iterdir():
        if not child.is_dir():
            continue
        if not is_normalized(child.name):
            logger.debug("Ignoring folder that is not a release line: %s", child)
            continue
        missing = [name for name in required if not (child / name).is_file()]
        if missing:
            logger.debug("Folder %s lacks change logs: %s", child, ", ".join(missing))
            continue
        found.append(child.name)
    return sort_versions(found)


def scan_resource_versions(resources_dir: PathLike) -> Tuple[List[str], List[str]]:
    """List the snapshot and update release lines present under ``resources_dir``.

    Args:
        resources_dir: Directory holding the snapshot and update folders.

    Returns:
        Tuple of (snapshot versions, update versions), each sorted ascending.
    """
    root = Path(resources_dir)
    snapshots = _versions_with_files(
        root / Constants.SNAPSHOTS_FOLDER_NAME,
        (Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME, Constants.SNAPSHOTS_CORE_DATA_FILENAME),
    )
    updates = _versions_with_files(
        root / Constants.UPDATES_FOLDER_NAME,
        (Constants.UPDATES_FILENAME,),
    )
    return snapshots, updates


def check_inventory(
    resources_dir: PathLike, inventory: Optional[VersionInventory] = None
) -> InventoryReport:
    """Compare ``inventory`` (default: compiled-in) with the resources tree.

    Raises:
        FileNotFoundError: If ``resources_dir`` is not a directory.
    """
    root = Path(resources_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"resources directory not found: {root}")
    inventory = inventory if inventory is not None else DEFAULT_INVENTORY

    disk_snapshots, disk_updates = scan_resource_versions(root)
    report = InventoryReport(
        resources_dir=str(root),
        snapshots_missing_on_disk=[
            v for v in inventory.snapshot_versions() if v not in disk_snapshots
        ],
        snapshots_not_in_inventory=[
            v for v in disk_snapshots if v not in inventory.snapshot_versions()
        ],
        updates_missing_on_disk=[
            v for v in inventory.update_versions() if v not in disk_updates
        ],
        updates_not_in_inventory=[
            v for v in disk_updates if v not in inventory.update_versions()
        ],
    )
    if report.ok:
        logger.info("Inventory matches change logs under %s", root)
    else:
        logger.warning("Inventory and change logs under %s are out of sync", root)
    return report
