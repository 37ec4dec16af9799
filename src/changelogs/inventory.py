"""Inventory of Liquibase snapshot and update change log versions.

The default inventory is compiled into the package and has to be updated
whenever snapshot or update folders are added to the resources tree.
Alternate inventories can be injected for testing or loaded from a config
file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence, Tuple

from constants import Constants

from .errors import InventoryError
from .versions import is_normalized, version_key


def _validate_versions(kind: str, versions: Iterable[Any]) -> Tuple[str, ...]:
    """Check labels are normalized and name distinct release lines; return them as a tuple."""
    seen = {}
    result = []
    for raw in versions:
        label = str(raw).strip()
        if not is_normalized(label):
            raise InventoryError(
                f"{kind} version '{label}' is not in 'major.minor.x' form", label
            )
        key = version_key(label)
        if key in seen:
            raise InventoryError(
                f"duplicate {kind} version '{label}' (same release line as '{seen[key]}')", label
            )
        seen[key] = label
        result.append(label)
    return tuple(result)


@dataclass(frozen=True)
class VersionInventory:
    """Ordered, immutable lists of snapshot and update release lines."""

    snapshots: Tuple[str, ...] = field(default_factory=tuple)
    updates: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "snapshots", _validate_versions("snapshot", self.snapshots))
        object.__setattr__(self, "updates", _validate_versions("update", self.updates))

    def snapshot_versions(self) -> Sequence[str]:
        """Return the snapshot release lines in definition order."""
        return self.snapshots

    def update_versions(self) -> Sequence[str]:
        """Return the update release lines in definition order."""
        return self.updates

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VersionInventory":
        """Build an inventory from ``{"snapshots": [...], "updates": [...]}``.

        An enclosing ``inventory`` key is accepted so the lists can live in
        a larger config document.
        """
        if not isinstance(data, Mapping):
            raise InventoryError("inventory must be a mapping with 'snapshots' and 'updates'")
        section = data.get("inventory", data)
        if not isinstance(section, Mapping):
            raise InventoryError("'inventory' section must be a mapping")
        lists = {}
        for key in ("snapshots", "updates"):
            value = section.get(key)
            if value is None:
                value = []
            if not isinstance(value, (list, tuple)):
                raise InventoryError(f"'{key}' must be a list of versions")
            lists[key] = tuple(value)
        return cls(snapshots=lists["snapshots"], updates=lists["updates"])


DEFAULT_INVENTORY = VersionInventory(
    snapshots=Constants.LIQUIBASE_SNAPSHOT_VERSIONS,
    updates=Constants.LIQUIBASE_UPDATE_VERSIONS,
)
