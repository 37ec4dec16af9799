"""Exceptions raised by the change log catalog."""

from __future__ import annotations

from typing import Optional


class ChangeLogError(ValueError):
    """Base class for catalog errors; all of them signal bad input."""

    def __init__(self, message: str, version: Optional[str] = None):
        super().__init__(message)
        self.version = version


class InvalidVersionError(ChangeLogError):
    """Version string does not carry a ``major.minor.`` prefix."""

    def __init__(self, version: str):
        super().__init__(
            f"version string '{version}' does not match 'major.minor.' pattern",
            version,
        )


class UnknownVersionError(ChangeLogError):
    """Normalized version is not part of the update inventory."""

    def __init__(self, version: str):
        super().__init__(
            f"liquibase update version '{version}' does not exist",
            version,
        )


class InventoryError(ChangeLogError):
    """Inventory content violates its invariants or cannot be loaded."""
