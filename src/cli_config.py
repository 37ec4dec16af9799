"""Loading of alternate change log inventories from config files.

A config file is YAML or JSON holding ``snapshots`` and ``updates`` lists,
optionally nested under an ``inventory`` key. Without a config file the
compiled-in inventory is used.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

import yaml

from changelogs import DEFAULT_INVENTORY, InventoryError, VersionInventory
from constants import Constants

logger = logging.getLogger(__name__)


def resolve_config_path(cli_path: Optional[str]) -> Optional[str]:
    """Return the config path from the CLI, or from CHANGELOG_CATALOG_CONFIG."""
    if cli_path:
        return cli_path
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path and env_path.strip():
        return env_path.strip()
    return None


def _read_config(config_path: str) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.lower().endswith(".json"):
            return json.load(f)
        return yaml.safe_load(f)


def load_inventory(config_path: Optional[str]) -> VersionInventory:
    """Load an inventory from ``config_path``, or return the default one.

    Raises:
        FileNotFoundError: If the config file does not exist.
        InventoryError: If the file cannot be parsed or violates inventory rules.
    """
    if not config_path:
        logger.debug("No inventory config given, using compiled-in inventory")
        return DEFAULT_INVENTORY

    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"config file not found: {config_path}")

    try:
        data = _read_config(config_path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InventoryError(f"failed to parse inventory config {config_path}: {e}") from e

    if data is None:
        raise InventoryError(f"inventory config {config_path} is empty")
    inventory = VersionInventory.from_mapping(data)
    logger.info(
        "Loaded inventory from %s (%d snapshots, %d updates)",
        config_path,
        len(inventory.snapshots),
        len(inventory.updates),
    )
    return inventory
