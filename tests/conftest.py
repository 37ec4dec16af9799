"""Shared fixtures."""

import logging

import pytest

from changelogs.inventory import DEFAULT_INVENTORY
from constants import Constants


def _write_release_line(root, folder, version, filenames):
    directory = root / folder / version
    directory.mkdir(parents=True, exist_ok=True)
    for name in filenames:
        (directory / name).write_text("<databaseChangeLog/>\n", encoding="utf-8")


@pytest.fixture
def make_resources(tmp_path):
    """Create a resources tree holding the given snapshot and update release lines."""

    def _make(snapshots=DEFAULT_INVENTORY.snapshots, updates=DEFAULT_INVENTORY.updates):
        root = tmp_path / "resources"
        root.mkdir(exist_ok=True)
        for version in snapshots:
            _write_release_line(
                root,
                Constants.SNAPSHOTS_FOLDER_NAME,
                version,
                (Constants.SNAPSHOTS_SCHEMA_ONLY_FILENAME, Constants.SNAPSHOTS_CORE_DATA_FILENAME),
            )
        for version in updates:
            _write_release_line(root, Constants.UPDATES_FOLDER_NAME, version, (Constants.UPDATES_FILENAME,))
        return root

    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        ours = handler.get_name() == "changelog_catalog_stream" or isinstance(handler, logging.FileHandler)
        if ours and handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
