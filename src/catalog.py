"""changelog-catalog - Liquibase change log resolver CLI

    Resolves which snapshot and update change logs have to be run to bring
    a database up to date, and checks the version inventory against the
    change log folders on disk.

    Returns:
        int: Exit code
"""
import csv
import io
import json
import logging
import sys

from args import parse_args
from changelogs import (
    ChangeLogError,
    ChangeLogVersionFinder,
    InventoryError,
    check_inventory,
    sort_versions,
)
from cli_config import load_inventory, resolve_config_path
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from constants import ChangeLogKinds, ExitCodes

logger = logging.getLogger(__name__)


def _mapping_rows(mapping):
    """CSV rows for a version -> paths mapping."""
    rows = [["version", "index", "path"]]
    for version in sort_versions(mapping):
        for index, path in enumerate(mapping[version]):
            rows.append([version, index, path])
    return rows


def _list_rows(values, header):
    rows = [["index", header]]
    rows.extend([index, value] for index, value in enumerate(values))
    return rows


def cmd_combinations(finder, args):
    """Change logs per snapshot version, keys in ascending version order."""
    if args.SNAPSHOTS_ONLY:
        combinations = finder.snapshot_combinations()
    else:
        combinations = finder.change_log_combinations()
    ordered = {version: combinations[version] for version in sort_versions(combinations)}
    return ordered, _mapping_rows(ordered)


def cmd_snapshot(finder, args):
    filenames = finder.snapshot_filenames(args.VERSION)
    return filenames, _list_rows(filenames, "path")


def cmd_latest(finder, args):  # pylint: disable=unused-argument
    latest = {
        "version": finder.latest_snapshot_version(),
        "schema": finder.latest_schema_snapshot_filename(),
        "core_data": finder.latest_core_data_snapshot_filename(),
    }
    if latest["version"] is None:
        logger.warning("Inventory has no snapshot versions.")
    rows = [["key", "value"]]
    rows.extend([key, "" if value is None else value] for key, value in latest.items())
    return latest, rows


def cmd_updates(finder, args):
    if args.INCLUSIVE:
        versions = finder.update_versions_equal_to_or_greater_than(args.VERSION)
    else:
        versions = finder.update_versions_greater_than(args.VERSION)
    if args.FILES:
        filenames = finder.update_filenames(versions)
        return filenames, _list_rows(filenames, "path")
    return versions, _list_rows(versions, "version")


def cmd_check(finder, args):
    report = check_inventory(args.RESOURCES_DIR, finder.inventory)
    rows = [["kind", "issue", "version"]]
    issues = (
        (ChangeLogKinds.SNAPSHOT, "missing_on_disk", report.snapshots_missing_on_disk),
        (ChangeLogKinds.SNAPSHOT, "not_in_inventory", report.snapshots_not_in_inventory),
        (ChangeLogKinds.UPDATE, "missing_on_disk", report.updates_missing_on_disk),
        (ChangeLogKinds.UPDATE, "not_in_inventory", report.updates_not_in_inventory),
    )
    for kind, issue, versions in issues:
        for version in versions:
            logger.error("%s version %s: %s", kind.value, version, issue.replace("_", " "))
            rows.append([kind.value, issue, version])
    return report, rows


COMMANDS = {
    "combinations": cmd_combinations,
    "snapshot": cmd_snapshot,
    "latest": cmd_latest,
    "updates": cmd_updates,
    "check": cmd_check,
}


def _output_format(args):
    if args.OUTPUT_FORMAT:
        return args.OUTPUT_FORMAT
    if args.OUTPUT and args.OUTPUT.lower().endswith(".csv"):
        return "csv"
    return "json"


def render(payload, rows, fmt):
    """Render a command result as JSON or CSV text."""
    if fmt == "csv":
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="\n").writerows(rows)
        return buffer.getvalue()
    if hasattr(payload, "to_dict"):
        payload = payload.to_dict()
    return json.dumps(payload, indent=2) + "\n"


def write_output(text, path):
    """Write rendered output to ``path`` or stdout."""
    if not path:
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(text)
    logger.info("Output has been successfully exported at: %s", path)


def run(argv=None):
    """Run the CLI and return an exit code."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, quiet=args.QUIET)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug("CLI start", extra=extra_context(component="cli", action=args.action))

    try:
        inventory = load_inventory(resolve_config_path(args.CONFIG))
        finder = ChangeLogVersionFinder(inventory)
        payload, rows = COMMANDS[args.action](finder, args)
        write_output(render(payload, rows, _output_format(args)), args.OUTPUT)
    except InventoryError as e:
        logger.error("Invalid inventory: %s", e)
        return ExitCodes.FILE_ERROR.value
    except ChangeLogError as e:
        logger.error("%s", e)
        return ExitCodes.INVALID_VERSION.value
    except OSError as e:
        logger.error("File error: %s, aborting", e)
        return ExitCodes.FILE_ERROR.value

    if args.action == "check" and not payload.ok:
        return ExitCodes.INVENTORY_MISMATCH.value
    return ExitCodes.SUCCESS.value


def main():
    """Main function of the program."""
    sys.exit(run())


if __name__ == "__main__":
    main()
