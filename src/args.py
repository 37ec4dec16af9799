"""Argument parsing functionality for the change log catalog."""

import argparse

from constants import Constants


def _add_common_options(parser):
    """Options shared by every sub-command."""
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to an inventory file (YAML, YML, or JSON). "
                             "Defaults to $CHANGELOG_CATALOG_CONFIG or the built-in inventory.",
                        action="store",
                        type=str)
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=Constants.OUTPUT_FORMATS)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: $CHANGELOG_CATALOG_LOG_LEVEL or INFO)",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not log to the console.",
                        action="store_true")


def build_parser():
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="changelog-catalog",
        description=(
            "Resolve which Liquibase snapshot and update change logs bring a database up to date"
        ),
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", metavar="<command>")
    subparsers.required = True

    combos = subparsers.add_parser(
        "combinations",
        help="List the change logs to run for every snapshot version",
    )
    combos.add_argument("--snapshots-only",
                        dest="SNAPSHOTS_ONLY",
                        help="Only list the snapshot files, without updates",
                        action="store_true")
    _add_common_options(combos)

    snapshot = subparsers.add_parser(
        "snapshot",
        help="List the schema and core data snapshot files for a version",
    )
    snapshot.add_argument("VERSION", help="Version, e.g. 2.1.3 or 2.1.x")
    _add_common_options(snapshot)

    latest = subparsers.add_parser(
        "latest",
        help="Show the latest snapshot version and its files",
    )
    _add_common_options(latest)

    updates = subparsers.add_parser(
        "updates",
        help="List update versions after a version",
    )
    updates.add_argument("VERSION", help="Version, e.g. 2.1.3 or 2.1.x")
    updates.add_argument("--inclusive",
                         dest="INCLUSIVE",
                         help="Include the given version; it must have an update change log",
                         action="store_true")
    updates.add_argument("--files",
                         dest="FILES",
                         help="Print update change log paths instead of versions",
                         action="store_true")
    _add_common_options(updates)

    check = subparsers.add_parser(
        "check",
        help="Compare the inventory with the change log folders on disk",
    )
    check.add_argument("RESOURCES_DIR",
                       help="Directory containing the snapshot and update folders")
    _add_common_options(check)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
