"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from titletotags.config import DEFAULT_CONFIG_PATH


def _package_version() -> str:
    try:
        return version("titletotags")
    except PackageNotFoundError:
        return "0.0.0"


def _id_list(value: str) -> list[int]:
    try:
        ids = [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma-separated work item ids, got {value!r}") from exc
    if not ids:
        raise argparse.ArgumentTypeError("at least one work item id is required")
    return ids


def _add_config_and_verbose(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=f"./{DEFAULT_CONFIG_PATH}", help=f"Path to {DEFAULT_CONFIG_PATH}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="titletotags")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Show how titles would be cleaned (no network)")
    parse_parser.add_argument("titles", nargs="+", metavar="TITLE", help="Raw work item title")
    parse_parser.add_argument("--json", action="store_true", help="Print one JSON object per title")

    run_parser = subparsers.add_parser("run", help="Promote leading title brackets to tags")
    _add_config_and_verbose(run_parser)
    mode = run_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    run_parser.add_argument("--ids", type=_id_list, default=None, help="Only these work item ids (comma-separated)")
    run_parser.add_argument("--tag", default=None, help="Only work items carrying this tag")

    init_parser = subparsers.add_parser("init", help=f"Generate a {DEFAULT_CONFIG_PATH} config file")
    init_parser.add_argument(
        "--output",
        "-o",
        default=DEFAULT_CONFIG_PATH,
        help=f"Output file path (default: {DEFAULT_CONFIG_PATH})",
    )
    init_parser.add_argument("--organization", default=None, help="Azure DevOps organization")
    init_parser.add_argument("--project", default=None, help="Azure DevOps project")
    init_parser.add_argument("--defaults", action="store_true", help="Use defaults without prompting")

    harness_parser = subparsers.add_parser("harness", help="Synthetic test work items")
    harness_subparsers = harness_parser.add_subparsers(dest="harness_command", required=True)

    harness_subparsers.add_parser("check", help="Check the title pattern catalog locally (no network)")
    for name, help_text in (
        ("seed", "Create one work item per title pattern"),
        ("verify", "Verify seeded work items against their expected titles and tags"),
        ("teardown", "Delete seeded work items"),
    ):
        _add_config_and_verbose(harness_subparsers.add_parser(name, help=help_text))

    full_parser = harness_subparsers.add_parser("full", help="Seed, run, verify, and tear down")
    _add_config_and_verbose(full_parser)
    full_parser.add_argument("--keep", action="store_true", help="Keep seeded work items after verification")

    return parser


__all__ = ["build_parser"]
