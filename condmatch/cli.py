"""Command-line interface for condmatch."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from condmatch.errors import AttributeFormatInvalidError
from condmatch.evaluator import evaluate_condition
from condmatch.loader import load_attributes_yaml, load_conditions_yaml
from condmatch.logging import (
    LevelLogConsumer,
    LogLevel,
    disable_debug_logging,
    enable_debug_logging,
    set_global_log_level,
)
from condmatch.model import UserContext
from condmatch.semver import compare_versions

# main() attaches the package handler, so importing the CLI stays silent
logger = logging.getLogger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Cells longer than this are clipped with "..."

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = []
    lines.append(format_row(clipped_headers))
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _parse_attr_override(text: str) -> tuple[str, Any]:
    """Parse ``NAME=VALUE``; VALUE is read as a YAML scalar (``3`` -> int)."""
    name, sep, raw_value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f"Attribute override must look like NAME=VALUE, got '{text}'"
        )
    return name, yaml.safe_load(raw_value) if raw_value else ""


def _evaluate_file(
    conditions_path: Path,
    attributes_path: Optional[Path],
    overrides: List[tuple[str, Any]],
    as_json: bool,
) -> None:
    """Evaluate every condition in a file against one attribute set."""
    logger.info(f"Loading conditions from: {conditions_path}")
    try:
        conditions = load_conditions_yaml(conditions_path.read_text())
        attributes: Dict[str, Any] = {}
        if attributes_path is not None:
            logger.info(f"Loading attributes from: {attributes_path}")
            attributes = load_attributes_yaml(attributes_path.read_text())
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"❌ ERROR: File not found: {e.filename}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load input: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to load input: {type(e).__name__}: {e}")
        sys.exit(1)

    attributes.update(overrides)
    user = UserContext(attributes=attributes)
    sink = LevelLogConsumer(logger, level=LogLevel.DEBUG)

    records: List[Dict[str, Any]] = []
    for condition in conditions:
        result = evaluate_condition(condition, user, sink)
        records.append(
            {
                "name": condition.name,
                "match": condition.match,
                "value": condition.value,
                **result.to_dict(),
            }
        )
    logger.info(f"Evaluated {len(records)} condition(s)")

    if as_json:
        print(json.dumps(records, indent=2, default=str))
        return

    rows = [
        [
            r["name"],
            r["match"],
            repr(r["value"]),
            "unknown" if r["error"] else str(r["matched"]).lower(),
            r["error"] or "",
        ]
        for r in records
    ]
    table = _format_table(
        ["Attribute", "Match", "Value", "Result", "Error"], rows, max_col_width=60
    )
    print(table if table else "   (no conditions)")


def _compare(target: str, version: str) -> None:
    """Print the ordering of ``version`` relative to ``target``."""
    try:
        result = compare_versions(target, version)
    except AttributeFormatInvalidError as e:
        logger.error(f"Invalid version: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)
    print(result)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``condmatch`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="condmatch",
        description="Evaluate targeting conditions against user attributes.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{eval,compare}",
        help="Available commands",
    )

    eval_parser = subparsers.add_parser(
        "eval", help="Evaluate conditions against an attribute set"
    )
    eval_parser.add_argument(
        "conditions", type=Path, help="Path to conditions YAML/JSON"
    )
    eval_parser.add_argument(
        "--attributes",
        "-a",
        type=Path,
        default=None,
        help="Path to a YAML/JSON mapping of user attributes",
    )
    eval_parser.add_argument(
        "--attr",
        dest="overrides",
        action="append",
        type=_parse_attr_override,
        default=[],
        metavar="NAME=VALUE",
        help="Set or override a single attribute (repeatable)",
    )
    eval_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    compare_parser = subparsers.add_parser(
        "compare", help="Compare a version against a target version"
    )
    compare_parser.add_argument("target", help="Target (condition) version")
    compare_parser.add_argument("version", help="Version to compare")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "eval":
        _evaluate_file(args.conditions, args.attributes, args.overrides, args.json)
    elif args.command == "compare":
        _compare(args.target, args.version)


if __name__ == "__main__":
    main()
