"""csfiber CLI entry points.
This module exposes commands for building fibers from row files and
querying them. It maps argparse commands onto fiber operations.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from itertools import islice
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import CsfConfig
from core.constants import SUPPORTED_DUPLICATE_POLICIES
from core.output_lines import format_row, format_scalar, format_summary
from csf.fiber import CompressedSparseFiber
from ingest.fiber_loader import load_fiber


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="csf", description="Compressed sparse fiber CLI")
    parser.add_argument(
        "--duplicate-policy",
        choices=SUPPORTED_DUPLICATE_POLICIES,
        help="Override CSF_DUPLICATE_POLICY for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_info_command(subparsers)
    _add_expand_command(subparsers)
    _add_sum_command(subparsers)
    _add_rows_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csfiber CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.duplicate_policy)
    if args.command == "run-spec":
        return run_run_spec_command(config, args)
    fiber = load_fiber(args.rows, config)
    if args.command == "info":
        return _run_info_command(fiber)
    if args.command == "expand":
        return _run_expand_command(fiber, args)
    if args.command == "sum":
        return _run_sum_command(fiber, args)
    if args.command == "rows":
        return _run_rows_command(fiber, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(duplicate_policy: str | None) -> CsfConfig:
    """Build runtime config with an optional duplicate-policy override.

    Args:
        duplicate_policy: Optional override policy.

    Returns:
        Resolved runtime config.
    """
    config = CsfConfig.from_env()
    if duplicate_policy:
        config = replace(config, duplicate_policy=duplicate_policy)
    return config


def _run_info_command(fiber: CompressedSparseFiber) -> int:
    """Print the fiber shape summary."""
    for line in format_summary(fiber.summary()):
        print(line)
    return 0


def _run_expand_command(fiber: CompressedSparseFiber, args: argparse.Namespace) -> int:
    """Handle expand command.

    Args:
        fiber: Fiber built from the row file.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    print(format_row(fiber.expand_row(args.index)))
    return 0


def _run_sum_command(fiber: CompressedSparseFiber, args: argparse.Namespace) -> int:
    """Handle sum command.

    Args:
        fiber: Fiber built from the row file.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    print(format_scalar(fiber.sum_column(args.dimension)))
    return 0


def _run_rows_command(fiber: CompressedSparseFiber, args: argparse.Namespace) -> int:
    """Handle rows command.

    Args:
        fiber: Fiber built from the row file.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for row in islice(fiber, args.limit):
        print(format_row(row))
    return 0


def _add_info_command(subparsers: Any) -> None:
    """Register info subcommand."""
    parser = subparsers.add_parser("info", help="Print fiber dimensions and level sizes")
    parser.add_argument("rows", help="Row file (.jsonl or .csv)")


def _add_expand_command(subparsers: Any) -> None:
    """Register expand subcommand."""
    parser = subparsers.add_parser("expand", help="Reconstruct one row by leaf index")
    parser.add_argument("rows", help="Row file (.jsonl or .csv)")
    parser.add_argument("index", type=int, help="Leaf index")


def _add_sum_command(subparsers: Any) -> None:
    """Register sum subcommand."""
    parser = subparsers.add_parser("sum", help="Sum one coordinate dimension over all rows")
    parser.add_argument("rows", help="Row file (.jsonl or .csv)")
    parser.add_argument(
        "dimension",
        type=int,
        help="Dimension index; the dimension count sums the values",
    )


def _add_rows_command(subparsers: Any) -> None:
    """Register rows subcommand."""
    parser = subparsers.add_parser("rows", help="Print stored rows in leaf order")
    parser.add_argument("rows", help="Row file (.jsonl or .csv)")
    parser.add_argument("--limit", type=_non_negative_int, help="Maximum rows to print")


def _non_negative_int(raw_value: str) -> int:
    value = int(raw_value)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value
