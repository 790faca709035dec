"""Shared query-spec execution engine for CLI and SDK workflows.

This module maps validated query-spec steps to fiber queries so
different entry points execute one declarative path without drift.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import cast

from core.config import CsfConfig
from core.errors import CsfRunSpecError
from core.output_lines import format_row, format_scalar, format_summary
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from csf.fiber import CompressedSparseFiber
from ingest.fiber_loader import load_fiber


@dataclass
class RunSpecExecutionContext:
    """In-memory context used to execute query-spec steps."""

    config: CsfConfig
    default_rows_path: str | None
    fibers: dict[str, CompressedSparseFiber] = field(default_factory=dict)


def execute_run_spec_file(spec_file: str, config: CsfConfig | None = None) -> tuple[str, ...]:
    """Load and execute a query-spec file, returning printable output lines."""
    spec = load_run_spec(spec_file)
    return execute_run_spec(spec, config)


def execute_run_spec(spec: RunSpec, config: CsfConfig | None = None) -> tuple[str, ...]:
    """Execute a parsed query-spec object and return output lines."""
    context = RunSpecExecutionContext(
        config=config or CsfConfig.from_env(),
        default_rows_path=spec.defaults.rows_path,
    )
    output_lines: list[str] = []
    for step in spec.steps:
        output_lines.extend(_execute_step(context, step))
    return tuple(output_lines)


def _execute_step(context: RunSpecExecutionContext, step: RunSpecStep) -> tuple[str, ...]:
    fiber = _resolve_fiber(context, step)
    if step.command == "info":
        return format_summary(fiber.summary())
    if step.command == "expand":
        return (format_row(fiber.expand_row(cast(int, step.index))),)
    if step.command == "sum":
        return (format_scalar(fiber.sum_column(cast(int, step.dimension))),)
    if step.command == "rows":
        return tuple(format_row(row) for row in islice(fiber, step.limit))
    raise CsfRunSpecError(f"Unsupported run-spec command '{step.command}'.")


def _resolve_fiber(context: RunSpecExecutionContext, step: RunSpecStep) -> CompressedSparseFiber:
    rows_path = step.rows_path or context.default_rows_path
    if rows_path is None:
        raise CsfRunSpecError(
            f"Run-spec command '{step.command}' requires rows. "
            "Set 'rows' on the step or in top-level defaults."
        )
    if rows_path not in context.fibers:
        context.fibers[rows_path] = load_fiber(rows_path, context.config)
    return context.fibers[rows_path]
