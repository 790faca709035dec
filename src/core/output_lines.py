"""Printable renderings of fiber query results.

CLI commands and query-spec execution share these renderings so both
entry points print identical lines.
"""

from __future__ import annotations

from typing import Any

from core.types import FiberRow, FiberSummary


def format_summary(summary: FiberSummary) -> tuple[str, ...]:
    """Render a fiber summary as ``key=value`` lines."""
    return (
        f"ndim={summary.ndim}",
        f"nnz={summary.nnz}",
        f"level_sizes={','.join(str(size) for size in summary.level_sizes) or '-'}",
    )


def format_row(row: FiberRow) -> str:
    """Render one row as comma-joined coordinates, a tab, and the value."""
    coords = ",".join(str(coordinate) for coordinate in row.coords)
    return f"{coords}\t{format_scalar(row.value)}"


def format_scalar(value: Any) -> str:
    """Render a scalar, dropping the fraction of integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
