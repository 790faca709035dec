"""Row file readers for fiber construction.

This module loads coordinate rows from JSONL or CSV files.
It normalizes inputs into typed fiber rows for the builder.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from core.constants import JSONL_COORDS_FIELD, JSONL_VALUE_FIELD, SUPPORTED_ROW_EXTENSIONS
from core.errors import CsfIngestError
from core.logging_config import get_logger
from core.types import FiberRow

_LOGGER = get_logger(__name__)


def read_rows(source_path: str | Path) -> list[FiberRow]:
    """Load rows from a JSONL or CSV file.

    Args:
        source_path: Path to a ``.jsonl`` or ``.csv`` file.

    Returns:
        Rows in file order.

    Raises:
        CsfIngestError: If the file is missing, unsupported, or malformed.
    """
    file_path = Path(source_path).expanduser()
    if not file_path.is_file():
        raise CsfIngestError(
            f"Failed to read rows at {file_path}: file does not exist. "
            "Provide an existing .jsonl or .csv file."
        )
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_ROW_EXTENSIONS:
        raise CsfIngestError(
            f"Unsupported row file {file_path}. "
            f"Supported extensions: {SUPPORTED_ROW_EXTENSIONS}."
        )
    rows = _read_jsonl_rows(file_path) if suffix == ".jsonl" else _read_csv_rows(file_path)
    _LOGGER.info("rows_loaded", source=str(file_path), row_count=len(rows))
    return rows


def _read_jsonl_rows(file_path: Path) -> list[FiberRow]:
    """Read ``coords``/``value`` objects from JSONL input.

    Args:
        file_path: Path to JSONL file.

    Returns:
        Parsed rows.

    Raises:
        CsfIngestError: If a line is invalid JSON or lacks required fields.
    """
    rows: list[FiberRow] = []
    for line_number, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        rows.append(_parse_jsonl_line(file_path, line, line_number))
    return rows


def _parse_jsonl_line(file_path: Path, line: str, line_number: int) -> FiberRow:
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise CsfIngestError(
            f"Failed to parse JSONL row at {file_path}:{line_number}: "
            f"{error.msg}. Fix the JSON syntax and retry."
        ) from error
    if not isinstance(payload, dict):
        raise CsfIngestError(
            f"Invalid JSONL row at {file_path}:{line_number}: expected a JSON object."
        )
    coords = payload.get(JSONL_COORDS_FIELD)
    if not isinstance(coords, list) or not coords:
        raise CsfIngestError(
            f"Invalid JSONL row at {file_path}:{line_number}: "
            f"expected non-empty list field '{JSONL_COORDS_FIELD}'."
        )
    value = payload.get(JSONL_VALUE_FIELD)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CsfIngestError(
            f"Invalid JSONL row at {file_path}:{line_number}: "
            f"expected numeric field '{JSONL_VALUE_FIELD}'."
        )
    return FiberRow(coords=tuple(coords), value=value)


def _read_csv_rows(file_path: Path) -> list[FiberRow]:
    """Read rows from CSV input with a header line.

    All columns but the last are coordinates; the last holds the value.

    Args:
        file_path: Path to CSV file.

    Returns:
        Parsed rows.

    Raises:
        CsfIngestError: If the header is missing or a row is malformed.
    """
    with file_path.open(newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None or len(header) < 2:
            raise CsfIngestError(
                f"CSV row file {file_path} needs a header with at least one "
                "coordinate column and a value column."
            )
        rows: list[FiberRow] = []
        for cells in reader:
            if not any(cell.strip() for cell in cells):
                continue
            rows.append(_parse_csv_cells(file_path, cells, len(header), reader.line_num))
    return rows


def _parse_csv_cells(
    file_path: Path,
    cells: list[str],
    column_count: int,
    line_number: int,
) -> FiberRow:
    if len(cells) != column_count:
        raise CsfIngestError(
            f"Invalid CSV row at {file_path}:{line_number}: expected {column_count} "
            f"columns, got {len(cells)}."
        )
    value = _parse_cell(cells[-1])
    if not isinstance(value, (int, float)):
        raise CsfIngestError(
            f"Invalid CSV row at {file_path}:{line_number}: value column must be numeric, "
            f"got '{cells[-1]}'."
        )
    return FiberRow(coords=tuple(_parse_cell(cell) for cell in cells[:-1]), value=value)


def _parse_cell(cell: str) -> Any:
    text = cell.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text
