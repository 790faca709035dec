"""Unit tests for row file readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import CsfConfig
from core.errors import CsfBuildError, CsfIngestError
from ingest.fiber_loader import load_fiber
from ingest.row_reader import read_rows
from tests.fiber_samples import sample_rows
from tests.fixture_paths import fixture_path


def test_read_rows_parses_jsonl() -> None:
    """JSONL rows should parse into coordinate tuples and values."""
    rows = read_rows(fixture_path("rows/sample.jsonl"))

    assert len(rows) == 8 and set(rows) == set(sample_rows())


def test_read_rows_parses_csv() -> None:
    """CSV rows should treat the last column as the value."""
    rows = read_rows(fixture_path("rows/sample.csv"))

    assert set(rows) == set(sample_rows())


def test_read_rows_keeps_label_cells_as_strings() -> None:
    """Non-numeric CSV cells should stay strings."""
    rows = read_rows(fixture_path("rows/labels.csv"))

    assert rows[0] == (("north", "apple"), 3)


def test_read_rows_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when the file is missing."""
    missing_path = tmp_path / "does-not-exist.jsonl"

    with pytest.raises(CsfIngestError):
        read_rows(missing_path)

    assert missing_path.exists() is False


def test_read_rows_raises_for_unsupported_extension() -> None:
    """Only JSONL and CSV files should be accepted."""
    with pytest.raises(CsfIngestError):
        read_rows(fixture_path("rows/sample.txt"))
    assert True


@pytest.mark.parametrize(
    "relative_path",
    ["rows/bad_rows.jsonl", "rows/missing_value.jsonl", "rows/short_row.csv"],
)
def test_read_rows_raises_for_malformed_rows(relative_path: str) -> None:
    """Malformed rows should raise ingest errors."""
    with pytest.raises(CsfIngestError):
        read_rows(fixture_path(relative_path))
    assert True


def test_read_rows_raises_for_empty_csv(tmp_path: Path) -> None:
    """CSV files need a header row."""
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("", encoding="utf-8")

    with pytest.raises(CsfIngestError):
        read_rows(csv_path)

    assert csv_path.exists()


def test_load_fiber_builds_from_file() -> None:
    """Loading a row file should compile every distinct row."""
    fiber = load_fiber(fixture_path("rows/sample.jsonl"), CsfConfig())

    assert list(fiber) == sample_rows()


def test_load_fiber_rejects_ragged_rows() -> None:
    """Rows of mixed dimensionality should fail at build time."""
    with pytest.raises(CsfBuildError):
        load_fiber(fixture_path("rows/ragged.jsonl"), CsfConfig())
    assert True
