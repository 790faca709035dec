"""Unit tests for fiber structural invariant checks."""

from __future__ import annotations

import pytest

from core.errors import CsfStructureError
from csf.validation import validate_levels
from tests.fiber_samples import sample_fids, sample_fptr, sample_vals


def test_validate_levels_accepts_sample() -> None:
    """Consistent sample arrays should pass validation."""
    validate_levels(sample_fptr(), sample_fids(), sample_vals())
    assert True


def test_validate_levels_accepts_empty() -> None:
    """All-empty arrays describe the empty fiber."""
    validate_levels([], [], [])
    assert True


@pytest.mark.parametrize(
    ("fptr", "fids", "vals"),
    [
        ([[0, 1]], [[1]], [1.0]),
        ([], [[1], [2]], [1.0]),
        ([[0, 1]], [[1], [2]], [1.0, 2.0]),
        ([[0, 1, 1]], [[1], [2]], [1.0]),
        ([[1, 1]], [[1], [2]], [1.0]),
        ([[0, 1]], [[1], [2, 3]], [1.0, 2.0]),
        ([[0, 2, 1, 2]], [[1, 2, 3], [4, 5]], [1.0, 2.0]),
        ([[0, 2]], [[1], [5, 4]], [1.0, 2.0]),
        ([[0, 2]], [[1], [4, 4]], [1.0, 2.0]),
        ([], [[2, 1]], [1.0, 2.0]),
        ([], [], [1.0]),
    ],
)
def test_validate_levels_rejects_broken_invariants(
    fptr: list[list[int]],
    fids: list[list[int]],
    vals: list[float],
) -> None:
    """Each broken invariant should raise a structure error."""
    with pytest.raises(CsfStructureError):
        validate_levels(fptr, fids, vals)
    assert True


def test_duplicates_across_groups_are_allowed() -> None:
    """The same coordinate may repeat under different parents."""
    validate_levels([[0, 1, 2]], [[1, 2], [7, 7]], [1.0, 2.0])
    assert True


def test_mixed_coordinate_types_raise_structure_error() -> None:
    """Incomparable siblings should surface as a structure error."""
    with pytest.raises(CsfStructureError, match="incomparable"):
        validate_levels([[0, 2]], [[1], [3, "a"]], [1.0, 2.0])
    assert True
