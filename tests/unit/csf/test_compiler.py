"""Unit tests for the prefix tree compiler."""

from __future__ import annotations

import random

import pytest

from core.errors import CsfBuildError
from csf.compiler import compile_rows, compile_tree
from csf.prefix_tree import PrefixTree
from tests.fiber_samples import sample_fids, sample_fptr, sample_rows, sample_vals


def test_compile_rows_builds_expected_levels() -> None:
    """Compiling the sample rows should yield the known level arrays."""
    compiled = compile_rows(sample_rows())

    assert (
        [list(row) for row in compiled.fptr] == sample_fptr()
        and [list(row) for row in compiled.fids] == sample_fids()
        and list(compiled.vals) == sample_vals()
    )


def test_compile_rows_is_independent_of_input_order() -> None:
    """Shuffled input should compile to identical level arrays."""
    expected = compile_rows(sample_rows())
    shuffled_rows = sample_rows()
    random.Random(7).shuffle(shuffled_rows)

    assert compile_rows(shuffled_rows) == expected


def test_compile_tree_matches_compile_rows() -> None:
    """An externally populated tree should compile like raw rows."""
    tree = PrefixTree()
    for coords, value in reversed(sample_rows()):
        tree.insert(coords, value)

    assert compile_tree(tree) == compile_rows(sample_rows())


def test_compile_empty_rows_yields_empty_levels() -> None:
    """No rows should compile to empty arrays."""
    compiled = compile_rows([])

    assert compiled.fptr == () and compiled.fids == () and compiled.vals == ()


def test_compile_rows_accepts_plain_pairs() -> None:
    """Plain (coords, value) tuples should be accepted as rows."""
    compiled = compile_rows([([2, 1], 1.0), ([1, 1], 2.0)])

    assert compiled.fids == ((1, 2), (1, 1)) and compiled.vals == (2.0, 1.0)


def test_compile_rows_rejects_mixed_dimensionality() -> None:
    """Rows of different lengths should fail at construction."""
    with pytest.raises(CsfBuildError):
        compile_rows([((1, 2), 1.0), ((1, 2, 3), 2.0)])
    assert True


def test_compile_rows_rejects_declared_ndim_mismatch() -> None:
    """Rows should match an explicitly declared dimensionality."""
    with pytest.raises(CsfBuildError):
        compile_rows([((1, 2), 1.0)], ndim=3)
    assert True


def test_compile_rows_rejects_malformed_row() -> None:
    """Rows that are not coordinate/value pairs should fail."""
    with pytest.raises(CsfBuildError):
        compile_rows([(1, 2, 3)])
    assert True


def test_compile_rows_rejects_incomparable_coordinates() -> None:
    """Coordinates in one group must support ordering."""
    with pytest.raises(CsfBuildError):
        compile_rows([((1,), 1.0), (("a",), 2.0)])
    assert True


def test_compile_tree_rejects_interior_values() -> None:
    """A tree holding values above the leaf level cannot be compiled."""
    tree = PrefixTree()
    tree.insert((1, 2), 1.0)
    (_, interior), = tree.root.children_with_keys()
    interior.assign(3.0)

    with pytest.raises(CsfBuildError):
        compile_tree(tree)

    assert len(tree) == 1
