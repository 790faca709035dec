"""Unit tests for leaf-count weight propagation."""

from __future__ import annotations

import numpy as np

from csf.weights import level_weights
from tests.fiber_samples import sample_fptr


def _offsets() -> list[np.ndarray]:
    return [np.asarray(row, dtype=np.int64) for row in sample_fptr()]


def test_deepest_parent_level_uses_group_sizes() -> None:
    """The level above the leaves should weigh each entry by its group size."""
    assert level_weights(_offsets(), 2).tolist() == [2, 2, 1, 3]


def test_weights_fold_upward() -> None:
    """Shallower levels should sum the weights of their children."""
    assert level_weights(_offsets(), 1).tolist() == [2, 3, 3]


def test_root_level_weights_cover_every_leaf() -> None:
    """Root weights should add up to the number of stored rows."""
    weights = level_weights(_offsets(), 0)

    assert weights.tolist() == [5, 3] and int(weights.sum()) == 8
