"""Leaf-count weights for compressed fiber levels.

Each entry of a non-leaf level stands for every leaf below it. The
weights computed here let column sums count those leaves correctly.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def level_weights(fptr: Sequence[np.ndarray], level: int) -> np.ndarray:
    """Count the leaves below each entry of one level.

    The deepest offset row gives leaf-group sizes directly. Those sizes
    are then folded upward through each shallower offset row until the
    requested level is reached.

    Args:
        fptr: Offset rows of the fiber, as integer arrays.
        level: Level index in ``[0, len(fptr) - 1]``.

    Returns:
        Integer weights aligned 1:1 with ``fids[level]``.
    """
    weights = np.diff(fptr[-1])
    for pointer_row in reversed(fptr[level:-1]):
        weights = _fold(weights, pointer_row)
    return weights


def _fold(weights: np.ndarray, pointer_row: np.ndarray) -> np.ndarray:
    """Sum weights over each half-open range delimited by a pointer row."""
    prefix = np.concatenate((np.zeros(1, dtype=np.int64), np.cumsum(weights, dtype=np.int64)))
    return prefix[pointer_row[1:]] - prefix[pointer_row[:-1]]
