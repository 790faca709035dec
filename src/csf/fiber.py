"""Compressed sparse fiber structure and queries.

This module owns the immutable level arrays of a fiber and answers
row reconstruction and weighted column-sum queries directly on them.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from core.constants import DEFAULT_DUPLICATE_POLICY
from core.errors import CsfColumnTypeError, CsfIndexError, CsfStructureError
from core.types import FiberRow, FiberSummary, RowInput
from csf.compiler import compile_rows, compile_tree
from csf.prefix_tree import PrefixTree
from csf.row_iterator import FiberRowIterator
from csf.validation import validate_levels
from csf.weights import level_weights


class CompressedSparseFiber:
    """Sparse rows stored level by level with shared prefixes merged.

    ``fids[L]`` holds the coordinates of level ``L`` grouped by parent,
    ``fptr[L]`` delimits the level ``L + 1`` group of each level ``L``
    entry, and ``vals`` holds one value per leaf in leaf order.
    """

    def __init__(
        self,
        fptr: Sequence[Sequence[int]],
        fids: Sequence[Sequence[Any]],
        vals: Sequence[Any],
        ndim: int | None = None,
        validate: bool = True,
    ) -> None:
        """Create a fiber from raw level arrays.

        Args:
            fptr: Offset rows, one per level boundary.
            fids: Coordinate rows, one per level.
            vals: Leaf values.
            ndim: Declared dimensionality; required only for empty fibers.
            validate: Whether to check structural invariants.

        Raises:
            CsfStructureError: If arrays are inconsistent.
        """
        fids_rows = tuple(tuple(row) for row in fids)
        fptr_rows = tuple(tuple(int(offset) for offset in row) for row in fptr)
        vals_row = tuple(vals)
        if validate:
            validate_levels(fptr_rows, fids_rows, vals_row)
        self._ndim = _resolve_ndim(ndim, len(fids_rows))
        self._fids = fids_rows
        self._vals = vals_row
        self._fptr = tuple(_frozen_offsets(row) for row in fptr_rows)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[RowInput],
        ndim: int | None = None,
        duplicate_policy: str = DEFAULT_DUPLICATE_POLICY,
    ) -> "CompressedSparseFiber":
        """Build a fiber from ``(coords, value)`` rows.

        Args:
            rows: Rows to store; repeated coordinate tuples are merged.
            ndim: Optional declared dimensionality.
            duplicate_policy: ``replace`` or ``reject``.

        Returns:
            A validated fiber.

        Raises:
            CsfBuildError: If rows are malformed or disagree on dimensionality.
        """
        compiled = compile_rows(rows, ndim=ndim, duplicate_policy=duplicate_policy)
        return cls(compiled.fptr, compiled.fids, compiled.vals, ndim=ndim, validate=False)

    @classmethod
    def from_tree(cls, tree: PrefixTree) -> "CompressedSparseFiber":
        """Build a fiber from an already-populated prefix tree."""
        compiled = compile_tree(tree)
        return cls(compiled.fptr, compiled.fids, compiled.vals, ndim=tree.depth, validate=False)

    @property
    def fptr(self) -> list[list[int]]:
        return [row.tolist() for row in self._fptr]

    @property
    def fids(self) -> tuple[tuple[Any, ...], ...]:
        return self._fids

    @property
    def vals(self) -> tuple[Any, ...]:
        return self._vals

    @property
    def ndim(self) -> int:
        return self._ndim

    @property
    def nnz(self) -> int:
        return len(self._vals)

    @property
    def level_sizes(self) -> tuple[int, ...]:
        return tuple(len(row) for row in self._fids)

    def summary(self) -> FiberSummary:
        """Return the fiber's shape summary."""
        return FiberSummary(ndim=self._ndim, nnz=self.nnz, level_sizes=self.level_sizes)

    def expand_row(self, index: int) -> FiberRow:
        """Reconstruct one stored row from its leaf index.

        Walks from the leaf level up to the root, locating each parent
        by binary search over the offset row of the level above.

        Args:
            index: Leaf index in ``[0, nnz)``.

        Returns:
            The full coordinate tuple and the leaf value.

        Raises:
            CsfIndexError: If index is out of range.
        """
        self._check_leaf_index(index)
        coords = [self._fids[-1][index]]
        cursor = index
        for level in range(len(self._fids) - 2, -1, -1):
            parent = int(np.searchsorted(self._fptr[level], cursor, side="right")) - 1
            coords.append(self._fids[level][parent])
            cursor = parent
        coords.reverse()
        return FiberRow(coords=tuple(coords), value=self._vals[index])

    def sum_column(self, dimension: int) -> Any:
        """Sum one coordinate dimension over every stored row.

        Entries above the leaf level stand for several rows, so each is
        counted once per leaf below it. ``dimension == ndim`` sums the
        values instead of a coordinate.

        Args:
            dimension: Dimension index in ``[0, ndim]``.

        Returns:
            The column sum; ``0`` for an empty fiber.

        Raises:
            CsfIndexError: If dimension is out of range.
            CsfColumnTypeError: If the summed entries are not numeric.
        """
        self._check_dimension(dimension)
        if not self._vals:
            return 0
        try:
            return self._sum_entries(dimension)
        except TypeError as error:
            raise CsfColumnTypeError(
                f"Cannot sum dimension {dimension}: entries must be numeric ({error}). "
                "Sum only dimensions holding numeric coordinates."
            ) from error

    def _sum_entries(self, dimension: int) -> Any:
        if dimension == self._ndim:
            return sum(self._vals)
        column = self._fids[dimension]
        if dimension == self._ndim - 1:
            return sum(column)
        weights = level_weights(self._fptr, dimension)
        return sum(coordinate * int(weight) for coordinate, weight in zip(column, weights))

    def iter_rows(self, start: int = 0) -> FiberRowIterator:
        """Return a fresh iterator beginning at leaf ``start``."""
        return FiberRowIterator(self, start=start)

    def __iter__(self) -> FiberRowIterator:
        return FiberRowIterator(self)

    def __len__(self) -> int:
        return len(self._vals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompressedSparseFiber):
            return NotImplemented
        return (
            self._ndim == other._ndim
            and self._fids == other._fids
            and self._vals == other._vals
            and self.fptr == other.fptr
        )

    def __repr__(self) -> str:
        return f"CompressedSparseFiber(ndim={self._ndim}, nnz={self.nnz})"

    def _check_leaf_index(self, index: int) -> None:
        if not _is_integer(index) or not 0 <= index < len(self._vals):
            raise CsfIndexError(
                f"Leaf index {index!r} is out of range for a fiber with "
                f"{len(self._vals)} rows. Use an index in [0, {len(self._vals)})."
            )

    def _check_dimension(self, dimension: int) -> None:
        if not _is_integer(dimension) or not 0 <= dimension <= self._ndim:
            raise CsfIndexError(
                f"Dimension {dimension!r} is out of range for a {self._ndim}-dimensional "
                f"fiber. Use a dimension in [0, {self._ndim}]."
            )


def _resolve_ndim(ndim: int | None, level_count: int) -> int:
    if ndim is None:
        return level_count
    if isinstance(ndim, bool) or not isinstance(ndim, int) or ndim < 0:
        raise CsfStructureError(f"Declared ndim must be a non-negative integer, got {ndim!r}.")
    if level_count and ndim != level_count:
        raise CsfStructureError(
            f"Declared ndim {ndim} does not match {level_count} fids levels."
        )
    return ndim


def _frozen_offsets(row: Sequence[int]) -> np.ndarray:
    offsets = np.asarray(row, dtype=np.int64)
    offsets.setflags(write=False)
    return offsets


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
