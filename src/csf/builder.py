"""Config-driven builder for compressed sparse fibers.

This module collects rows incrementally into a prefix tree and
compiles them once, applying the runtime duplicate policy.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from core.config import CsfConfig
from core.types import Coordinate, RowInput
from csf.compiler import unpack_row
from csf.fiber import CompressedSparseFiber
from csf.prefix_tree import PrefixTree


class FiberBuilder:
    """Accumulates rows and compiles them into one fiber."""

    def __init__(self, config: CsfConfig | None = None, ndim: int | None = None) -> None:
        """Create an empty builder.

        Args:
            config: Optional runtime configuration.
            ndim: Optional declared dimensionality.
        """
        self._config = config or CsfConfig.from_env()
        self._ndim = ndim
        self._tree = PrefixTree(depth=ndim, duplicate_policy=self._config.duplicate_policy)
        self._inserted_rows = 0

    def insert(self, coords: Sequence[Coordinate], value: Any) -> "FiberBuilder":
        """Add one row; repeated coordinates follow the configured policy."""
        self._tree.insert(coords, value)
        self._inserted_rows += 1
        return self

    def extend(self, rows: Iterable[RowInput]) -> "FiberBuilder":
        """Add many ``(coords, value)`` rows."""
        for row in rows:
            coords, value = unpack_row(row, self._inserted_rows)
            self.insert(coords, value)
        return self

    def build(self) -> CompressedSparseFiber:
        """Compile collected rows into a fiber.

        Returns:
            A fiber holding every distinct row inserted so far.

        Raises:
            CsfBuildError: If the collected rows cannot be compiled.
        """
        return CompressedSparseFiber.from_tree(self._tree)

    def from_levels(
        self,
        fptr: Sequence[Sequence[int]],
        fids: Sequence[Sequence[Any]],
        vals: Sequence[Any],
    ) -> CompressedSparseFiber:
        """Wrap raw level arrays, validating them when configured to."""
        return CompressedSparseFiber(
            fptr,
            fids,
            vals,
            ndim=self._ndim,
            validate=self._config.validate_structure,
        )

    def __len__(self) -> int:
        return len(self._tree)
