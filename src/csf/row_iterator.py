"""Forward iteration over the rows stored in a fiber.

The cursor lives in the iterator rather than the fiber, so several
independent traversals over one fiber can run side by side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.types import FiberRow

if TYPE_CHECKING:
    from csf.fiber import CompressedSparseFiber


class FiberRowIterator:
    """Single-pass iterator yielding rows in leaf index order."""

    def __init__(self, fiber: "CompressedSparseFiber", start: int = 0) -> None:
        """Create an iterator over one fiber.

        Args:
            fiber: Fiber to traverse.
            start: First leaf index to yield.
        """
        self._fiber = fiber
        self._start = max(start, 0)
        self._position = self._start

    @property
    def position(self) -> int:
        """Leaf index of the next row to yield."""
        return self._position

    def reset(self) -> None:
        """Rewind the cursor to the starting leaf."""
        self._position = self._start

    def __iter__(self) -> "FiberRowIterator":
        return self

    def __next__(self) -> FiberRow:
        if self._position >= len(self._fiber):
            raise StopIteration
        row = self._fiber.expand_row(self._position)
        self._position += 1
        return row

    def __length_hint__(self) -> int:
        return max(len(self._fiber) - self._position, 0)
