"""Shared typed models.

This module defines immutable data models used by the compiler,
fiber queries, ingest and CLI layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, NamedTuple, Tuple, Union

Coordinate = Hashable
RowInput = Union["FiberRow", Tuple[Any, Any]]


class FiberRow(NamedTuple):
    """One stored row: a full coordinate tuple and its value.

    Attributes:
        coords: Coordinates ordered from dimension 0 to D-1.
        value: Scalar value attached to the coordinates.
    """

    coords: tuple[Any, ...]
    value: Any


@dataclass(frozen=True)
class CompiledLevels:
    """Level arrays produced by flattening a prefix tree.

    Attributes:
        fptr: Offset rows, one per level boundary.
        fids: Coordinate rows, one per level.
        vals: Leaf values in leaf order.
    """

    fptr: tuple[tuple[int, ...], ...]
    fids: tuple[tuple[Any, ...], ...]
    vals: tuple[Any, ...]


@dataclass(frozen=True)
class FiberSummary:
    """Shape summary of a compressed sparse fiber.

    Attributes:
        ndim: Number of dimensions.
        nnz: Number of stored rows.
        level_sizes: Entry count of each fids level.
    """

    ndim: int
    nnz: int
    level_sizes: tuple[int, ...]
