"""Structural invariant checks for fiber level arrays.

This module verifies that offset rows, coordinate rows and values
describe one consistent tree before a fiber is exposed to queries.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.errors import CsfStructureError


def validate_levels(
    fptr: Sequence[Sequence[int]],
    fids: Sequence[Sequence[Any]],
    vals: Sequence[Any],
) -> None:
    """Validate fiber level arrays.

    Args:
        fptr: Offset rows, one per level boundary.
        fids: Coordinate rows, one per level.
        vals: Leaf values.

    Raises:
        CsfStructureError: If any structural invariant is violated.
    """
    depth = len(fids)
    if depth == 0:
        if len(fptr) or len(vals):
            raise CsfStructureError(
                "Empty fids requires empty fptr and vals. "
                f"Got {len(fptr)} fptr rows and {len(vals)} values."
            )
        return
    if len(fptr) != depth - 1:
        raise CsfStructureError(
            f"Expected {depth - 1} fptr rows for {depth} levels, got {len(fptr)}."
        )
    if len(vals) != len(fids[-1]):
        raise CsfStructureError(
            f"Expected one value per leaf: {len(fids[-1])} leaves, {len(vals)} values."
        )
    _check_groups(fids[0], (0, len(fids[0])), level=0)
    for level, pointer_row in enumerate(fptr):
        _check_pointer_row(pointer_row, len(fids[level]), len(fids[level + 1]), level)
        _check_groups(fids[level + 1], pointer_row, level=level + 1)


def _check_pointer_row(
    pointer_row: Sequence[int],
    parent_count: int,
    child_count: int,
    level: int,
) -> None:
    if len(pointer_row) != parent_count + 1:
        raise CsfStructureError(
            f"fptr[{level}] has {len(pointer_row)} offsets, expected {parent_count + 1} "
            f"(one more than fids[{level}])."
        )
    if pointer_row[0] != 0:
        raise CsfStructureError(f"fptr[{level}] must start at 0, got {pointer_row[0]}.")
    if pointer_row[-1] != child_count:
        raise CsfStructureError(
            f"fptr[{level}] must end at len(fids[{level + 1}]) = {child_count}, "
            f"got {pointer_row[-1]}."
        )
    for position in range(1, len(pointer_row)):
        if pointer_row[position] < pointer_row[position - 1]:
            raise CsfStructureError(
                f"fptr[{level}] decreases at position {position}. Offsets must be nondecreasing."
            )


def _check_groups(row: Sequence[Any], pointer_row: Sequence[int], level: int) -> None:
    for start, stop in zip(pointer_row, pointer_row[1:]):
        for position in range(start + 1, stop):
            try:
                ascending = row[position - 1] < row[position]
            except TypeError as error:
                raise CsfStructureError(
                    f"fids[{level}] mixes incomparable coordinates at position {position}: "
                    f"{row[position - 1]!r} and {row[position]!r}."
                ) from error
            if not ascending:
                raise CsfStructureError(
                    f"fids[{level}] is not strictly ascending within its group at "
                    f"position {position}: {row[position - 1]!r} then {row[position]!r}."
                )
