"""Prefix tree to fiber level compiler.

This module flattens a prefix tree breadth-first, one level per pass,
into the offset, coordinate and value arrays of a compressed fiber.
"""

from __future__ import annotations

from operator import itemgetter
from typing import Any, Iterable

from core.constants import DEFAULT_DUPLICATE_POLICY
from core.errors import CsfBuildError, CsfStructureError
from core.logging_config import get_logger
from core.types import CompiledLevels, RowInput
from csf.prefix_tree import PrefixTree, PrefixTreeNode
from csf.validation import validate_levels

_LOGGER = get_logger(__name__)


def compile_tree(tree: PrefixTree) -> CompiledLevels:
    """Flatten a populated prefix tree into fiber level arrays.

    Args:
        tree: Prefix tree whose terminal nodes carry row values.

    Returns:
        Compiled offset, coordinate and value rows.

    Raises:
        CsfBuildError: If the tree does not describe rows of one fixed depth.
    """
    fptr: list[tuple[int, ...]] = []
    fids: list[tuple[Any, ...]] = []
    vals: list[Any] = []
    frontier: list[PrefixTreeNode] = [tree.root]
    is_root_level = True
    while frontier:
        keys, children, offsets = _expand_frontier(frontier)
        if keys:
            fids.append(tuple(keys))
            if is_root_level:
                is_root_level = False
            else:
                fptr.append(tuple(offsets))
        vals.extend(child.value for child in children if child.has_value)
        frontier = children
    compiled = CompiledLevels(fptr=tuple(fptr), fids=tuple(fids), vals=tuple(vals))
    _validate_compiled(compiled)
    _LOGGER.info(
        "csf_compiled",
        ndim=len(compiled.fids),
        nnz=len(compiled.vals),
        level_sizes=[len(row) for row in compiled.fids],
    )
    return compiled


def compile_rows(
    rows: Iterable[RowInput],
    ndim: int | None = None,
    duplicate_policy: str = DEFAULT_DUPLICATE_POLICY,
) -> CompiledLevels:
    """Insert rows into a fresh prefix tree and compile it.

    Args:
        rows: ``(coords, value)`` pairs or ``FiberRow`` items.
        ndim: Optional declared dimensionality.
        duplicate_policy: Policy for repeated coordinate tuples.

    Returns:
        Compiled offset, coordinate and value rows.

    Raises:
        CsfBuildError: If rows are malformed or disagree on dimensionality.
    """
    tree = PrefixTree(depth=ndim, duplicate_policy=duplicate_policy)
    for row_number, row in enumerate(rows):
        coords, value = unpack_row(row, row_number)
        tree.insert(coords, value)
    return compile_tree(tree)


def _expand_frontier(
    frontier: list[PrefixTreeNode],
) -> tuple[list[Any], list[PrefixTreeNode], list[int]]:
    """Collect each frontier node's children sorted by coordinate.

    Args:
        frontier: Nodes of the current level, in level order.

    Returns:
        Concatenated child keys, child nodes, and cumulative offsets.
    """
    keys: list[Any] = []
    children: list[PrefixTreeNode] = []
    offsets = [0]
    for node in frontier:
        try:
            entries = sorted(node.children_with_keys(), key=itemgetter(0))
        except TypeError as error:
            raise CsfBuildError(
                f"Coordinates within one level must be mutually comparable: {error}."
            ) from error
        keys.extend(key for key, _ in entries)
        children.extend(child for _, child in entries)
        offsets.append(len(keys))
    return keys, children, offsets


def unpack_row(row: RowInput, row_number: int) -> tuple[Any, Any]:
    """Split a row into coordinates and value, rejecting malformed shapes."""
    try:
        coords, value = row
    except (TypeError, ValueError) as error:
        raise CsfBuildError(
            f"Invalid row #{row_number + 1}: expected a (coords, value) pair, got {row!r}."
        ) from error
    if isinstance(coords, (str, bytes)) or not hasattr(coords, "__iter__"):
        raise CsfBuildError(
            f"Invalid row #{row_number + 1}: coordinates must be a sequence, got {coords!r}."
        )
    return coords, value


def _validate_compiled(compiled: CompiledLevels) -> None:
    try:
        validate_levels(compiled.fptr, compiled.fids, compiled.vals)
    except CsfStructureError as error:
        raise CsfBuildError(
            f"Prefix tree does not describe rows of one fixed depth: {error}"
        ) from error
