"""Build-phase prefix tree for coordinate rows.

This module stores coordinate tuples as nested mappings, one level per
dimension, so shared prefixes are merged before compilation.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.config import validate_duplicate_policy
from core.constants import DEFAULT_DUPLICATE_POLICY
from core.errors import CsfBuildError
from core.types import Coordinate

_MISSING = object()


class PrefixTreeNode:
    """One tree node keyed by its coordinate under the parent."""

    __slots__ = ("_children", "_value")

    def __init__(self) -> None:
        self._children: dict[Coordinate, PrefixTreeNode] = {}
        self._value: Any = _MISSING

    @property
    def has_value(self) -> bool:
        """Whether a row terminates at this node."""
        return self._value is not _MISSING

    @property
    def value(self) -> Any:
        """Terminal value, or None when no row ends here."""
        return None if self._value is _MISSING else self._value

    def children_with_keys(self) -> list[tuple[Coordinate, "PrefixTreeNode"]]:
        """Return direct children as (coordinate, node) pairs in insertion order."""
        return list(self._children.items())

    def assign(self, value: Any) -> None:
        """Attach a terminal value to this node."""
        self._value = value

    def child(self, key: Coordinate) -> "PrefixTreeNode":
        """Return the child for a key, creating it when absent."""
        node = self._children.get(key)
        if node is None:
            node = PrefixTreeNode()
            self._children[key] = node
        return node


class PrefixTree:
    """Ordered multi-level prefix tree with a single fixed depth."""

    def __init__(
        self,
        depth: int | None = None,
        duplicate_policy: str = DEFAULT_DUPLICATE_POLICY,
    ) -> None:
        """Create an empty tree.

        Args:
            depth: Declared tuple length; fixed by the first insert when omitted.
            duplicate_policy: ``replace`` overwrites repeated tuples,
                ``reject`` fails when a repeated tuple changes value.

        Raises:
            CsfBuildError: If depth is not a positive integer.
            CsfConfigError: If duplicate policy is unsupported.
        """
        if depth is not None:
            _validate_depth(depth)
        self._depth = depth
        self._duplicate_policy = validate_duplicate_policy(duplicate_policy)
        self._root = PrefixTreeNode()
        self._size = 0

    @property
    def root(self) -> PrefixTreeNode:
        return self._root

    @property
    def depth(self) -> int | None:
        return self._depth

    def __len__(self) -> int:
        return self._size

    def insert(self, coords: Sequence[Coordinate], value: Any) -> None:
        """Insert one coordinate tuple with its value.

        Args:
            coords: Coordinate tuple of the fixed depth.
            value: Scalar value stored at the terminal node.

        Raises:
            CsfBuildError: If the tuple length mismatches the tree depth,
                or a repeated tuple changes value under the reject policy.
        """
        key = tuple(coords)
        self._check_length(key)
        node = self._root
        for coordinate in key:
            node = node.child(coordinate)
        if not node.has_value:
            self._size += 1
        elif node.value != value and self._duplicate_policy == "reject":
            raise CsfBuildError(
                f"Duplicate coordinates {key} with conflicting values "
                f"{node.value!r} and {value!r}. Remove the duplicate row or "
                "use duplicate policy 'replace'."
            )
        node.assign(value)

    def _check_length(self, key: tuple[Coordinate, ...]) -> None:
        if self._depth is None:
            _validate_depth(len(key))
            self._depth = len(key)
            return
        if len(key) != self._depth:
            raise CsfBuildError(
                f"Coordinate tuple {key} has {len(key)} dimensions, expected "
                f"{self._depth}. All rows must share one dimensionality."
            )


def _validate_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise CsfBuildError(
            f"Invalid dimensionality {depth!r}: expected a positive integer. "
            "Rows need at least one coordinate."
        )
