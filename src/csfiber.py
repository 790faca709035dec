"""Public SDK surface for csfiber.

This module provides a stable import path for library users.
It re-exports the fiber structure, builders and typed models.
"""

from __future__ import annotations

from core.config import CsfConfig
from core.errors import (
    CsfBuildError,
    CsfColumnTypeError,
    CsfConfigError,
    CsfError,
    CsfIndexError,
    CsfIngestError,
    CsfRunSpecError,
    CsfStructureError,
)
from core.run_spec_execution import execute_run_spec_file
from core.types import FiberRow, FiberSummary
from csf.builder import FiberBuilder
from csf.fiber import CompressedSparseFiber
from csf.prefix_tree import PrefixTree
from csf.row_iterator import FiberRowIterator
from csf.weights import level_weights
from ingest.fiber_loader import load_fiber
from ingest.row_reader import read_rows

__all__ = [
    "CompressedSparseFiber",
    "CsfBuildError",
    "CsfColumnTypeError",
    "CsfConfig",
    "CsfConfigError",
    "CsfError",
    "CsfIndexError",
    "CsfIngestError",
    "CsfRunSpecError",
    "CsfStructureError",
    "FiberBuilder",
    "FiberRow",
    "FiberRowIterator",
    "FiberSummary",
    "PrefixTree",
    "execute_run_spec_file",
    "level_weights",
    "load_fiber",
    "read_rows",
]
