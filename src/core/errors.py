"""csfiber exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class CsfError(Exception):
    """Base exception for all csfiber failures."""


class CsfConfigError(CsfError):
    """Raised for invalid runtime configuration."""


class CsfBuildError(CsfError):
    """Raised when rows or a prefix tree cannot be compiled."""


class CsfStructureError(CsfError):
    """Raised when raw level arrays violate fiber invariants."""


class CsfIndexError(CsfError, IndexError):
    """Raised for out-of-range leaf indices or dimensions."""


class CsfIngestError(CsfError):
    """Raised for row file parsing failures."""


class CsfRunSpecError(CsfError):
    """Raised for invalid or unsupported query-spec configuration."""


class CsfColumnTypeError(CsfError, TypeError):
    """Raised when a summed column holds non-numeric entries."""
