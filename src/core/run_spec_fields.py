"""Type-safe field parsing helpers for query-spec files.

This module centralizes primitive parsing so the query-spec loader
can turn raw YAML mappings into typed steps with consistent errors.
Every helper takes a ``context`` naming the mapping being read.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping

from core.errors import CsfRunSpecError


def required_int(fields: Mapping[str, object], field_name: str, context: str) -> int:
    """Read a required integer field."""
    value = optional_int(fields, field_name, context)
    if value is None:
        raise CsfRunSpecError(f"Invalid {context}: missing required field '{field_name}'.")
    return value


def optional_string(fields: Mapping[str, object], field_name: str, context: str) -> str | None:
    """Read an optional string field; blank strings count as absent."""
    value = fields.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise CsfRunSpecError(
        f"Invalid {context}: field '{field_name}' must be a string when provided."
    )


def optional_int(fields: Mapping[str, object], field_name: str, context: str) -> int | None:
    """Read an optional integer field; booleans are rejected."""
    value = fields.get(field_name)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise CsfRunSpecError(
        f"Invalid {context}: field '{field_name}' must be an integer, "
        f"got {type(value).__name__}."
    )


def optional_count(fields: Mapping[str, object], field_name: str, context: str) -> int | None:
    """Read an optional non-negative integer such as a row limit."""
    value = optional_int(fields, field_name, context)
    if value is not None and value < 0:
        raise CsfRunSpecError(
            f"Invalid {context}: field '{field_name}' must be non-negative, got {value}."
        )
    return value


def reject_unknown_fields(
    fields: Mapping[str, object],
    allowed_fields: AbstractSet[str],
    context: str,
) -> None:
    """Reject fields the mapping's reader does not understand."""
    unknown_fields = sorted(set(fields) - set(allowed_fields))
    if unknown_fields:
        allowed_rows = ", ".join(sorted(allowed_fields))
        raise CsfRunSpecError(
            f"Invalid {context}: unknown fields {', '.join(unknown_fields)}. "
            f"Allowed fields: {allowed_rows}."
        )
