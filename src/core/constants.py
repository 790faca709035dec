"""Core constants used across csfiber modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DUPLICATE_POLICY_ENV = "CSF_DUPLICATE_POLICY"
VALIDATE_STRUCTURE_ENV = "CSF_VALIDATE_STRUCTURE"
LOG_LEVEL_ENV = "CSF_LOG_LEVEL"
DEFAULT_DUPLICATE_POLICY = "replace"
SUPPORTED_DUPLICATE_POLICIES = ("replace", "reject")
DEFAULT_VALIDATE_STRUCTURE = True
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
SUPPORTED_ROW_EXTENSIONS = (".jsonl", ".csv")
JSONL_COORDS_FIELD = "coords"
JSONL_VALUE_FIELD = "value"
RUN_SPEC_VERSION = 1
