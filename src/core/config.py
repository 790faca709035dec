"""Runtime configuration model for csfiber.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_DUPLICATE_POLICY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_VALIDATE_STRUCTURE,
    DUPLICATE_POLICY_ENV,
    FALSE_FLAG_VALUES,
    LOG_LEVEL_ENV,
    SUPPORTED_DUPLICATE_POLICIES,
    SUPPORTED_LOG_LEVELS,
    TRUE_FLAG_VALUES,
    VALIDATE_STRUCTURE_ENV,
)
from core.errors import CsfConfigError


@dataclass(frozen=True)
class CsfConfig:
    """Validated runtime configuration.

    Attributes:
        duplicate_policy: How repeated coordinate tuples are merged.
        validate_structure: Whether raw level arrays are checked on construction.
        log_level: Minimum structured log level.
    """

    duplicate_policy: str = DEFAULT_DUPLICATE_POLICY
    validate_structure: bool = DEFAULT_VALIDATE_STRUCTURE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "CsfConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CsfConfigError: If environment values are invalid.
        """
        duplicate_policy = _parse_choice(
            DUPLICATE_POLICY_ENV,
            os.getenv(DUPLICATE_POLICY_ENV, DEFAULT_DUPLICATE_POLICY),
            SUPPORTED_DUPLICATE_POLICIES,
        )
        validate_structure = _parse_flag(
            VALIDATE_STRUCTURE_ENV,
            os.getenv(VALIDATE_STRUCTURE_ENV),
            DEFAULT_VALIDATE_STRUCTURE,
        )
        log_level = log_level_from_env()
        return cls(
            duplicate_policy=duplicate_policy,
            validate_structure=validate_structure,
            log_level=log_level,
        )


def log_level_from_env() -> str:
    """Read only the log level from environment.

    Loggers are created at import time, so they must not depend on
    unrelated configuration being valid.

    Returns:
        Normalized log level name.

    Raises:
        CsfConfigError: If CSF_LOG_LEVEL is not a supported level.
    """
    return _parse_choice(
        LOG_LEVEL_ENV,
        os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        SUPPORTED_LOG_LEVELS,
    )


def validate_duplicate_policy(policy: str) -> str:
    """Return a supported duplicate policy or raise.

    Args:
        policy: Candidate policy name.

    Returns:
        The normalized policy name.

    Raises:
        CsfConfigError: If policy is not supported.
    """
    return _parse_choice("duplicate_policy", policy, SUPPORTED_DUPLICATE_POLICIES)


def _parse_choice(field_name: str, raw_value: str, supported: tuple[str, ...]) -> str:
    """Parse a value restricted to a fixed set of choices.

    Args:
        field_name: Environment variable or field name for error context.
        raw_value: Raw string value.
        supported: Accepted values.

    Returns:
        Normalized lowercase value.

    Raises:
        CsfConfigError: If value is not one of the supported choices.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in supported:
        return normalized_value
    raise CsfConfigError(
        f"Invalid {field_name} value: expected one of {', '.join(supported)}, "
        f"got '{raw_value}'. Set {field_name} to a supported value."
    )


def _parse_flag(field_name: str, raw_value: str | None, default_value: bool) -> bool:
    """Parse a boolean environment flag.

    Args:
        field_name: Environment variable name.
        raw_value: Raw string from environment, if set.
        default_value: Value used when unset.

    Returns:
        Parsed boolean.

    Raises:
        CsfConfigError: If value is not a recognized flag.
    """
    if raw_value is None:
        return default_value
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_FLAG_VALUES:
        return True
    if normalized_value in FALSE_FLAG_VALUES:
        return False
    raise CsfConfigError(
        f"Invalid {field_name} value: expected true/false, got '{raw_value}'. "
        f"Set {field_name} to one of {', '.join(TRUE_FLAG_VALUES + FALSE_FLAG_VALUES)}."
    )
