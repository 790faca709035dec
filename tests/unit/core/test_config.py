"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import CsfConfig
from core.errors import CsfConfigError


def test_from_env_uses_defaults() -> None:
    """Config should fall back to defaults when variables are unset."""
    config = CsfConfig.from_env()

    assert config == CsfConfig(
        duplicate_policy="replace", validate_structure=True, log_level="info"
    )


def test_from_env_reads_duplicate_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should normalize the duplicate policy from environment."""
    monkeypatch.setenv("CSF_DUPLICATE_POLICY", " Reject ")

    config = CsfConfig.from_env()

    assert config.duplicate_policy == "reject"


def test_from_env_reads_validation_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should parse boolean flags."""
    monkeypatch.setenv("CSF_VALIDATE_STRUCTURE", "no")

    config = CsfConfig.from_env()

    assert config.validate_structure is False


def test_from_env_raises_for_invalid_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported duplicate policies."""
    monkeypatch.setenv("CSF_DUPLICATE_POLICY", "merge")

    with pytest.raises(CsfConfigError):
        CsfConfig.from_env()

    assert os.getenv("CSF_DUPLICATE_POLICY") == "merge"


def test_from_env_raises_for_invalid_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean values."""
    monkeypatch.setenv("CSF_VALIDATE_STRUCTURE", "sometimes")

    with pytest.raises(CsfConfigError):
        CsfConfig.from_env()

    assert os.getenv("CSF_VALIDATE_STRUCTURE") == "sometimes"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown log levels."""
    monkeypatch.setenv("CSF_LOG_LEVEL", "verbose")

    with pytest.raises(CsfConfigError):
        CsfConfig.from_env()

    assert True
