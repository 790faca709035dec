"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_csf_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CSF_* variables from the developer shell out of tests."""
    for name in ("CSF_DUPLICATE_POLICY", "CSF_VALIDATE_STRUCTURE", "CSF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
