"""Unit tests for run-spec CLI execution."""

from __future__ import annotations

import pytest

from cli.main import main
from core.errors import CsfRunSpecError
from tests.fixture_paths import fixture_path


def test_cli_run_spec_executes_query_steps(capsys: pytest.CaptureFixture[str]) -> None:
    """Run-spec command should print every step's output lines."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/valid_queries.yaml"))])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == [
        "ndim=4",
        "nnz=8",
        "level_sizes=2,3,4,8",
        "2,2,2,2\t7",
        "11",
        "1,1,1,2\t1",
    ]


def test_cli_run_spec_missing_rows_raises_error() -> None:
    """Run-spec should fail when a step has no rows file."""
    with pytest.raises(CsfRunSpecError):
        main(["run-spec", str(fixture_path("run_spec/missing_rows.yaml"))])
    assert True
