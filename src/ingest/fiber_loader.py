"""Row file to fiber loading.

This module connects row file readers to the config-driven builder.
"""

from __future__ import annotations

from pathlib import Path

from core.config import CsfConfig
from csf.builder import FiberBuilder
from csf.fiber import CompressedSparseFiber
from ingest.row_reader import read_rows


def load_fiber(rows_path: str | Path, config: CsfConfig | None = None) -> CompressedSparseFiber:
    """Read a row file and compile it into a fiber.

    Args:
        rows_path: Path to a ``.jsonl`` or ``.csv`` row file.
        config: Optional runtime configuration.

    Returns:
        Compiled fiber.

    Raises:
        CsfIngestError: If the file cannot be read.
        CsfBuildError: If rows cannot be compiled.
    """
    builder = FiberBuilder(config)
    builder.extend(read_rows(rows_path))
    return builder.build()
