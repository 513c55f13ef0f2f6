from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.utils.mocks import RecordingBackend

pytest.importorskip("scipy")


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., str]:
    """Write CSV text to a temporary file and return its path."""

    def _write(text: str, name: str = "input.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
