"""
File helpers that understand the reserved names ``stdin`` and ``stdout``.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from pysatl_uxio.errors import InputUnavailableError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

logger = logging.getLogger(__name__)

STDIN = "stdin"
STDOUT = "stdout"


@contextmanager
def open_input_file(path: str) -> Iterator[TextIO]:
    """
    Open ``path`` for reading and close it on exit.

    Raises
    ------
    InputUnavailableError
        If ``path`` is ``"stdin"`` (pipelines are not supported) or the file
        cannot be opened.
    """
    if path == STDIN:
        raise InputUnavailableError(
            "Pipeline mode not implemented. Please use the '-i' command-line argument option."
        )

    try:
        fp = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise InputUnavailableError(f"Cannot open the file {path}.") from exc

    logger.debug("Opened '%s' for reading", path)
    with fp:
        yield fp


@contextmanager
def open_output_file(path: str) -> Iterator[TextIO]:
    """
    Open ``path`` for writing; ``"stdout"`` yields :data:`sys.stdout`.

    Standard output is never closed by this helper.

    Raises
    ------
    InputUnavailableError
        If the file cannot be opened.
    """
    if path == STDOUT:
        yield sys.stdout
        sys.stdout.flush()
        return

    try:
        fp = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise InputUnavailableError(f"Cannot open the file {path}.") from exc

    logger.debug("Opened '%s' for writing", path)
    with fp:
        yield fp


__all__ = [
    "STDIN",
    "STDOUT",
    "open_input_file",
    "open_output_file",
]
