"""
Header row validation.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_uxio.errors import HeaderError, HeaderLengthError
from pysatl_uxio.ingestion.scanner import is_blank, iter_fields

if TYPE_CHECKING:
    from collections.abc import Sequence


def validate_header(line: str, expected_headers: Sequence[str]) -> list[str]:
    """
    Check a header row against the expected column names.

    Every header cell must start with its expected name (case-sensitive) and
    may only be followed by whitespace. Names are only checked here; column
    classification happens when the first data row is read.

    Parameters
    ----------
    line : str
        Raw header line.
    expected_headers : Sequence[str]
        Expected column names, in order.

    Returns
    -------
    list[str]
        Header cells with leading whitespace trimmed.

    Raises
    ------
    HeaderLengthError
        If the row has more or fewer cells than ``expected_headers``.
    HeaderError
        If a cell does not carry its expected name (the error holds the
        0-indexed column, the expected name and the actual cell text).
    """
    cells: list[str] = []

    for column, cell in enumerate(iter_fields(line)):
        if column == len(expected_headers):
            raise HeaderLengthError(more=True)

        expected = expected_headers[column]
        if not cell.startswith(expected):
            raise HeaderError(column, expected, cell)
        if not is_blank(cell[len(expected) :]):
            raise HeaderError(column, expected, cell, trailing=True)

        cells.append(cell)

    if len(cells) != len(expected_headers):
        raise HeaderLengthError(more=False)

    return cells


__all__ = [
    "validate_header",
]
