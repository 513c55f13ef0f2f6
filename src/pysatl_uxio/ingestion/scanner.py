"""
Row scanning for the minimal, unquoted CSV dialect.

Fields are split on the delimiter with no quoting or escaping. Empty pieces
between adjacent delimiters do not produce fields. Leading whitespace of every
field is trimmed; trailing text is kept for the caller to inspect.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_uxio.types import CSV_DELIMITER, IGNORE_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterator


def iter_fields(line: str, delimiter: str = CSV_DELIMITER) -> Iterator[str]:
    """
    Yield the fields of ``line`` with leading whitespace trimmed.

    Parameters
    ----------
    line : str
        One line of text, line terminator included or not.
    delimiter : str, default ","
        Field delimiter.
    """
    for piece in line.split(delimiter):
        if piece:
            yield piece.lstrip()


def split_fields(line: str, delimiter: str = CSV_DELIMITER) -> list[str]:
    """Return all fields of ``line`` (see :func:`iter_fields`)."""
    return list(iter_fields(line, delimiter))


def is_blank(text: str) -> bool:
    """Whether ``text`` is empty or whitespace only."""
    return not text or text.isspace()


def is_ignore_marker(field: str) -> bool:
    """
    Whether ``field`` marks the row as ignored for its column.

    The marker is a ``-`` followed by nothing but whitespace.
    """
    return field[:1] == IGNORE_MARKER and is_blank(field[1:])


__all__ = [
    "iter_fields",
    "split_fields",
    "is_blank",
    "is_ignore_marker",
]
