"""
Error Taxonomy
==============

Recoverable errors are raised as subclasses of :class:`UxIOError` and left to
the caller to handle. Unrecoverable errors go through :func:`fatal`, which
terminates the process.

- :class:`CSVFormatError` and its subclasses – malformed input data.
- :class:`InputUnavailableError` – a file cannot be opened (or ``stdin`` was
  requested for reading).
- :class:`OptionsError` – invalid command-line options or output mode.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class UxIOError(Exception):
    """Base class of all recoverable errors raised by this package."""


class CSVFormatError(UxIOError, ValueError):
    """Input CSV data does not match the expected structure or content."""


class HeaderError(CSVFormatError):
    """
    A header cell does not carry the expected column name.

    Parameters
    ----------
    column : int
        0-indexed column of the offending header cell.
    expected : str
        Expected column name.
    actual : str
        Header cell text (leading whitespace trimmed).
    trailing : bool, default False
        Whether the name matched but was followed by non-whitespace text.
    """

    def __init__(self, column: int, expected: str, actual: str, trailing: bool = False) -> None:
        self.column = column
        self.expected = expected
        self.actual = actual
        self.trailing = trailing
        message = (
            f"Column {column} of the input CSV should have header '{expected}' "
            f"but has header '{actual}'"
        )
        if trailing:
            message += " (trailing characters)"
        super().__init__(message)


class HeaderLengthError(CSVFormatError):
    """The header row has more or fewer cells than expected."""

    def __init__(self, more: bool) -> None:
        self.more = more
        qualifier = "more" if more else "less"
        super().__init__(f"The input CSV data has {qualifier} than expected header values")


class RowLengthError(CSVFormatError):
    """A data row has more or fewer entries than expected."""

    def __init__(self, row: int, more: bool) -> None:
        self.row = row
        self.more = more
        qualifier = "more" if more else "less"
        super().__init__(
            f"The input CSV data has {qualifier} than the expected entries at data row {row}."
        )


class ValueParseError(CSVFormatError):
    """
    A cell is not a valid number.

    ``row`` and ``column`` are ``None`` when the error comes from the bare
    number parser, outside of a CSV read.
    """

    def __init__(self, text: str, row: int | None = None, column: int | None = None) -> None:
        self.text = text
        self.row = row
        self.column = column
        if row is None or column is None:
            message = f"'{text}' is not a valid number."
        else:
            message = (
                f"The input CSV data at row {row} and column {column} "
                f"is not a valid number (was '{text}')."
            )
        super().__init__(message)

    def at(self, row: int, column: int) -> ValueParseError:
        """Return a copy of this error located at ``row``/``column``."""
        return ValueParseError(self.text, row=row, column=column)


class TooManyRowsError(CSVFormatError):
    """The input holds more data rows than a sample buffer can take."""

    def __init__(self, maximum: int) -> None:
        self.maximum = maximum
        super().__init__(f"The input CSV file has too many rows (the maximum is {maximum}).")


class EmptyColumnError(CSVFormatError):
    """A column ends up with nothing to build its distribution from."""

    def __init__(self, column: int, name: str) -> None:
        self.column = column
        self.name = name
        super().__init__(f"Column {column} ('{name}') of the input CSV has no samples.")


class LineTooLongError(CSVFormatError):
    """A line does not fit into the line buffer."""

    def __init__(self, line_number: int, maximum: int) -> None:
        self.line_number = line_number
        self.maximum = maximum
        super().__init__(
            f"Line {line_number} of the input CSV is longer than {maximum - 1} characters."
        )


class InputUnavailableError(UxIOError, OSError):
    """A file cannot be used for reading or writing."""


class OptionsError(UxIOError, ValueError):
    """Invalid command-line options or an incompatible output-mode combination."""


def fatal(message: str) -> NoReturn:
    """
    Report an unrecoverable error and terminate the process.

    Parameters
    ----------
    message : str
        Diagnostic to print before exit.

    Raises
    ------
    SystemExit
        Always, with exit status 1.
    """
    print(message, file=sys.stderr)
    raise SystemExit(1)


@contextmanager
def report_errors() -> Iterator[None]:
    """
    Turn recoverable errors into a logged message and exit status 1.

    Intended for the ``main()`` of demo programs::

        with report_errors():
            distributions = read_input_distributions_from_csv(...)
    """
    try:
        yield
    except UxIOError as exc:
        logger.error("Error: %s", exc)
        raise SystemExit(1) from exc


__all__ = [
    "UxIOError",
    "CSVFormatError",
    "HeaderError",
    "HeaderLengthError",
    "RowLengthError",
    "ValueParseError",
    "TooManyRowsError",
    "EmptyColumnError",
    "LineTooLongError",
    "InputUnavailableError",
    "OptionsError",
    "fatal",
    "report_errors",
]
