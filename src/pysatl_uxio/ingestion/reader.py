"""
Distribution Ingestion from CSV
===============================

Reads a CSV table whose columns are either literal numeric samples or a single
pre-encoded (Ux) uncertain value and turns every column into one distribution.

Reading proceeds in phases:

1. the header row is validated against the expected column names;
2. while the first data row is read every column is classified as a Ux column
   or a numeric-sample column;
3. every data row feeds the numeric-sample columns (a ``-`` cell is skipped);
4. at end of input each column becomes one distribution, through the
   backend's ``decode`` (Ux columns) or ``fit`` (numeric-sample columns).

Notes
-----
- The read is all-or-nothing: distributions are built only after the whole
  input has been validated, and any error leaves no partial result.
- Rows and columns in error messages are 0-indexed; the header row is not
  counted as a data row.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pysatl_uxio.backends.empirical import EmpiricalBackend
from pysatl_uxio.errors import (
    EmptyColumnError,
    HeaderLengthError,
    LineTooLongError,
    RowLengthError,
    TooManyRowsError,
    ValueParseError,
)
from pysatl_uxio.fileio import open_input_file
from pysatl_uxio.ingestion.columns import ColumnState
from pysatl_uxio.ingestion.header import validate_header
from pysatl_uxio.ingestion.scanner import is_ignore_marker, iter_fields
from pysatl_uxio.parsing import parse_float_checked
from pysatl_uxio.types import MAX_CHARS_PER_LINE, MAX_NUMBER_OF_INPUT_SAMPLES, Precision

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pysatl_uxio.backends.backend import DistributionBackend

logger = logging.getLogger(__name__)

D = TypeVar("D")


class DistributionCSVReader(Generic[D]):
    """
    Reader turning CSV columns into distributions.

    Parameters
    ----------
    expected_headers : Sequence[str]
        Expected column names; one distribution is produced per name.
    backend : DistributionBackend
        Builds distributions from samples and decodes Ux cells.
    precision : Precision, default Precision.DOUBLE
        Element type of numeric samples.
    max_rows : int, default MAX_NUMBER_OF_INPUT_SAMPLES
        Maximum number of data rows.
    """

    def __init__(
        self,
        expected_headers: Sequence[str],
        backend: DistributionBackend[D],
        precision: Precision = Precision.DOUBLE,
        max_rows: int = MAX_NUMBER_OF_INPUT_SAMPLES,
    ) -> None:
        self.expected_headers = tuple(expected_headers)
        self.backend = backend
        self.precision = precision
        self.max_rows = max_rows

    def read(self, input_file_path: str) -> list[D]:
        """
        Read distributions from the file at ``input_file_path``.

        An empty list of expected headers is a trivial success and does not
        touch the file.

        Raises
        ------
        InputUnavailableError
            If the file cannot be opened or ``"stdin"`` is requested.
        CSVFormatError
            If the content is malformed (see :meth:`read_lines`).
        """
        if not self.expected_headers:
            return []

        with open_input_file(input_file_path) as fp:
            distributions = self.read_lines(fp)

        logger.debug("Read %d distributions from '%s'", len(distributions), input_file_path)
        return distributions

    def read_lines(self, lines: Iterable[str]) -> list[D]:
        """
        Read distributions from an iterable of text lines.

        Raises
        ------
        HeaderLengthError, HeaderError
            If the header row is missing or malformed.
        RowLengthError
            If a data row has more or fewer entries than expected.
        ValueParseError
            If a numeric-sample cell or a Ux cell is not a valid number.
        TooManyRowsError
            If there are more than ``max_rows`` data rows.
        LineTooLongError
            If a line exceeds the line buffer.
        EmptyColumnError
            If a column has no samples at end of input.
        """
        if not self.expected_headers:
            return []

        columns = [
            ColumnState(index, name, self.precision, self.max_rows)
            for index, name in enumerate(self.expected_headers)
        ]
        header: list[str] | None = None
        row = 0

        for line_number, line in enumerate(lines):
            if len(line) > MAX_CHARS_PER_LINE - 1:
                raise LineTooLongError(line_number, MAX_CHARS_PER_LINE)

            if header is None:
                header = validate_header(line, self.expected_headers)
                continue

            if row >= self.max_rows:
                raise TooManyRowsError(self.max_rows)

            self._read_row(line, row, header, columns)
            row += 1

        if header is None:
            raise HeaderLengthError(more=False)

        logger.debug("Accumulated %d data rows for %d columns", row, len(columns))
        return [self._build(column) for column in columns]

    def _read_row(
        self, line: str, row: int, header: list[str], columns: list[ColumnState]
    ) -> None:
        count = 0

        for column, cell in enumerate(iter_fields(line)):
            if column == len(columns):
                raise RowLengthError(row, more=True)

            state = columns[column]
            count = column + 1

            if row == 0 and state.classify(header[column], cell):
                logger.debug("Column %d ('%s') holds a Ux value", column, state.name)
                try:
                    state.ux_value = self.backend.decode(cell)
                except ValueParseError as exc:
                    raise exc.at(row, column) from None

            if state.is_ux_column:
                continue

            if is_ignore_marker(cell):
                state.skip()
                continue

            try:
                value = parse_float_checked(cell, self.precision)
            except ValueParseError as exc:
                raise exc.at(row, column) from None
            state.append(value)

        if count != len(columns):
            raise RowLengthError(row, more=False)

    def _build(self, column: ColumnState) -> D:
        if column.is_ux_column:
            if column.ux_value is None:
                raise EmptyColumnError(column.index, column.name)
            return column.ux_value

        if column.sample_count == 0:
            raise EmptyColumnError(column.index, column.name)
        return self.backend.fit(column.population)


def read_input_distributions_from_csv(
    input_file_path: str,
    expected_headers: Sequence[str],
    precision: Precision = Precision.DOUBLE,
    backend: DistributionBackend[Any] | None = None,
) -> list[Any]:
    """
    Read one distribution per expected column from a CSV file.

    Parameters
    ----------
    input_file_path : str
        Path of the CSV file. ``"stdin"`` is not supported.
    expected_headers : Sequence[str]
        Expected column names, in order.
    precision : Precision, default Precision.DOUBLE
        Element type of numeric samples.
    backend : DistributionBackend, optional
        Backend building the distributions; an :class:`EmpiricalBackend` of
        the same precision by default.

    Returns
    -------
    list
        One distribution per expected column, in column order.
    """
    if backend is None:
        backend = EmpiricalBackend(precision)
    return DistributionCSVReader(expected_headers, backend, precision).read(input_file_path)


def read_input_float_distributions_from_csv(
    input_file_path: str,
    expected_headers: Sequence[str],
    backend: DistributionBackend[Any] | None = None,
) -> list[Any]:
    """Single-precision form of :func:`read_input_distributions_from_csv`."""
    return read_input_distributions_from_csv(
        input_file_path, expected_headers, Precision.FLOAT, backend
    )


def read_input_double_distributions_from_csv(
    input_file_path: str,
    expected_headers: Sequence[str],
    backend: DistributionBackend[Any] | None = None,
) -> list[Any]:
    """Double-precision form of :func:`read_input_distributions_from_csv`."""
    return read_input_distributions_from_csv(
        input_file_path, expected_headers, Precision.DOUBLE, backend
    )


__all__ = [
    "DistributionCSVReader",
    "read_input_distributions_from_csv",
    "read_input_float_distributions_from_csv",
    "read_input_double_distributions_from_csv",
]
