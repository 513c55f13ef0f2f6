from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import io
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import numpy as np
import pytest

from pysatl_uxio.backends.empirical import EmpiricalBackend, EmpiricalDistribution
from pysatl_uxio.errors import (
    EmptyColumnError,
    HeaderError,
    HeaderLengthError,
    InputUnavailableError,
    LineTooLongError,
    RowLengthError,
    TooManyRowsError,
    ValueParseError,
)
from pysatl_uxio.ingestion.reader import (
    DistributionCSVReader,
    read_input_distributions_from_csv,
    read_input_double_distributions_from_csv,
    read_input_float_distributions_from_csv,
)
from pysatl_uxio.output.csv_writer import write_output_distributions_to_csv
from pysatl_uxio.types import MAX_CHARS_PER_LINE, MAX_NUMBER_OF_INPUT_SAMPLES, Precision
from tests.utils.mocks import DecodedCell, FittedSamples, RecordingBackend


def _read(text: str, headers: list[str], backend: RecordingBackend, **kwargs: object) -> list:
    reader = DistributionCSVReader(headers, backend, **kwargs)  # type: ignore[arg-type]
    return reader.read_lines(io.StringIO(text))


class TestNumericColumns:
    """Tests for columns whose cells are accumulated as samples."""

    def test_one_distribution_per_column(self, backend: RecordingBackend) -> None:
        result = _read("a,b\n1,10\n2,20\n3,30\n", ["a", "b"], backend)

        assert result == [FittedSamples((1.0, 2.0, 3.0)), FittedSamples((10.0, 20.0, 30.0))]
        assert backend.decoded == []

    def test_ignore_marker_excludes_row_from_population(self, backend: RecordingBackend) -> None:
        result = _read("a,b\n1,-\n-,5\n3,6\n", ["a", "b"], backend)

        assert result == [FittedSamples((1.0, 3.0)), FittedSamples((5.0, 6.0))]

    def test_cells_are_parsed_by_numeric_prefix(self, backend: RecordingBackend) -> None:
        result = _read("a\n 1.5abc\n0x10\n-2e1\n", ["a"], backend)

        assert result == [FittedSamples((1.5, 16.0, -20.0))]

    def test_float_precision_rounds_samples(self, backend: RecordingBackend) -> None:
        _read("a\n0.1\n", ["a"], backend, precision=Precision.FLOAT)

        assert backend.fitted == [(float(np.float32(0.1)),)]

    def test_invalid_cell_reports_row_and_column(self, backend: RecordingBackend) -> None:
        with pytest.raises(ValueParseError) as info:
            _read("a,b\n1,2\n3,x\n", ["a", "b"], backend)

        assert (info.value.row, info.value.column) == (1, 1)
        assert "row 1 and column 1" in str(info.value)

    def test_column_without_samples(self, backend: RecordingBackend) -> None:
        with pytest.raises(EmptyColumnError) as info:
            _read("a,b\n1,-\n2,-\n", ["a", "b"], backend)

        assert info.value.column == 1

    def test_header_only(self, backend: RecordingBackend) -> None:
        with pytest.raises(EmptyColumnError):
            _read("a\n", ["a"], backend)


class TestUxColumns:
    """Tests for columns carrying a single pre-encoded value."""

    def test_marker_in_header_decodes_first_cell(self, backend: RecordingBackend) -> None:
        result = _read("aUx,b\n1.5,1\n2.5,2\n", ["aUx", "b"], backend)

        assert result[0] == DecodedCell("1.5", 1.5)
        assert result[1] == FittedSamples((1.0, 2.0))
        assert backend.decoded == ["1.5"]
        assert backend.fitted == [(1.0, 2.0)]

    def test_marker_in_first_cell(self, backend: RecordingBackend) -> None:
        result = _read("a\n3.0Ux0A0B\nnot a number\n", ["a"], backend)

        assert result == [DecodedCell("3.0Ux0A0B\n", 3.0)]
        assert backend.fitted == []

    def test_later_cells_are_ignored(self, backend: RecordingBackend) -> None:
        """The classification made on the first data row is never revisited."""
        result = _read("a,b\n7Ux,1\n8,2\n9Ux,3\n", ["a", "b"], backend)

        assert result[0] == DecodedCell("7Ux", 7.0)
        assert backend.decoded == ["7Ux"]

    def test_marker_after_first_row_is_a_parse_error(self, backend: RecordingBackend) -> None:
        with pytest.raises(ValueParseError) as info:
            _read("a\n1\nUx\n", ["a"], backend)

        assert (info.value.row, info.value.column) == (1, 0)

    def test_invalid_encoding_is_located(self) -> None:
        reader = DistributionCSVReader(["a"], EmpiricalBackend())

        with pytest.raises(ValueParseError) as info:
            reader.read_lines(io.StringIO("a\nxUx\n"))

        assert (info.value.row, info.value.column) == (0, 0)

    def test_empirical_decode(self) -> None:
        reader = DistributionCSVReader(["a"], EmpiricalBackend(Precision.FLOAT), Precision.FLOAT)

        [value] = reader.read_lines(io.StringIO("a\n0.1Ux\n"))

        assert isinstance(value, EmpiricalDistribution)
        assert value.samples.dtype == np.float32
        assert value.mean == pytest.approx(float(np.float32(0.1)))


class TestMalformedInput:
    """Tests for structural errors of the CSV text."""

    def test_empty_input(self, backend: RecordingBackend) -> None:
        with pytest.raises(HeaderLengthError) as info:
            _read("", ["a"], backend)

        assert info.value.more is False

    def test_header_with_trailing_whitespace(self, backend: RecordingBackend) -> None:
        result = _read("a  ,b\t\n1,2\n", ["a", "b"], backend)

        assert len(result) == 2

    def test_header_mismatch(self, backend: RecordingBackend) -> None:
        with pytest.raises(HeaderError):
            _read("a,c\n1,2\n", ["a", "b"], backend)

    def test_header_with_fewer_cells(self, backend: RecordingBackend) -> None:
        with pytest.raises(HeaderLengthError, match="less than expected header values"):
            _read("a\n1\n", ["a", "b"], backend)

    def test_row_with_more_entries(self, backend: RecordingBackend) -> None:
        with pytest.raises(RowLengthError) as info:
            _read("a,b\n1,2\n3,4\n5,6,7\n", ["a", "b"], backend)

        assert info.value.row == 2
        assert info.value.more is True
        assert str(info.value) == (
            "The input CSV data has more than the expected entries at data row 2."
        )

    def test_row_with_fewer_entries(self, backend: RecordingBackend) -> None:
        with pytest.raises(RowLengthError) as info:
            _read("a,b\n1\n", ["a", "b"], backend)

        assert info.value.row == 0
        assert info.value.more is False

    def test_blank_line_is_not_skipped(self, backend: RecordingBackend) -> None:
        with pytest.raises(ValueParseError):
            _read("a\n1\n\n", ["a"], backend)

    def test_line_too_long(self, backend: RecordingBackend) -> None:
        line = "1" * MAX_CHARS_PER_LINE
        with pytest.raises(LineTooLongError) as info:
            _read(f"a\n{line}\n", ["a"], backend)

        assert info.value.line_number == 1

    def test_too_many_rows(self, backend: RecordingBackend) -> None:
        text = "a\n" + "1\n" * (MAX_NUMBER_OF_INPUT_SAMPLES + 1)

        with pytest.raises(TooManyRowsError) as info:
            _read(text, ["a"], backend)

        assert info.value.maximum == MAX_NUMBER_OF_INPUT_SAMPLES
        assert str(info.value) == "The input CSV file has too many rows (the maximum is 10000)."

    def test_maximum_number_of_rows_is_accepted(self, backend: RecordingBackend) -> None:
        text = "a\n" + "1\n" * MAX_NUMBER_OF_INPUT_SAMPLES

        [result] = _read(text, ["a"], backend)

        assert len(result.samples) == MAX_NUMBER_OF_INPUT_SAMPLES

    def test_custom_row_limit(self, backend: RecordingBackend) -> None:
        with pytest.raises(TooManyRowsError, match="the maximum is 2"):
            _read("a\n1\n2\n3\n", ["a"], backend, max_rows=2)


class TestReadFile:
    """Tests for reading from the file system."""

    def test_reads_file(self, write_csv: Callable[..., str]) -> None:
        path = write_csv("x,y\n1,4\n2,5\n3,6\n")

        x, y = read_input_distributions_from_csv(path, ["x", "y"])

        assert isinstance(x, EmpiricalDistribution)
        np.testing.assert_array_equal(x.samples, [1.0, 2.0, 3.0])
        assert y.mean == pytest.approx(5.0)

    def test_precision_wrappers(self, write_csv: Callable[..., str]) -> None:
        path = write_csv("x\n0.5\n1.5\n")

        [single] = read_input_float_distributions_from_csv(path, ["x"])
        [double] = read_input_double_distributions_from_csv(path, ["x"])

        assert single.samples.dtype == np.float32
        assert double.samples.dtype == np.float64

    def test_custom_backend(self, write_csv: Callable[..., str], backend: RecordingBackend) -> None:
        path = write_csv("x\n1\n")

        assert read_input_distributions_from_csv(path, ["x"], backend=backend) == [
            FittedSamples((1.0,))
        ]

    def test_crlf_line_endings(self, write_csv: Callable[..., str]) -> None:
        path = write_csv("x,y\r\n1,2\r\n3,4\r\n")

        x, y = read_input_distributions_from_csv(path, ["x", "y"])

        np.testing.assert_array_equal(y.samples, [2.0, 4.0])

    def test_empty_schema_does_no_io(self) -> None:
        assert read_input_distributions_from_csv("does/not/exist.csv", []) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputUnavailableError, match="Cannot open the file"):
            read_input_distributions_from_csv(str(tmp_path / "missing.csv"), ["a"])

    def test_stdin_is_not_supported(self) -> None:
        with pytest.raises(InputUnavailableError, match="Pipeline mode not implemented"):
            read_input_distributions_from_csv("stdin", ["a"])

    def test_file_is_closed_after_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        opened: list[io.StringIO] = []

        @contextmanager
        def fake_open(path: str) -> Iterator[io.StringIO]:
            fp = io.StringIO("a\n" + "1\n" * 4)
            opened.append(fp)
            with fp:
                yield fp

        monkeypatch.setattr("pysatl_uxio.ingestion.reader.open_input_file", fake_open)
        reader = DistributionCSVReader(["a"], EmpiricalBackend(), max_rows=3)

        with pytest.raises(TooManyRowsError):
            reader.read("input.csv")

        assert opened and opened[0].closed

    def test_round_trip_with_csv_writer(self, tmp_path: Path) -> None:
        """Values written by the CSV emitter read back as one-sample columns."""

        path = str(tmp_path / "out.csv")
        write_output_distributions_to_csv(path, [1.25, -3.5], ["first", "second"])

        first, second = read_input_distributions_from_csv(path, ["first", "second"])

        np.testing.assert_array_equal(first.samples, [1.25])
        np.testing.assert_array_equal(second.samples, [-3.5])
