from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from pathlib import Path

import pytest

from pysatl_uxio.errors import InputUnavailableError, UxIOError
from pysatl_uxio.fileio import STDIN, STDOUT, open_input_file, open_output_file


class TestOpenInputFile:
    """Tests for the input file helper."""

    def test_reads_and_closes(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_text("a\n1\n", encoding="utf-8")

        with open_input_file(str(path)) as fp:
            lines = list(fp)

        assert lines == ["a\n", "1\n"]
        assert fp.closed

    def test_keeps_carriage_returns(self, tmp_path: Path) -> None:
        path = tmp_path / "in.csv"
        path.write_bytes(b"a\r\n")

        with open_input_file(str(path)) as fp:
            assert fp.read() == "a\r\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.csv"

        with pytest.raises(InputUnavailableError) as info:
            with open_input_file(str(missing)):
                pass

        assert str(info.value) == f"Cannot open the file {missing}."
        assert isinstance(info.value, OSError)

    def test_stdin_is_reserved(self) -> None:
        with pytest.raises(InputUnavailableError) as info:
            with open_input_file(STDIN):
                pass

        assert str(info.value) == (
            "Pipeline mode not implemented. Please use the '-i' command-line argument option."
        )
        assert isinstance(info.value, UxIOError)


class TestOpenOutputFile:
    """Tests for the output file helper."""

    def test_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"

        with open_output_file(str(path)) as fp:
            fp.write("x\n")

        assert fp.closed
        assert path.read_text(encoding="utf-8") == "x\n"

    def test_stdout_is_not_closed(self, capsys: pytest.CaptureFixture[str]) -> None:
        with open_output_file(STDOUT) as fp:
            fp.write("hello\n")

        assert fp is sys.stdout
        assert not sys.stdout.closed
        assert capsys.readouterr().out == "hello\n"

    def test_unwritable_path(self, tmp_path: Path) -> None:
        with pytest.raises(InputUnavailableError):
            with open_output_file(str(tmp_path / "no" / "such" / "dir.csv")):
                pass
