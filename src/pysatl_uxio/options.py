"""
Command-Line Options
====================

Parsing of the options shared by every demo built on PySATL UxIO, plus
demo-specific options declared with :class:`DemoOption`.

Every option has a single-dash short spelling and a double-dash long
spelling, e.g. ``-i data.csv`` or ``--input data.csv``.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from pysatl_uxio.errors import OptionsError, ValueParseError, fatal
from pysatl_uxio.parsing import parse_int_checked
from pysatl_uxio.types import MAX_CHARS_PER_FILEPATH

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

USAGE_TEXT = (
    "Usage: Valid command-line arguments are:\n"
    "\t[-i, --input <Path to input CSV file : str>] (Read inputs from file.)\n"
    "\t[-o, --output <Path to output CSV file : str>] (Specify the output file.)\n"
    "\t[-S, --select-output <output : int>] (Compute 0-indexed output, by default 0.)\n"
    "\t[-M, --multiple-executions <Number of executions : int (Default: 1)>] "
    "(Repeated execute kernel for benchmarking.)\n"
    "\t[-T, --time] (Timing mode: Times and prints the timing of the kernel execution.)\n"
    "\t[-v, --verbose] (Verbose mode: Prints extra information about demo execution.)\n"
    "\t[-b, --benchmarking] (Benchmarking mode: Generate outputs in format for benchmarking.)\n"
    "\t[-j, --json] (Print output in JSON format.)\n"
    "\t[-h, --help] (Display this help message.)\n"
)


@dataclass(frozen=True, slots=True)
class DemoOption:
    """
    A demo-specific command-line option.

    Parameters
    ----------
    opt : str, optional
        Long name, spelled ``--opt`` on the command line.
    opt_alternative : str, optional
        Short name, spelled ``-opt_alternative`` on the command line.
    has_arg : bool, default False
        Whether the option takes a value.
    help : str, default ""
        Help text.
    """

    opt: str | None = None
    opt_alternative: str | None = None
    has_arg: bool = False
    help: str = ""

    @property
    def key(self) -> str:
        """Name under which the option is reported in ``demo_options``."""
        return self.opt if self.opt is not None else str(self.opt_alternative)

    @property
    def flags(self) -> list[str]:
        """Option strings, short spelling first."""
        flags = []
        if self.opt_alternative is not None:
            flags.append(f"-{self.opt_alternative}")
        if self.opt is not None:
            flags.append(f"--{self.opt}")
        return flags


COMMON_OPTIONS: tuple[DemoOption, ...] = (
    DemoOption("input", "i", True),
    DemoOption("output", "o", True),
    DemoOption("select-output", "S", True),
    DemoOption("time", "T", False),
    DemoOption("multiple-executions", "M", True),
    DemoOption("verbose", "v", False),
    DemoOption("json", "j", False),
    DemoOption("help", "h", False),
    DemoOption("benchmarking", "b", False),
)


@dataclass(frozen=True, slots=True)
class CommandLineArguments:
    """
    Parsed command-line arguments.

    Built once by :func:`parse_args` and never modified afterwards.
    ``demo_options`` maps the name of every demo-specific option found on the
    command line to its value, or to ``True`` for options without a value.
    """

    output_file_path: str = ""
    input_file_path: str = ""
    is_write_to_file_enabled: bool = False
    is_timing_enabled: bool = False
    number_of_monte_carlo_iterations: int = 1
    output_select: int = 0
    is_output_selected: bool = False
    is_verbose: bool = False
    is_input_from_file_enabled: bool = False
    is_output_json_mode: bool = False
    is_help_enabled: bool = False
    is_benchmarking_mode: bool = False
    is_monte_carlo_mode: bool = False
    is_single_shot_execution: bool = True
    demo_options: Mapping[str, str | bool] = field(default_factory=dict)


class _OptionParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`OptionsError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise OptionsError(message)


def _check_options(options: Sequence[DemoOption]) -> None:
    seen: set[str] = set()
    for option in options:
        if option.opt is None and option.opt_alternative is None:
            fatal("Internal error: a command-line option must have at least one name.")
        if option.key in seen:
            fatal(f"Internal error: duplicate command-line option '{option.key}'.")
        seen.add(option.key)
        for flag in option.flags:
            if flag in seen:
                fatal(f"Internal error: duplicate command-line option '{flag}'.")
            seen.add(flag)


def _build_parser(options: Sequence[DemoOption]) -> _OptionParser:
    parser = _OptionParser(add_help=False, allow_abbrev=False)
    for index, option in enumerate(options):
        if option.has_arg:
            parser.add_argument(*option.flags, dest=f"option_{index}", default=None)
        else:
            parser.add_argument(
                *option.flags, dest=f"option_{index}", action="store_true", default=False
            )
    return parser


def _file_path(value: str, kind: str) -> str:
    if len(value.encode()) >= MAX_CHARS_PER_FILEPATH:
        raise OptionsError(f"Could not read {kind} file path from command-line arguments.")
    return value


def _int_argument(value: str, message: str) -> int:
    try:
        return parse_int_checked(value)
    except ValueParseError as e:
        raise OptionsError(message) from e


def parse_args(
    argv: Sequence[str] | None = None,
    demo_specific_options: Sequence[DemoOption] = (),
) -> CommandLineArguments:
    """
    Parse common and demo-specific command-line options.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments without the program name; ``sys.argv[1:]`` by default.
    demo_specific_options : Sequence[DemoOption], default ()
        Extra options understood by the demo.

    Returns
    -------
    CommandLineArguments
        Parsed arguments. ``-M n`` switches on Monte Carlo mode and timing
        and switches off single-shot execution.

    Raises
    ------
    OptionsError
        On unknown options, missing option values, stray positional
        arguments, a non-integer or negative output selection, a
        non-integer or non-positive number of executions, file paths that
        are too long, or JSON mode combined with benchmarking mode.
    """
    if argv is None:
        argv = sys.argv[1:]

    options = [*demo_specific_options, *COMMON_OPTIONS]
    _check_options(options)

    namespace = vars(_build_parser(options).parse_args(list(argv)))
    found = {option.key: namespace[f"option_{i}"] for i, option in enumerate(options)}

    demo_options: dict[str, str | bool] = {}
    for option in demo_specific_options:
        value = found[option.key]
        if value is not None and value is not False:
            demo_options[option.key] = value

    input_arg = found["input"]
    output_arg = found["output"]
    output_select_arg = found["select-output"]
    multiple_executions_arg = found["multiple-executions"]

    output_select = 0
    if output_select_arg is not None:
        output_select = _int_argument(
            output_select_arg, "The output selected must be an integer."
        )
        if output_select < 0:
            raise OptionsError("The output selected must be non-negative.")

    iterations = 1
    if multiple_executions_arg is not None:
        iterations = _int_argument(
            multiple_executions_arg, "The number of multiple executions must be an integer."
        )
        if iterations <= 0:
            raise OptionsError("The number of multiple executions must be positive.")

    is_monte_carlo_mode = multiple_executions_arg is not None

    if found["json"] and found["benchmarking"]:
        raise OptionsError(
            "Output JSON mode and benchmarking mode are not compatible. Please choose only one."
        )

    arguments = CommandLineArguments(
        output_file_path="" if output_arg is None else _file_path(output_arg, "output"),
        input_file_path="" if input_arg is None else _file_path(input_arg, "input"),
        is_write_to_file_enabled=output_arg is not None,
        is_timing_enabled=bool(found["time"]) or is_monte_carlo_mode,
        number_of_monte_carlo_iterations=iterations,
        output_select=output_select,
        is_output_selected=output_select_arg is not None,
        is_verbose=bool(found["verbose"]),
        is_input_from_file_enabled=input_arg is not None,
        is_output_json_mode=bool(found["json"]),
        is_help_enabled=bool(found["help"]),
        is_benchmarking_mode=bool(found["benchmarking"]),
        is_monte_carlo_mode=is_monte_carlo_mode,
        is_single_shot_execution=not is_monte_carlo_mode,
        demo_options=demo_options,
    )
    logger.debug("Parsed command-line arguments: %s", arguments)
    return arguments


def common_usage() -> str:
    """Return the usage text of the common options."""
    return USAGE_TEXT


def print_common_usage() -> None:
    """Write the usage text of the common options to stderr."""
    sys.stderr.write(common_usage())


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging on stderr.

    INFO by default, DEBUG when ``verbose`` is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


__all__ = [
    "DemoOption",
    "COMMON_OPTIONS",
    "CommandLineArguments",
    "parse_args",
    "common_usage",
    "print_common_usage",
    "configure_logging",
]
