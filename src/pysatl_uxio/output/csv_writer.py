"""
CSV emission of output variables.

The output is one header line of names and one data line of values, both
separated by ``", "``, values in ``%e`` scientific notation.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

from pysatl_uxio.backends.backend import point_value
from pysatl_uxio.fileio import open_output_file
from pysatl_uxio.types import Precision

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

SEPARATOR = ", "


def format_scientific(value: Any, precision: Precision = Precision.DOUBLE) -> str:
    """Format ``value`` in ``%e`` notation after rounding it to ``precision``."""
    return format(float(precision.dtype(point_value(value))), "e")


def render_output_distributions_csv(
    output_variables: Sequence[Any],
    output_variable_names: Sequence[str],
    precision: Precision = Precision.DOUBLE,
) -> str:
    """
    Render the two CSV lines for ``output_variables``.

    Raises
    ------
    ValueError
        If the number of values and names differ.
    """
    if len(output_variables) != len(output_variable_names):
        raise ValueError(
            f"Got {len(output_variables)} output values for {len(output_variable_names)} names."
        )

    header = SEPARATOR.join(output_variable_names)
    values = SEPARATOR.join(format_scientific(v, precision) for v in output_variables)
    return f"{header}\n{values}\n"


def write_output_distributions_to_csv(
    output_file_path: str,
    output_variables: Sequence[Any],
    output_variable_names: Sequence[str],
    precision: Precision = Precision.DOUBLE,
) -> None:
    """
    Write output variables to a CSV file.

    Parameters
    ----------
    output_file_path : str
        Destination path; ``"stdout"`` writes to standard output.
    output_variables : Sequence
        Output values or distributions; each is written as its point value.
    output_variable_names : Sequence[str]
        Column names, one per output variable.
    precision : Precision, default Precision.DOUBLE
        Precision the values are rounded to before formatting.

    Raises
    ------
    InputUnavailableError
        If the file cannot be opened.
    """
    text = render_output_distributions_csv(output_variables, output_variable_names, precision)

    with open_output_file(output_file_path) as fp:
        fp.write(text)

    logger.debug("Wrote %d output variables to '%s'", len(output_variables), output_file_path)


def write_output_float_distributions_to_csv(
    output_file_path: str,
    output_variables: Sequence[Any],
    output_variable_names: Sequence[str],
) -> None:
    """Single-precision form of :func:`write_output_distributions_to_csv`."""
    write_output_distributions_to_csv(
        output_file_path, output_variables, output_variable_names, Precision.FLOAT
    )


def write_output_double_distributions_to_csv(
    output_file_path: str,
    output_variables: Sequence[Any],
    output_variable_names: Sequence[str],
) -> None:
    """Double-precision form of :func:`write_output_distributions_to_csv`."""
    write_output_distributions_to_csv(
        output_file_path, output_variables, output_variable_names, Precision.DOUBLE
    )


__all__ = [
    "format_scientific",
    "render_output_distributions_csv",
    "write_output_distributions_to_csv",
    "write_output_float_distributions_to_csv",
    "write_output_double_distributions_to_csv",
]
