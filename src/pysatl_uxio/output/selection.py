"""
Output selection.

Decides which output variables a demo emits (one selected output or all of
them) and where their values come from (a single evaluation or the sample
matrix of repeated executions).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from pysatl_uxio.errors import OptionsError
from pysatl_uxio.output.json_writer import JSONVariable, distribution_values, particle_values
from pysatl_uxio.types import Precision

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

    from pysatl_uxio.options import CommandLineArguments


def selected_output_indices(arguments: CommandLineArguments, number_of_outputs: int) -> list[int]:
    """
    Return the indices of the outputs to emit.

    Raises
    ------
    OptionsError
        If the selected output does not exist.
    """
    if not arguments.is_output_selected:
        return list(range(number_of_outputs))

    if arguments.output_select >= number_of_outputs:
        raise OptionsError(
            f"The output selected ({arguments.output_select}) must be less than "
            f"the number of outputs ({number_of_outputs})."
        )
    return [arguments.output_select]

T = TypeVar("T")


def select_outputs(
    arguments: CommandLineArguments, names: Sequence[str], values: Sequence[T]
) -> tuple[list[str], list[T]]:
    """Filter parallel ``names``/``values`` down to the selected outputs."""
    if len(names) != len(values):
        raise ValueError(f"Got {len(values)} output values for {len(names)} names.")

    indices = selected_output_indices(arguments, len(names))
    return [names[i] for i in indices], [values[i] for i in indices]


def select_json_variables(
    arguments: CommandLineArguments,
    symbols: Sequence[str],
    descriptions: Sequence[str],
    results: Sequence[Any] | npt.NDArray[Any],
    precision: Precision = Precision.DOUBLE,
) -> list[JSONVariable]:
    """
    Build the JSON variables a demo should print.

    Parameters
    ----------
    arguments : CommandLineArguments
        Parsed command-line arguments.
    symbols, descriptions : Sequence[str]
        Symbol and description of every output.
    results : Sequence or numpy.ndarray
        In Monte Carlo mode, the sample matrix of shape ``(iterations,
        outputs)`` (1D for a single output); otherwise one result per output.
    precision : Precision, default Precision.DOUBLE
        Element type of the results.

    Raises
    ------
    ValueError
        If the shape of ``results`` does not match the outputs.
    OptionsError
        If the selected output does not exist.
    """
    if len(symbols) != len(descriptions):
        raise ValueError(f"Got {len(descriptions)} descriptions for {len(symbols)} symbols.")

    indices = selected_output_indices(arguments, len(symbols))

    if arguments.is_monte_carlo_mode:
        matrix = np.asarray(results, dtype=precision.dtype)
        if matrix.ndim == 1:
            matrix = matrix.reshape(-1, 1)
        if matrix.ndim != 2 or matrix.shape[1] != len(symbols):
            raise ValueError(
                f"Expected samples of shape (iterations, {len(symbols)}), got {matrix.shape}."
            )
        return [
            JSONVariable(symbols[i], descriptions[i], particle_values(matrix[:, i], precision))
            for i in indices
        ]

    if len(results) != len(symbols):
        raise ValueError(f"Got {len(results)} results for {len(symbols)} outputs.")
    return [
        JSONVariable(symbols[i], descriptions[i], distribution_values([results[i]], precision))
        for i in indices
    ]


__all__ = [
    "selected_output_indices",
    "select_outputs",
    "select_json_variables",
]
