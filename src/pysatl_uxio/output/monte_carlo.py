"""
Repeated-Execution (Monte Carlo) Support
========================================

Runs a kernel many times, collects one sample (or one row of per-output
samples) per run and stores the samples in the ``data.out`` result file.

The ``data.out`` format is a first line holding the elapsed CPU time in
microseconds, followed by one line per iteration: a single sample, or a
``", "``-separated row of per-output samples, with 20 digits after the
decimal point.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_uxio.errors import fatal
from pysatl_uxio.types import Precision

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    import numpy.typing as npt

logger = logging.getLogger(__name__)

DATA_DOT_OUT = "data.out"
SAMPLE_FORMAT = ".20f"
SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class RepeatedExecutionResult:
    """
    Samples of a repeated execution.

    Parameters
    ----------
    samples : numpy.ndarray
        Shape ``(iterations,)`` for a scalar kernel or ``(iterations,
        outputs)`` for a kernel returning several outputs.
    cpu_time_elapsed_microseconds : int
        CPU time spent in the kernel over all iterations.
    """

    samples: npt.NDArray[np.floating[Any]]
    cpu_time_elapsed_microseconds: int

    @property
    def iterations(self) -> int:
        """Number of kernel executions."""
        return int(self.samples.shape[0])


def run_repeated_executions(
    kernel: Callable[[], float | Sequence[float]],
    iterations: int,
    precision: Precision = Precision.DOUBLE,
) -> RepeatedExecutionResult:
    """
    Execute ``kernel`` ``iterations`` times and collect its results.

    Parameters
    ----------
    kernel : Callable[[], float | Sequence[float]]
        Zero-argument kernel returning one value or one value per output.
    iterations : int
        Number of executions; must be positive.
    precision : Precision, default Precision.DOUBLE
        Element type of the collected samples.

    Raises
    ------
    ValueError
        If ``iterations`` is not positive.
    """
    if iterations <= 0:
        raise ValueError(f"Number of iterations must be positive, got {iterations}")

    results: list[Any] = []
    start = time.process_time_ns()
    for _ in range(iterations):
        results.append(kernel())
    elapsed_ns = time.process_time_ns() - start

    samples = np.asarray(results, dtype=precision.dtype)
    logger.debug("Ran %d iterations in %d ns of CPU time", iterations, elapsed_ns)
    return RepeatedExecutionResult(samples, elapsed_ns // 1000)


def format_monte_carlo_data(
    samples: npt.ArrayLike,
    cpu_time_elapsed_microseconds: int,
    precision: Precision = Precision.DOUBLE,
) -> str:
    """
    Render the content of a ``data.out`` file.

    Raises
    ------
    ValueError
        If ``samples`` is neither 1D nor 2D.
    """
    arr = np.asarray(samples, dtype=precision.dtype)
    lines = [f"{int(cpu_time_elapsed_microseconds)}\n"]

    if arr.ndim == 1:
        lines.extend(f"{format(float(x), SAMPLE_FORMAT)}\n" for x in arr)
    elif arr.ndim == 2:
        lines.extend(
            SEPARATOR.join(format(float(x), SAMPLE_FORMAT) for x in row) + "\n" for row in arr
        )
    else:
        raise ValueError("Samples must be a 1D array or a 2D array of shape (iterations, outputs).")

    return "".join(lines)


def save_monte_carlo_data_to_data_dot_out_file(
    samples: npt.ArrayLike,
    cpu_time_elapsed_microseconds: int,
    path: str = DATA_DOT_OUT,
    precision: Precision = Precision.DOUBLE,
) -> None:
    """
    Write Monte Carlo samples to the result file.

    Failing to open the result file is unrecoverable and terminates the
    process through :func:`~pysatl_uxio.errors.fatal`.
    """
    text = format_monte_carlo_data(samples, cpu_time_elapsed_microseconds, precision)

    try:
        fp = open(path, "w", encoding="utf-8")
    except OSError:
        fatal("Could not open monte carlo output file")

    with fp:
        fp.write(text)

    logger.debug("Saved Monte Carlo samples to '%s'", path)


__all__ = [
    "DATA_DOT_OUT",
    "RepeatedExecutionResult",
    "run_repeated_executions",
    "format_monte_carlo_data",
    "save_monte_carlo_data_to_data_dot_out_file",
]
