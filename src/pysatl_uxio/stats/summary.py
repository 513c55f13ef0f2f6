"""
Summary Statistics
==================

Moments and quantiles over result buffers, used both for single numeric
arrays and for repeated-execution (Monte Carlo) sample sets:

- :func:`calculate_mean_and_variance` – population mean and variance;
- :func:`calculate_quantile` – rank-based quantile without interpolation;
- :func:`calculate_matrix_mean_and_variance` – per-output moments of a
  ``(iterations, outputs)`` sample matrix;
- :func:`summarize_monte_carlo_samples` – moments and quantiles per output.

Notes
-----
- Variance is the population variance ``sum(x**2)/N - mean**2`` computed in a
  single pass with two accumulators in the requested precision.
- ``N = 0`` is not special-cased: the division follows NumPy's floating-point
  convention (``nan`` with a ``RuntimeWarning``).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_uxio.types import Precision

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy.typing as npt

DEFAULT_QUANTILES: tuple[float, ...] = (0.05, 0.25, 0.5, 0.75, 0.95)


@dataclass(frozen=True, slots=True)
class MeanAndVariance:
    """
    Mean and population variance of a sample set.

    Parameters
    ----------
    mean : float
        Arithmetic mean.
    variance : float
        Population variance.
    """

    mean: float
    variance: float


@dataclass(frozen=True, slots=True)
class SampleSummary:
    """Moments and quantiles of one output variable."""

    mean: float
    variance: float
    quantiles: dict[float, float] = field(default_factory=dict)


def calculate_mean_and_variance(
    data: npt.ArrayLike, precision: Precision = Precision.DOUBLE
) -> MeanAndVariance:
    """
    Compute mean and population variance of ``data``.

    Parameters
    ----------
    data : array_like
        1D samples.
    precision : Precision, default Precision.DOUBLE
        Precision of the accumulators.

    Returns
    -------
    MeanAndVariance
        ``mean = sum(x)/N`` and ``variance = sum(x**2)/N - mean**2``.
    """
    dtype = precision.dtype
    arr = np.asarray(data, dtype=dtype)
    n = dtype(arr.size)

    total = np.sum(arr, dtype=dtype)
    sum_of_squares = np.sum(arr * arr, dtype=dtype)

    mean = total / n
    variance = sum_of_squares / n - mean * mean

    return MeanAndVariance(mean=float(mean), variance=float(variance))


def calculate_mean_and_variance_of_float_samples(data: npt.ArrayLike) -> MeanAndVariance:
    """Single-precision form of :func:`calculate_mean_and_variance`."""
    return calculate_mean_and_variance(data, Precision.FLOAT)


def calculate_mean_and_variance_of_double_samples(data: npt.ArrayLike) -> MeanAndVariance:
    """Double-precision form of :func:`calculate_mean_and_variance`."""
    return calculate_mean_and_variance(data, Precision.DOUBLE)


def calculate_quantile(data: npt.ArrayLike, percentage: float) -> float:
    """
    Return the element of rank ``floor(percentage * N)`` of ``data``.

    ``data`` itself is left unchanged; a sorted copy is ranked. There is no
    interpolation between neighbouring ranks.

    Parameters
    ----------
    data : array_like
        1D samples.
    percentage : float
        Quantile level, ``0 <= percentage < 1``.

    Raises
    ------
    IndexError
        If the rank falls outside the array, which happens for
        ``percentage >= 1`` (rank ``N``) and for negative levels.
    """
    ranked = np.sort(np.array(data, copy=True), axis=None)
    index = int(percentage * ranked.size)

    if not 0 <= index < ranked.size:
        raise IndexError(
            f"Quantile rank {index} is out of range for {ranked.size} samples "
            f"(percentage={percentage})"
        )

    return float(ranked[index])


def calculate_matrix_mean_and_variance(
    samples: npt.ArrayLike, precision: Precision = Precision.DOUBLE
) -> list[MeanAndVariance]:
    """
    Compute mean and population variance of every column of ``samples``.

    Parameters
    ----------
    samples : array_like
        Matrix of shape ``(iterations, outputs)``; a 1D array is one output.

    Returns
    -------
    list[MeanAndVariance]
        One entry per output, in column order.
    """
    matrix = _as_matrix(samples, precision)
    return [calculate_mean_and_variance(matrix[:, j], precision) for j in range(matrix.shape[1])]


def summarize_monte_carlo_samples(
    samples: npt.ArrayLike,
    quantiles: Sequence[float] = DEFAULT_QUANTILES,
    precision: Precision = Precision.DOUBLE,
) -> list[SampleSummary]:
    """
    Summarize repeated-execution samples per output variable.

    Parameters
    ----------
    samples : array_like
        Matrix of shape ``(iterations, outputs)``; a 1D array is one output.
    quantiles : Sequence[float], default (0.05, 0.25, 0.5, 0.75, 0.95)
        Quantile levels to report, each in ``[0, 1)``.
    precision : Precision, default Precision.DOUBLE
        Precision of the moment accumulators.
    """
    matrix = _as_matrix(samples, precision)
    summaries: list[SampleSummary] = []

    for column, moments in zip(matrix.T, calculate_matrix_mean_and_variance(matrix, precision)):
        summaries.append(
            SampleSummary(
                mean=moments.mean,
                variance=moments.variance,
                quantiles={q: calculate_quantile(column, q) for q in quantiles},
            )
        )

    return summaries


def _as_matrix(samples: npt.ArrayLike, precision: Precision) -> npt.NDArray[np.floating[Any]]:
    matrix = np.asarray(samples, dtype=precision.dtype)
    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)
    if matrix.ndim != 2:
        raise ValueError("Samples must be a 1D array or a 2D array of shape (iterations, outputs).")
    return matrix


__all__ = [
    "DEFAULT_QUANTILES",
    "MeanAndVariance",
    "SampleSummary",
    "calculate_mean_and_variance",
    "calculate_mean_and_variance_of_float_samples",
    "calculate_mean_and_variance_of_double_samples",
    "calculate_quantile",
    "calculate_matrix_mean_and_variance",
    "summarize_monte_carlo_samples",
]
