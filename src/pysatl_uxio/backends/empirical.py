"""
Empirical Distribution Backend
==============================

Default, dependency-light implementation of
:class:`~pysatl_uxio.backends.backend.DistributionBackend`:

- :class:`EmpiricalDistribution` – immutable array-backed population of samples;
- :class:`EmpiricalBackend` – fits samples into an :class:`EmpiricalDistribution`,
  extracts moments with :mod:`scipy.stats` and decodes Ux cells into one-point
  distributions.

Notes
-----
- Plain numbers are treated as point masses: their first moment is the value
  itself and all higher central moments are zero.
- The textual Ux form understood here is ``<point value>Ux<payload>``; only the
  leading point value is used, the payload is opaque.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np
from scipy import stats as _sp_stats

from pysatl_uxio.parsing import parse_float_checked
from pysatl_uxio.types import UX_MARKER, Precision

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt


class EmpiricalDistribution:
    """
    Empirical distribution of a finite population of samples.

    Parameters
    ----------
    samples : array_like
        1D floating-point population; copied and frozen on construction.

    Raises
    ------
    ValueError
        If ``samples`` is not 1D or is empty.
    """

    __slots__ = ("_samples",)

    _samples: npt.NDArray[np.floating[Any]]

    def __init__(self, samples: npt.ArrayLike) -> None:
        arr = np.array(samples, copy=True)
        if arr.ndim != 1:
            raise ValueError("EmpiricalDistribution expects a 1D array of samples.")
        if arr.size == 0:
            raise ValueError("EmpiricalDistribution expects at least one sample.")
        if not np.issubdtype(arr.dtype, np.floating):
            arr = arr.astype(np.float64)
        arr.setflags(write=False)
        self._samples = arr

    @property
    def samples(self) -> npt.NDArray[np.floating[Any]]:
        """Read-only view of the population."""
        return self._samples

    @property
    def size(self) -> int:
        """Number of samples in the population."""
        return int(self._samples.size)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        for x in self._samples:
            yield float(x)

    @property
    def mean(self) -> float:
        """Expected value of the distribution."""
        return float(np.mean(self._samples, dtype=np.float64))

    @property
    def variance(self) -> float:
        """Population variance of the distribution."""
        return float(np.var(self._samples, dtype=np.float64))

    def __float__(self) -> float:
        return self.mean

    def __repr__(self) -> str:
        return f"EmpiricalDistribution(size={self.size}, mean={self.mean:g})"


class EmpiricalBackend:
    """
    Backend producing :class:`EmpiricalDistribution` values.

    Parameters
    ----------
    precision : Precision, default Precision.DOUBLE
        Precision used when decoding Ux cells.
    """

    def __init__(self, precision: Precision = Precision.DOUBLE) -> None:
        self.precision = precision

    def fit(self, samples: npt.NDArray[np.floating[Any]]) -> EmpiricalDistribution:
        """
        Build the empirical distribution of ``samples``.

        Raises
        ------
        ValueError
            If ``samples`` is empty.
        """
        return EmpiricalDistribution(samples)

    def nth_moment(self, value: EmpiricalDistribution | float, n: int) -> float:
        """
        Return the ``n``-th moment of ``value``.

        The first moment is the mean; for ``n >= 2`` the ``n``-th central
        moment is returned (``n = 2`` gives the population variance).

        Raises
        ------
        ValueError
            If ``n < 1``.
        """
        if n < 1:
            raise ValueError(f"Moment order must be positive, got {n}")

        if isinstance(value, EmpiricalDistribution):
            data = value.samples.astype(np.float64)
        else:
            data = np.array([float(value)], dtype=np.float64)

        if n == 1:
            return float(np.mean(data))
        return float(_sp_stats.moment(data, n))

    def decode(self, text: str) -> EmpiricalDistribution:
        """
        Decode a Ux cell into a one-point distribution.

        Raises
        ------
        ValueParseError
            If the cell does not start with a number.
        """
        marker = text.find(UX_MARKER)
        head = text if marker < 0 else text[:marker]
        value = parse_float_checked(head, self.precision)
        return EmpiricalDistribution(np.array([value], dtype=self.precision.dtype))


__all__ = [
    "EmpiricalDistribution",
    "EmpiricalBackend",
]
