"""
Per-column state of a CSV read.

Each column is either a numeric-sample column, whose cells are accumulated
into a fixed-capacity buffer, or a Ux column, whose first data cell holds one
pre-encoded distribution value.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import numpy.typing as npt

from pysatl_uxio.errors import TooManyRowsError
from pysatl_uxio.types import MAX_NUMBER_OF_INPUT_SAMPLES, UX_MARKER, Precision


def is_ux_cell(header: str, cell: str) -> bool:
    """Whether a header cell or a first-row data cell carries the Ux marker."""
    return UX_MARKER in header or UX_MARKER in cell


@dataclass(slots=True)
class ColumnState:
    """
    Accumulation state of one column.

    Parameters
    ----------
    index : int
        0-indexed position of the column.
    name : str
        Expected column name.
    precision : Precision, default Precision.DOUBLE
        Element type of the sample buffer.
    capacity : int, default MAX_NUMBER_OF_INPUT_SAMPLES
        Maximum number of samples.

    Attributes
    ----------
    is_ux_column : bool
        Set once, while the first data row is read; never reset afterwards.
    sample_count : int
        Number of accumulated samples; ignored rows are not counted.
    samples : numpy.ndarray
        Buffer of length ``capacity``; only the first ``sample_count``
        entries are meaningful.
    ux_value : Any
        Decoded distribution of a Ux column.
    """

    index: int
    name: str
    precision: Precision = Precision.DOUBLE
    capacity: int = MAX_NUMBER_OF_INPUT_SAMPLES
    is_ux_column: bool = False
    sample_count: int = 0
    samples: npt.NDArray[np.floating[Any]] = field(init=False, repr=False)
    ux_value: Any = field(default=None, repr=False)
    _classified: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.samples = np.zeros(self.capacity, dtype=self.precision.dtype)

    def classify(self, header: str, cell: str) -> bool:
        """
        Decide whether this is a Ux column.

        Only the first call has an effect; the decision is immutable for the
        rest of the read.

        Returns
        -------
        bool
            The (possibly earlier) decision.
        """
        if not self._classified:
            self.is_ux_column = is_ux_cell(header, cell)
            self._classified = True
        return self.is_ux_column

    def _check_capacity(self) -> None:
        if self.sample_count >= self.capacity:
            raise TooManyRowsError(self.capacity)

    def skip(self) -> None:
        """Fill the next slot with ``0`` without counting it."""
        self._check_capacity()
        self.samples[self.sample_count] = 0.0

    def append(self, value: float) -> None:
        """
        Append one sample.

        Raises
        ------
        TooManyRowsError
            If the buffer is full.
        """
        self._check_capacity()
        self.samples[self.sample_count] = value
        self.sample_count += 1

    @property
    def population(self) -> npt.NDArray[np.floating[Any]]:
        """Copy of the accumulated samples."""
        return self.samples[: self.sample_count].copy()


__all__ = [
    "ColumnState",
    "is_ux_cell",
]
