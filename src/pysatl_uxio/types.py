"""
Core Type Definitions
=====================

Fundamental types, constants and aliases shared by the readers, writers and
statistics of PySATL UxIO.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import Any, Final, TypeAlias

import numpy as np
from numpy.typing import NDArray

MAX_CHARS_PER_FILEPATH: Final = 1024
"""Maximum length of a file path, terminator included."""

MAX_CHARS_PER_LINE: Final = 1024 * 1024
"""Maximum length of a single CSV line, terminator included."""

MAX_NUMBER_OF_INPUT_SAMPLES: Final = 10000
"""Capacity of the per-column sample buffer (maximum number of data rows)."""

MAX_CHARS_PER_JSON_VARIABLE_SYMBOL: Final = 256
"""Maximum length of a JSON variable symbol, terminator included."""

MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION: Final = 1024
"""Maximum length of a JSON variable description, terminator included."""

UX_MARKER: Final = "Ux"
"""Two-character marker of a column carrying a single pre-encoded value."""

IGNORE_MARKER: Final = "-"
"""Cell text that excludes a row from a numeric column's sample population."""

CSV_DELIMITER: Final = ","
"""Field delimiter of the minimal, unquoted CSV dialect."""


class Precision(StrEnum):
    """
    Floating-point element type used by readers, writers and statistics.

    Attributes
    ----------
    FLOAT : str
        Single precision (``numpy.float32``).
    DOUBLE : str
        Double precision (``numpy.float64``).
    """

    FLOAT = "float"
    DOUBLE = "double"

    @property
    def dtype(self) -> type[np.floating[Any]]:
        """NumPy scalar type backing this precision."""
        if self is Precision.FLOAT:
            return np.float32
        return np.float64

    @property
    def max_value(self) -> float:
        """Largest finite value representable in this precision."""
        return float(np.finfo(self.dtype).max)


FloatArray: TypeAlias = NDArray[np.floating[Any]]
"""Type alias for floating-point arrays of either precision."""

Schema: TypeAlias = tuple[str, ...]
"""Ordered sequence of expected column names."""


__all__ = [
    "MAX_CHARS_PER_FILEPATH",
    "MAX_CHARS_PER_LINE",
    "MAX_NUMBER_OF_INPUT_SAMPLES",
    "MAX_CHARS_PER_JSON_VARIABLE_SYMBOL",
    "MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION",
    "UX_MARKER",
    "IGNORE_MARKER",
    "CSV_DELIMITER",
    "Precision",
    "FloatArray",
    "Schema",
]
