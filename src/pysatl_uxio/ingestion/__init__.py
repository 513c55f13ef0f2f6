"""
Ingestion subpackage

Reading uncertain-valued variables from CSV:

- row scanning (:mod:`.scanner`);
- header validation (:mod:`.header`);
- per-column classification and sample accumulation (:mod:`.columns`);
- the distribution reader (:mod:`.reader`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .columns import ColumnState, is_ux_cell
from .header import validate_header
from .reader import (
    DistributionCSVReader,
    read_input_distributions_from_csv,
    read_input_double_distributions_from_csv,
    read_input_float_distributions_from_csv,
)
from .scanner import is_blank, is_ignore_marker, iter_fields, split_fields

__all__ = [
    # scanning
    "iter_fields",
    "split_fields",
    "is_blank",
    "is_ignore_marker",
    # header
    "validate_header",
    # columns
    "ColumnState",
    "is_ux_cell",
    # reader
    "DistributionCSVReader",
    "read_input_distributions_from_csv",
    "read_input_float_distributions_from_csv",
    "read_input_double_distributions_from_csv",
]
