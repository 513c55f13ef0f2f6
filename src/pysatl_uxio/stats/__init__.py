"""
Statistics subpackage

Moments and quantiles over numeric arrays and repeated-execution sample sets
(:mod:`.summary`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .summary import (
    DEFAULT_QUANTILES,
    MeanAndVariance,
    SampleSummary,
    calculate_matrix_mean_and_variance,
    calculate_mean_and_variance,
    calculate_mean_and_variance_of_double_samples,
    calculate_mean_and_variance_of_float_samples,
    calculate_quantile,
    summarize_monte_carlo_samples,
)

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
