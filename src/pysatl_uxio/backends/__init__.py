"""
Backends subpackage

Interface to the external uncertainty-tracking subsystem and its default
implementation:

- backend protocol (:mod:`.backend`);
- empirical, array-backed distributions (:mod:`.empirical`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .backend import DistributionBackend, point_value
from .empirical import EmpiricalBackend, EmpiricalDistribution

__all__ = [
    "DistributionBackend",
    "point_value",
    "EmpiricalBackend",
    "EmpiricalDistribution",
]
