"""
Distribution Backend Interface
==============================

The uncertainty-tracking subsystem is external to this package. Readers and
writers talk to it only through :class:`DistributionBackend`, so any backend
(including deterministic test stubs) can be injected.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from pysatl_uxio.types import FloatArray

D = TypeVar("D")


@runtime_checkable
class DistributionBackend(Protocol[D]):
    """
    Protocol of the external numeric subsystem.

    Methods
    -------
    fit(samples)
        Build one distribution value from the empirical population ``samples``.
    nth_moment(value, n)
        Return the ``n``-th moment of a distribution value (or plain number).
    decode(text)
        Build a distribution value from its pre-encoded textual (Ux) form.
    """

    def fit(self, samples: FloatArray) -> D: ...

    def nth_moment(self, value: D | float, n: int) -> float: ...

    def decode(self, text: str) -> D: ...


def point_value(value: Any) -> float:
    """Return the value a ``%e``/``%f`` conversion of ``value`` would print."""
    return float(value)


__all__ = [
    "DistributionBackend",
    "point_value",
]
