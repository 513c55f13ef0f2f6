"""
JSON Emission of Output Variables
=================================

Renders output variables into the fixed-shape JSON document consumed by plot
front-ends::

    {
        "description": "...",
        "plots": [
            {
                "variableID": "...",
                "variableSymbol": "...",
                "variableDescription": "...",
                "values": ["...", ...],
                "stdValues": [..., ...]
            }
        ]
    }

``variableID`` duplicates ``variableSymbol`` for older consumers; both are
always emitted.

The values of a variable are a tagged sum (:data:`JSONValues`):

- :class:`FloatValues` / :class:`DoubleValues` – distribution-valued results
  of a single evaluation; ``stdValues`` hold the backend's second moment;
- :class:`FloatParticleValues` / :class:`DoubleParticleValues` – plain samples
  of repeated executions; ``stdValues`` are ``0.0``.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from pysatl_uxio.backends.backend import point_value
from pysatl_uxio.backends.empirical import EmpiricalBackend
from pysatl_uxio.types import (
    MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION,
    MAX_CHARS_PER_JSON_VARIABLE_SYMBOL,
    Precision,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from pysatl_uxio.backends.backend import DistributionBackend

VALUE_FORMAT = "f"
PARTICLE_FORMAT = " f"


@dataclass(frozen=True, slots=True)
class FloatValues:
    """Distribution-valued single-precision results."""

    values: Sequence[Any]
    precision: ClassVar[Precision] = Precision.FLOAT


@dataclass(frozen=True, slots=True)
class DoubleValues:
    """Distribution-valued double-precision results."""

    values: Sequence[Any]
    precision: ClassVar[Precision] = Precision.DOUBLE


@dataclass(frozen=True, slots=True)
class FloatParticleValues:
    """Single-precision samples of repeated executions."""

    values: Sequence[float]
    precision: ClassVar[Precision] = Precision.FLOAT


@dataclass(frozen=True, slots=True)
class DoubleParticleValues:
    """Double-precision samples of repeated executions."""

    values: Sequence[float]
    precision: ClassVar[Precision] = Precision.DOUBLE


JSONValues: TypeAlias = FloatValues | DoubleValues | FloatParticleValues | DoubleParticleValues
"""Values of one JSON variable, tagged by element type and kind."""


def distribution_values(values: Sequence[Any], precision: Precision) -> FloatValues | DoubleValues:
    """Wrap distribution-valued results of the given precision."""
    if precision is Precision.FLOAT:
        return FloatValues(tuple(values))
    return DoubleValues(tuple(values))


def particle_values(
    values: Sequence[float], precision: Precision
) -> FloatParticleValues | DoubleParticleValues:
    """Wrap repeated-execution samples of the given precision."""
    if precision is Precision.FLOAT:
        return FloatParticleValues(tuple(values))
    return DoubleParticleValues(tuple(values))


@dataclass(frozen=True, slots=True)
class JSONVariable:
    """
    One plotted output variable.

    Parameters
    ----------
    symbol : str
        Variable symbol, truncated to ``MAX_CHARS_PER_JSON_VARIABLE_SYMBOL - 1``
        characters.
    description : str
        Variable description, truncated to
        ``MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION - 1`` characters.
    values : JSONValues
        Tagged values of the variable.
    """

    symbol: str
    description: str
    values: JSONValues

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbol", self.symbol[: MAX_CHARS_PER_JSON_VARIABLE_SYMBOL - 1])
        object.__setattr__(
            self,
            "description",
            self.description[: MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION - 1],
        )

    @property
    def size(self) -> int:
        """Number of values."""
        return len(self.values.values)


def _rounded(value: Any, precision: Precision) -> float:
    return float(precision.dtype(point_value(value)))


def _format_entries(
    values: JSONValues, backend: DistributionBackend[Any]
) -> tuple[list[str], list[str]]:
    if isinstance(values, FloatParticleValues | DoubleParticleValues):
        formatted = [
            json.dumps(format(_rounded(v, values.precision), PARTICLE_FORMAT))
            for v in values.values
        ]
        return formatted, [format(0.0, PARTICLE_FORMAT) for _ in values.values]

    if isinstance(values, FloatValues | DoubleValues):
        formatted = [
            json.dumps(format(_rounded(v, values.precision), VALUE_FORMAT)) for v in values.values
        ]
        stds = [format(float(backend.nth_moment(v, 2)), PARTICLE_FORMAT) for v in values.values]
        return formatted, stds

    raise TypeError(f"Unsupported JSON values of type {type(values).__name__}")


def _render_list(lines: list[str], entries: list[str], key: str, last: bool) -> None:
    lines.append(f"\t\t\t{json.dumps(key)}: [\n")
    lines.append(", \n".join(f"\t\t\t\t{entry}" for entry in entries))
    if entries:
        lines.append("\n")
    lines.append("\t\t\t]\n" if last else "\t\t\t],\n")


def render_json_variables(
    json_variables: Sequence[JSONVariable],
    description: str,
    backend: DistributionBackend[Any] | None = None,
) -> str:
    """
    Render the JSON document for ``json_variables``.

    Parameters
    ----------
    json_variables : Sequence[JSONVariable]
        Variables to plot, in order.
    description : str
        Document description.
    backend : DistributionBackend, optional
        Supplies second moments of distribution-valued results; an
        :class:`~pysatl_uxio.backends.empirical.EmpiricalBackend` by default.

    Returns
    -------
    str
        Tab-indented document text, newline-terminated.
    """
    if backend is None:
        backend = EmpiricalBackend()

    lines = ["{\n", f"\t\"description\": {json.dumps(description, ensure_ascii=False)},\n"]
    lines.append('\t"plots": [\n')

    for i, variable in enumerate(json_variables):
        symbol = json.dumps(variable.symbol, ensure_ascii=False)
        values, stds = _format_entries(variable.values, backend)

        lines.append("\t\t{\n")
        lines.append(f'\t\t\t"variableID": {symbol},\n')
        lines.append(f'\t\t\t"variableSymbol": {symbol},\n')
        lines.append(
            f"\t\t\t\"variableDescription\": "
            f"{json.dumps(variable.description, ensure_ascii=False)},\n"
        )
        _render_list(lines, values, "values", last=False)
        _render_list(lines, stds, "stdValues", last=True)
        lines.append("\t\t},\n" if i < len(json_variables) - 1 else "\t\t}\n")

    lines.append("\t]\n")
    lines.append("}\n")
    return "".join(lines)


def print_json_variables(
    json_variables: Sequence[JSONVariable],
    description: str,
    backend: DistributionBackend[Any] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write :func:`render_json_variables` output to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_json_variables(json_variables, description, backend))


__all__ = [
    "FloatValues",
    "DoubleValues",
    "FloatParticleValues",
    "DoubleParticleValues",
    "JSONValues",
    "JSONVariable",
    "distribution_values",
    "particle_values",
    "render_json_variables",
    "print_json_variables",
]
