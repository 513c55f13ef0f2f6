from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import io
import json

import numpy as np
import pytest

from pysatl_uxio.backends.empirical import EmpiricalDistribution
from pysatl_uxio.output.json_writer import (
    DoubleParticleValues,
    DoubleValues,
    FloatParticleValues,
    FloatValues,
    JSONVariable,
    distribution_values,
    particle_values,
    print_json_variables,
    render_json_variables,
)
from pysatl_uxio.types import (
    MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION,
    MAX_CHARS_PER_JSON_VARIABLE_SYMBOL,
    Precision,
)
from tests.utils.mocks import FittedSamples, RecordingBackend


class TestValues:
    """Tests for the tagged value constructors."""

    def test_distribution_values(self) -> None:
        assert isinstance(distribution_values([1.0], Precision.FLOAT), FloatValues)
        assert isinstance(distribution_values([1.0], Precision.DOUBLE), DoubleValues)

    def test_particle_values(self) -> None:
        values = particle_values(np.array([1.0, 2.0]), Precision.FLOAT)

        assert isinstance(values, FloatParticleValues)
        assert values.values == (1.0, 2.0)
        assert isinstance(particle_values([1.0], Precision.DOUBLE), DoubleParticleValues)

    def test_variable_truncates_text(self) -> None:
        variable = JSONVariable(
            "s" * 1000, "d" * 5000, particle_values([1.0, 2.0, 3.0], Precision.DOUBLE)
        )

        assert len(variable.symbol) == MAX_CHARS_PER_JSON_VARIABLE_SYMBOL - 1
        assert len(variable.description) == MAX_CHARS_PER_JSON_VARIABLE_DESCRIPTION - 1
        assert variable.size == 3


class TestRender:
    """Tests for the JSON document layout."""

    def test_particle_layout(self) -> None:
        variable = JSONVariable("x", "first", DoubleParticleValues((1.0, 2.5)))

        text = render_json_variables([variable], "demo")

        assert text == (
            "{\n"
            '\t"description": "demo",\n'
            '\t"plots": [\n'
            "\t\t{\n"
            '\t\t\t"variableID": "x",\n'
            '\t\t\t"variableSymbol": "x",\n'
            '\t\t\t"variableDescription": "first",\n'
            '\t\t\t"values": [\n'
            '\t\t\t\t" 1.000000", \n'
            '\t\t\t\t" 2.500000"\n'
            "\t\t\t],\n"
            '\t\t\t"stdValues": [\n'
            "\t\t\t\t 0.000000, \n"
            "\t\t\t\t 0.000000\n"
            "\t\t\t]\n"
            "\t\t}\n"
            "\t]\n"
            "}\n"
        )

    def test_distribution_values_use_backend_moments(self) -> None:
        backend = RecordingBackend(moment_value=0.25)
        samples = FittedSamples((1.0, 3.0))
        variable = JSONVariable("y", "second", DoubleValues((samples,)))

        document = json.loads(render_json_variables([variable], "demo", backend))

        [plot] = document["plots"]
        assert plot["values"] == ["2.000000"]
        assert plot["stdValues"] == [0.25]
        assert backend.moments == [(samples, 2)]

    def test_default_backend(self) -> None:
        variable = JSONVariable(
            "z", "third", DoubleValues((EmpiricalDistribution([1.0, 2.0, 3.0, 4.0, 5.0]),))
        )

        document = json.loads(render_json_variables([variable], "demo"))

        assert document["plots"][0]["values"] == ["3.000000"]
        assert document["plots"][0]["stdValues"] == [2.0]

    def test_float_values_are_rounded(self) -> None:
        variable = JSONVariable("f", "", FloatParticleValues((0.1,)))

        document = json.loads(render_json_variables([variable], ""))

        assert document["plots"][0]["values"] == [format(float(np.float32(0.1)), " f")]

    def test_multiple_variables_form_valid_json(self) -> None:
        variables = [
            JSONVariable("a", "first", DoubleParticleValues((1.0,))),
            JSONVariable('b"', "with\ttab", DoubleParticleValues((2.0, 3.0))),
        ]

        document = json.loads(render_json_variables(variables, "two variables"))

        assert document["description"] == "two variables"
        assert [p["variableID"] for p in document["plots"]] == ["a", 'b"']
        assert [p["variableSymbol"] for p in document["plots"]] == ["a", 'b"']
        assert document["plots"][1]["variableDescription"] == "with\ttab"
        assert document["plots"][1]["stdValues"] == [0.0, 0.0]

    def test_no_variables(self) -> None:
        document = json.loads(render_json_variables([], "empty"))

        assert document == {"description": "empty", "plots": []}

    def test_variable_without_values(self) -> None:
        variable = JSONVariable("e", "", DoubleParticleValues(()))

        document = json.loads(render_json_variables([variable], ""))

        assert document["plots"][0]["values"] == []

    def test_print_to_stream(self) -> None:
        stream = io.StringIO()
        variable = JSONVariable("x", "", DoubleParticleValues((1.0,)))

        print_json_variables([variable], "demo", stream=stream)

        assert stream.getvalue() == render_json_variables([variable], "demo")

    def test_print_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_json_variables([], "demo")

        assert json.loads(capsys.readouterr().out)["description"] == "demo"
