"""
Output subpackage

Writing uncertain-valued variables back out:

- CSV emission (:mod:`.csv_writer`);
- JSON emission with tagged variable values (:mod:`.json_writer`);
- output selection for demos (:mod:`.selection`);
- repeated-execution runs and the ``data.out`` result file (:mod:`.monte_carlo`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .csv_writer import (
    format_scientific,
    render_output_distributions_csv,
    write_output_distributions_to_csv,
    write_output_double_distributions_to_csv,
    write_output_float_distributions_to_csv,
)
from .json_writer import (
    DoubleParticleValues,
    DoubleValues,
    FloatParticleValues,
    FloatValues,
    JSONValues,
    JSONVariable,
    distribution_values,
    particle_values,
    print_json_variables,
    render_json_variables,
)
from .monte_carlo import (
    DATA_DOT_OUT,
    RepeatedExecutionResult,
    format_monte_carlo_data,
    run_repeated_executions,
    save_monte_carlo_data_to_data_dot_out_file,
)
from .selection import select_json_variables, select_outputs, selected_output_indices

__all__ = [
    # csv
    "format_scientific",
    "render_output_distributions_csv",
    "write_output_distributions_to_csv",
    "write_output_float_distributions_to_csv",
    "write_output_double_distributions_to_csv",
    # json
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
    # selection
    "selected_output_indices",
    "select_outputs",
    "select_json_variables",
    # monte carlo
    "DATA_DOT_OUT",
    "RepeatedExecutionResult",
    "run_repeated_executions",
    "format_monte_carlo_data",
    "save_monte_carlo_data_to_data_dot_out_file",
]
