#!/usr/bin/env python3
"""
Example demo program built on PySATL UxIO.

Reads the uncertain inputs ``A``, ``B`` and ``C`` from a CSV file, evaluates
the kernel ``y = A * B + C`` and ``z = A - C`` and emits the results as CSV,
JSON or a Monte Carlo ``data.out`` file.

Examples::

    python example_uncertain_kernel.py -i inputs.csv
    python example_uncertain_kernel.py -i inputs.csv -j
    python example_uncertain_kernel.py -i inputs.csv -M 1000 -S 0
    python example_uncertain_kernel.py -i inputs.csv -o outputs.csv

Input CSV layout (``-`` excludes a row from a column)::

    A,B,C
    1.0,2.0,0.5
    1.5,-,0.25
    0.5,2.5,-
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import sys

import numpy as np

from pysatl_uxio import (
    DemoOption,
    EmpiricalDistribution,
    parse_args,
    print_common_usage,
    print_json_variables,
    read_input_double_distributions_from_csv,
    report_errors,
    run_repeated_executions,
    save_monte_carlo_data_to_data_dot_out_file,
    select_json_variables,
    select_outputs,
    summarize_monte_carlo_samples,
    write_output_double_distributions_to_csv,
)
from pysatl_uxio.options import configure_logging

logger = logging.getLogger("example_uncertain_kernel")

INPUT_NAMES = ("A", "B", "C")
OUTPUT_NAMES = ("y", "z")
OUTPUT_DESCRIPTIONS = ("A * B + C", "A - C")

DEMO_OPTIONS = (DemoOption("seed", "s", has_arg=True, help="Random seed of the Monte Carlo run."),)
SEED_USAGE = "\t[-s, --seed <Random seed : int>] (Random seed of the Monte Carlo run.)\n"

DEFAULT_INPUTS = {
    "A": [1.0, 1.5, 0.5, 1.25],
    "B": [2.0, 2.5, 1.75],
    "C": [0.5, 0.25, 0.75],
}


def kernel(a: float, b: float, c: float) -> tuple[float, float]:
    return a * b + c, a - c


def main(argv: list[str] | None = None) -> int:
    with report_errors():
        arguments = parse_args(argv, DEMO_OPTIONS)
        configure_logging(arguments.is_verbose)

        if arguments.is_help_enabled:
            print_common_usage()
            sys.stderr.write(SEED_USAGE)
            return 0

        if arguments.is_input_from_file_enabled:
            inputs = read_input_double_distributions_from_csv(
                arguments.input_file_path, INPUT_NAMES
            )
        else:
            logger.info("No input file given, using built-in inputs")
            inputs = [EmpiricalDistribution(DEFAULT_INPUTS[name]) for name in INPUT_NAMES]

        for name, value in zip(INPUT_NAMES, inputs):
            logger.debug("Input %s: %r", name, value)

        if arguments.is_monte_carlo_mode:
            seed = arguments.demo_options.get("seed")
            rng = np.random.default_rng(None if seed is None else int(seed))
            populations = [np.asarray(value.samples) for value in inputs]

            result = run_repeated_executions(
                lambda: kernel(*(float(rng.choice(p)) for p in populations)),
                arguments.number_of_monte_carlo_iterations,
            )
            logger.info(
                "Ran %d iterations in %d us of CPU time",
                result.iterations,
                result.cpu_time_elapsed_microseconds,
            )

            if arguments.is_output_json_mode:
                variables = select_json_variables(
                    arguments, OUTPUT_NAMES, OUTPUT_DESCRIPTIONS, result.samples
                )
                print_json_variables(variables, "Monte Carlo run of the example kernel")
            else:
                save_monte_carlo_data_to_data_dot_out_file(
                    result.samples, result.cpu_time_elapsed_microseconds
                )
                for name, summary in zip(
                    OUTPUT_NAMES, summarize_monte_carlo_samples(result.samples)
                ):
                    print(f"{name}: mean = {summary.mean:e}, variance = {summary.variance:e}")
            return 0

        outputs = kernel(*(float(value) for value in inputs))

        if arguments.is_output_json_mode:
            variables = select_json_variables(
                arguments, OUTPUT_NAMES, OUTPUT_DESCRIPTIONS, outputs
            )
            print_json_variables(variables, "Single evaluation of the example kernel")
        else:
            names, values = select_outputs(arguments, OUTPUT_NAMES, outputs)
            path = arguments.output_file_path if arguments.is_write_to_file_enabled else "stdout"
            write_output_double_distributions_to_csv(path, values, names)

    return 0


if __name__ == "__main__":
    sys.exit(main())
