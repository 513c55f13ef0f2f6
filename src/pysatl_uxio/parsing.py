"""
Checked Number Parsing
======================

Prefix parsers: leading whitespace is skipped, the longest numeric prefix
(decimal, hexadecimal, ``inf`` or ``nan``) is converted and any trailing
characters are ignored. A missing number or a value out of the
target range is an error.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import re

from pysatl_uxio.errors import ValueParseError
from pysatl_uxio.types import Precision

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_HEX_FLOAT = r"0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
_DEC_FLOAT = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_SPECIAL = r"(?i:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)"

_FLOAT_PREFIX = re.compile(
    rf"(?P<sign>[+-]?)(?:(?P<hex>{_HEX_FLOAT})|(?P<dec>{_DEC_FLOAT})|(?P<special>{_SPECIAL}))"
)
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        raise ValueParseError(text)

    negative = match["sign"] == "-"
    if match["hex"] is not None:
        value = float.fromhex(match["hex"])
    elif match["dec"] is not None:
        value = float(match["dec"])
    else:
        special = match["special"].lower()
        value = math.nan if special.startswith("nan") else math.inf
        return -value if negative else value

    if math.isinf(value):
        # finite literal that does not fit into a double
        raise ValueParseError(text)
    return -value if negative else value


def parse_float_checked(text: str, precision: Precision = Precision.DOUBLE) -> float:
    """
    Parse a floating-point value at the start of ``text``.

    Parameters
    ----------
    text : str
        Text to parse. Leading whitespace is skipped and trailing characters
        are ignored.
    precision : Precision, default Precision.DOUBLE
        Target precision; decides the representable range.

    Returns
    -------
    float
        Parsed value, rounded to ``precision``.

    Raises
    ------
    ValueParseError
        If ``text`` does not start with a number, or the number is finite but
        overflows the range of ``precision``.
    """
    value = _float_prefix(text)
    if math.isfinite(value) and abs(value) > precision.max_value:
        raise ValueParseError(text)
    return float(precision.dtype(value))


def parse_int_checked(text: str) -> int:
    """
    Parse a 32-bit integer at the start of ``text``.

    Raises
    ------
    ValueParseError
        If ``text`` does not start with an integer or the integer does not fit
        into 32 bits.
    """
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        raise ValueParseError(text)

    value = int(match.group())
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueParseError(text)
    return value


__all__ = [
    "parse_float_checked",
    "parse_int_checked",
]
