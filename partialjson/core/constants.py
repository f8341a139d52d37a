"""
Common constants and patterns used across the partialjson engine.
"""

from typing import Any

import regex

from .options import Allow

# Literal text, decoded value and the flag that allows a truncated form.
# Checked in this order; "-Infinity" must stay ahead of number parsing.
LITERALS: tuple[tuple[str, Any, Allow], ...] = (
    ("null", None, Allow.NULL),
    ("true", True, Allow.BOOLEAN),
    ("false", False, Allow.BOOLEAN),
    ("Infinity", float("inf"), Allow.INFINITY),
    ("-Infinity", float("-inf"), Allow.NEGATIVE_INFINITY),
    ("NaN", float("nan"), Allow.NAN),
)

# Greedy number scan; every part is optional so a truncated literal such as
# "1.", "2e" or "-" still yields a candidate.
NUMBER_PATTERN = regex.compile(
    r"-?[0-9]*(?P<fraction>\.(?P<fraction_digits>[0-9]*))?"
    r"(?P<exponent>[eE][+-]?(?P<exponent_digits>[0-9]*))?"
)

WHITESPACE_PATTERN = regex.compile(r"\s*")
