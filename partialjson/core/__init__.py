"""
partialjson Core Parsing Engine.

This module provides the tolerance options and the partial parsing engine.
"""

from .engine import (
    Parser,
    decode_strict,
    load,
    loads,
    parse,
    parse_partial,
    parse_with_status,
)
from .options import Allow

__all__ = [
    'parse', 'parse_partial', 'parse_with_status', 'decode_strict', 'loads', 'load',
    'Parser',
    'Allow',
]
