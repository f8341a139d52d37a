"""
partialjson - Parse JSON that has not finished arriving.

partialjson recovers the best possible value from a JSON text that was cut
off mid-token, mid-value or mid-structure, such as a response still being
streamed from a server or a language model.

Key Features:
- Complete documents go through the standard library decoder unchanged
- Per-category tolerance with the ``Allow`` flags (strings, numbers,
  arrays, objects, null, booleans, NaN and infinities)
- Distinguishes "wait for more input" (IncompleteJSONError) from
  "this can never be valid" (MalformedJSONError)
- Positioned errors with line/column context and suggestions
- Security limits to prevent resource exhaustion attacks
- Streaming helper that re-parses a growing buffer

Quick Start:
    import partialjson
    partialjson.parse('{"name": "Alice", "age": 30, "city"')
    # {'name': 'Alice', 'age': 30}

    from partialjson import Allow
    partialjson.parse('[1, 2, 3.', allow=Allow.ALL)
    # [1, 2, 3.0]

    # Streaming
    from partialjson import StreamingParser
    parser = StreamingParser()
    for chunk in chunks:
        snapshot = parser.feed(chunk)
"""

from .core.engine import (
    Parser,
    decode_strict,
    load,
    loads,
    parse,
    parse_partial,
    parse_with_status,
)
from .core.options import Allow
from .security.exceptions import (
    ErrorContext,
    IncompleteJSONError,
    MalformedJSONError,
    ParseError,
    PartialJSONError,
    SecurityError,
)
from .streaming.processor import StreamingParser, StreamSnapshot, parse_chunks
from .utils.config import ErrorReporting, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "partialjson contributors"

__all__ = [
    # Parsing functions
    "parse", "parse_partial", "parse_with_status", "decode_strict", "loads", "load",
    "Parser",
    # Options and configuration
    "Allow", "ParseConfig", "ParseLimits", "ErrorReporting",
    # Exception classes
    "PartialJSONError", "ParseError", "IncompleteJSONError", "MalformedJSONError",
    "SecurityError", "ErrorContext",
    # Streaming
    "StreamingParser", "StreamSnapshot", "parse_chunks",
]
