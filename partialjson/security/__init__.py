"""
partialjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    ErrorContext,
    ErrorReporter,
    ErrorSuggestionEngine,
    IncompleteJSONError,
    MalformedJSONError,
    ParseError,
    PartialJSONError,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    'PartialJSONError', 'ParseError', 'IncompleteJSONError', 'MalformedJSONError',
    'SecurityError', 'ErrorContext', 'ErrorReporter', 'ErrorSuggestionEngine',
    'LimitValidator',
]
