"""
Resource limits enforced while a single text is parsed.

The parser calls the validator unconditionally. A validator built without
limits (``ParseConfig.unlimited()``) still tracks nesting depth but never
raises.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Checks input size, token lengths, nesting and member counts."""

    def __init__(self, limits: Optional[ParseLimits]):
        self.limits = limits
        self.depth = 0

    def check_input(self, text: str) -> None:
        """Reject texts larger than ``max_input_size`` before any parsing."""
        if self.limits and len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def check_string(self, literal: str, position: int) -> None:
        """Reject a string literal, quotes included, longer than allowed."""
        if self.limits:
            _check_length("String", literal, self.limits.max_string_length, position)

    def check_number(self, literal: str, position: int) -> None:
        """Reject a number candidate longer than allowed."""
        if self.limits:
            _check_length("Number", literal, self.limits.max_number_length, position)

    @contextmanager
    def nested(self, position: int) -> Iterator[None]:
        """
        Track one array or object level for the duration of the block.

        Usage:
            with validator.nested(start):
                ...parse members...
        """
        self.depth += 1
        try:
            if self.limits and self.depth > self.limits.max_nesting_depth:
                raise SecurityError(
                    f"Nesting depth {self.depth} exceeds limit "
                    f"{self.limits.max_nesting_depth}",
                    position,
                )
            yield
        finally:
            self.depth -= 1

    def check_object_keys(self, count: int, position: int) -> None:
        """Reject an object once it holds more keys than allowed."""
        if self.limits and count > self.limits.max_object_keys:
            raise SecurityError(
                f"Object key count {count} exceeds limit {self.limits.max_object_keys}",
                position,
            )

    def check_array_items(self, count: int, position: int) -> None:
        """Reject an array once it holds more items than allowed."""
        if self.limits and count > self.limits.max_array_items:
            raise SecurityError(
                f"Array item count {count} exceeds limit {self.limits.max_array_items}",
                position,
            )


def _check_length(kind: str, literal: str, limit: int, position: int) -> None:
    if len(literal) > limit:
        raise SecurityError(
            f"{kind} length {len(literal)} exceeds limit {limit}", position
        )
