"""
Configuration and limits for partialjson parsing.

This module defines the tolerance policy, security limits and error reporting
options used by the parser.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..core.options import Allow


@dataclass
class SizeLimits:
    """Input and token size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000


_SIZE_FIELDS = ("max_input_size", "max_string_length", "max_number_length")
_STRUCTURE_FIELDS = ("max_nesting_depth", "max_object_keys", "max_array_items")


@dataclass
class ParseLimits:
    """Security limits for JSON parsing to prevent abuse."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_limits: int,
    ):
        unknown = set(flat_limits) - set(_SIZE_FIELDS) - set(_STRUCTURE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_limits.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_limits.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual string literals."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number literals."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for arrays and objects."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for partialjson parsing."""

    allow: Allow = Allow.ALL_EXCEPT_NUMBERS
    limits: Optional[ParseLimits] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        allow: Allow = Allow.ALL_EXCEPT_NUMBERS,
        limits: Optional[ParseLimits] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,
    ):
        self.allow = Allow(allow)
        self.limits = limits or ParseLimits()
        self.logger = logger

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.pop("include_context", True),
                max_error_context=config_options.pop("max_error_context", 50),
            )

        if config_options:
            raise TypeError(
                f"Unknown config option(s): {', '.join(sorted(config_options))}"
            )

    @classmethod
    def unlimited(cls, allow: Allow = Allow.ALL_EXCEPT_NUMBERS) -> "ParseConfig":
        """Create a configuration that skips all limit checks."""
        config = cls(allow=allow)
        config.limits = None
        return config

    @property
    def include_context(self) -> bool:
        """Whether to attach line/column context to errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        """Set context inclusion."""
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        """Set maximum error context length."""
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value

