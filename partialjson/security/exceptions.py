"""
Exception hierarchy and error reporting for partialjson.

Parse errors are split in two kinds: ``IncompleteJSONError`` when the input is
a valid prefix whose completion is not allowed by the active options, and
``MalformedJSONError`` when no amount of extra input could make it valid.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorContext:
    """Line and column information around an error position."""

    text: str
    position: int
    line: int
    column: int
    context_before: str
    context_after: str
    line_text: str
    column_indicator: str


class PartialJSONError(Exception):
    """Base class for all partialjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position is not None:
            location = f" at position {self.position}"
            if self.context is not None:
                location += f" (line {self.context.line}, column {self.context.column})"
            parts.append(location)

        if self.context is not None and self.context.line_text:
            parts.append(f"\n\nContext:\n  {self.context.line_text}")
            parts.append(f"\n  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)


class ParseError(PartialJSONError, ValueError):
    """Raised when the input cannot be turned into a value."""


class IncompleteJSONError(ParseError):
    """The input is a valid prefix but its completion is not allowed."""


class MalformedJSONError(ParseError):
    """The input is not a prefix of any valid JSON document."""


class SecurityError(PartialJSONError):
    """Raised when a configured parsing limit is exceeded."""


class ErrorReporter:
    """Builds positioned errors with line/column context for a text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.max_context = max_context
        self.lines = text.split("\n")

    def build_context(self, position: int) -> ErrorContext:
        """Build error context for a code point offset into the text."""
        position = max(0, min(position, len(self.text)))
        line = self.text.count("\n", 0, position) + 1
        line_start = self.text.rfind("\n", 0, position) + 1
        column = position - line_start + 1
        line_text = self.lines[line - 1]

        half = self.max_context // 2
        context_before = self.text[max(0, position - half) : position]
        context_after = self.text[position : position + half]

        # Long lines are clipped around the error so the caret stays visible
        clip_start = 0
        if len(line_text) > self.max_context:
            clip_start = max(0, column - 1 - half)
            line_text = line_text[clip_start : clip_start + self.max_context]

        return ErrorContext(
            text=self.text,
            position=position,
            line=line,
            column=column,
            context_before=context_before,
            context_after=context_after,
            line_text=line_text,
            column_indicator=" " * (column - 1 - clip_start) + "^",
        )

    def create_incomplete_error(
        self, message: str, position: int, suggestions: Optional[list[str]] = None
    ) -> IncompleteJSONError:
        """Create an IncompleteJSONError with context."""
        return IncompleteJSONError(
            message, position, self.build_context(position), suggestions
        )

    def create_malformed_error(
        self, message: str, position: int, suggestions: Optional[list[str]] = None
    ) -> MalformedJSONError:
        """Create a MalformedJSONError with context."""
        return MalformedJSONError(
            message, position, self.build_context(position), suggestions
        )

    def create_security_error(self, message: str) -> SecurityError:
        """Create a SecurityError."""
        return SecurityError(message)


class ErrorSuggestionEngine:
    """Canned hints attached to parse errors."""

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggestions for an array or object cut off before its end."""
        if structure_type == "object":
            return [
                "Add a closing brace '}' or wait for more input",
                "Enable Allow.OBJECT to accept partial objects",
            ]
        if structure_type == "array":
            return [
                "Add a closing bracket ']' or wait for more input",
                "Enable Allow.ARRAY to accept partial arrays",
            ]
        return [f"Close the {structure_type} or wait for more input"]

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggestions for a value that is not valid JSON."""
        corrections = {
            "True": "Use lowercase 'true' for boolean values",
            "False": "Use lowercase 'false' for boolean values",
            "None": "Use 'null' instead of 'None'",
            "undefined": "Use 'null' instead of 'undefined'",
            "nan": "Use 'NaN' for not-a-number",
            "inf": "Use 'Infinity' for infinite values",
        }
        for prefix, suggestion in corrections.items():
            if value.startswith(prefix):
                return [suggestion]
        if value[:1] == "'":
            return ["Use double quotes for strings"]
        return []

    @staticmethod
    def suggest_for_disabled_partial(flag_name: str) -> list[str]:
        """Suggestions when a truncated value needs a disabled option."""
        return [
            "Wait for more input and parse the full buffer again",
            f"Enable Allow.{flag_name} to accept this value in partial form",
        ]
