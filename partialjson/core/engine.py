"""
Partial JSON engine - turns a possibly truncated JSON text into Python values.

Complete documents go straight through the standard library decoder. Anything
else is re-read by a recursive-descent parser whose tolerance for truncated
values is controlled per category by ``Allow``.
"""

import json
import logging
from typing import Any, NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    IncompleteJSONError,
    MalformedJSONError,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import LITERALS, NUMBER_PATTERN, WHITESPACE_PATTERN
from .options import Allow

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Parser:
    """Tolerant recursive-descent parser over a single trimmed text.

    The cursor only moves forward. Collections decide, from their own flag,
    whether a failure inside them is salvaged or re-raised.
    """

    def __init__(
        self,
        text: str,
        allow: Allow = Allow.ALL_EXCEPT_NUMBERS,
        config: Optional[ParseConfig] = None,
    ):
        config = config or ParseConfig()
        self.text = text
        self.pos = 0
        self.end = len(text)
        self.allow = Allow(allow)
        self.validator = LimitValidator(config.limits)
        self.error_reporter = (
            ErrorReporter(text, config.max_error_context)
            if config.include_context
            else None
        )
        self.logger = config.logger or logger

    def parse(self) -> Any:
        """Parse the value at the start of the text."""
        try:
            return self.parse_value()
        except RecursionError:
            raise SecurityError(
                "Nesting depth exceeds the interpreter recursion limit",
                self.pos,
            ) from None

    def skip_whitespace(self) -> None:
        """Advance the cursor past any whitespace."""
        self.pos = WHITESPACE_PATTERN.match(self.text, self.pos).end()

    def _at(self, char: str) -> bool:
        return self.pos < self.end and self.text[self.pos] == char

    def _raise_incomplete(
        self,
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        position = self.pos if position is None else position
        if self.error_reporter:
            raise self.error_reporter.create_incomplete_error(
                message, position, suggestions
            )
        raise IncompleteJSONError(message, position, suggestions=suggestions)

    def _raise_malformed(
        self,
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        position = self.pos if position is None else position
        if self.error_reporter:
            raise self.error_reporter.create_malformed_error(
                message, position, suggestions
            )
        raise MalformedJSONError(message, position, suggestions=suggestions)

    def parse_value(self) -> Any:
        """Parse any JSON value at the cursor."""
        self.skip_whitespace()
        if self.pos >= self.end:
            self._raise_incomplete("Unexpected end of input")

        char = self.text[self.pos]
        if char == '"':
            return self.parse_string()
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()

        found, value = self._parse_literal()
        if found:
            return value

        return self.parse_number()

    def _parse_literal(self) -> tuple[bool, Any]:
        """Match null/true/false/Infinity/-Infinity/NaN. Returns (found, value)."""
        remaining = self.end - self.pos
        for literal, value, flag in LITERALS:
            if self.text.startswith(literal, self.pos):
                self.pos += len(literal)
                return True, value
            # A truncated literal is only accepted at the very end of the input
            if (
                flag in self.allow
                and 0 < remaining < len(literal)
                and literal.startswith(self.text[self.pos :])
            ):
                self.pos = self.end
                return True, value
        return False, None

    def parse_string(self) -> str:
        """Parse a string literal, closing it synthetically when truncated."""
        start = self.pos
        escape = False
        self.pos += 1

        while self.pos < self.end:
            char = self.text[self.pos]
            if char == '"' and not escape:
                break
            escape = not escape if char == "\\" else False
            self.pos += 1

        if self.pos < self.end:
            self.pos += 1
            token = self.text[start : self.pos]
            self.validator.check_string(token, start)
            try:
                return json.loads(token)
            except json.JSONDecodeError as e:
                self._raise_malformed(f"Invalid string literal: {e.msg}", start)

        if Allow.STRING not in self.allow:
            self._raise_incomplete(
                "Unterminated string literal",
                start,
                ErrorSuggestionEngine.suggest_for_disabled_partial("STRING"),
            )

        scanned = self.text[start : self.pos]
        self.validator.check_string(scanned, start)

        found, value = self._decode_closed(scanned)
        if found:
            return value

        # Drop a dangling escape sequence such as \u12 and try again
        backslash = scanned.rfind("\\")
        if backslash == -1:
            self._raise_malformed("Invalid string literal")
        found, value = self._decode_closed(scanned[:backslash])
        if found:
            return value
        self._raise_malformed("Invalid escape sequence")

    @staticmethod
    def _decode_closed(partial: str) -> tuple[bool, Any]:
        """Close an unterminated string literal and decode it."""
        try:
            return True, json.loads(partial + '"')
        except json.JSONDecodeError:
            return False, None

    def parse_object(self) -> dict[str, Any]:
        """Parse an object; partial objects keep only completed pairs."""
        start = self.pos
        self.pos += 1
        obj: dict[str, Any] = {}

        with self.validator.nested(start):
            try:
                while True:
                    self.skip_whitespace()
                    if self.pos >= self.end:
                        self._raise_incomplete(
                            "Expected '}' at end of object",
                            suggestions=ErrorSuggestionEngine.suggest_for_unclosed_structure(
                                "object"
                            ),
                        )
                    if self._at("}"):
                        self.pos += 1
                        return obj
                    if not self._at('"'):
                        self._raise_malformed("Expected string key")

                    key = self.parse_string()
                    self.skip_whitespace()
                    if self.pos >= self.end:
                        self._raise_incomplete("Expected ':' after key")
                    if not self._at(":"):
                        self._raise_malformed("Expected ':' after key")
                    self.pos += 1

                    obj[key] = self.parse_value()
                    self.validator.check_object_keys(len(obj), start)

                    self.skip_whitespace()
                    if self._at(","):
                        self.pos += 1
            except ParseError as error:
                if Allow.OBJECT not in self.allow:
                    raise
                self.logger.debug(
                    "Salvaged partial object at position %d with %d key(s): %s",
                    start,
                    len(obj),
                    error.message,
                )
                return obj

    def parse_array(self) -> list[Any]:
        """Parse an array; failed elements are skipped when arrays may be partial."""
        start = self.pos
        self.pos += 1
        arr: list[Any] = []
        last_item_omitted = False
        closed = False

        with self.validator.nested(start):
            while True:
                self.skip_whitespace()
                if self.pos >= self.end:
                    break
                if self._at("]"):
                    self.pos += 1
                    closed = True
                    break

                last_item_omitted = False
                try:
                    arr.append(self.parse_value())
                except ParseError as error:
                    if Allow.ARRAY not in self.allow:
                        raise
                    self.logger.debug(
                        "Skipped array element at position %d: %s",
                        error.position,
                        error.message,
                    )
                    self._skip_to_next_element()
                    last_item_omitted = True
                    continue

                self.validator.check_array_items(len(arr), start)

                self.skip_whitespace()
                if self._at(","):
                    self.pos += 1

        if not closed:
            if Allow.ARRAY not in self.allow:
                self._raise_incomplete(
                    "Expected ']' at end of array",
                    suggestions=ErrorSuggestionEngine.suggest_for_unclosed_structure(
                        "array"
                    ),
                )
            self.logger.debug(
                "Salvaged partial array at position %d with %d item(s)",
                start,
                len(arr),
            )

        # A trailing number is kept only when numbers may be partial
        if (
            not last_item_omitted
            and arr
            and _is_number(arr[-1])
            and Allow.NUMBER not in self.allow
        ):
            arr.pop()
        return arr

    def _skip_to_next_element(self) -> None:
        while self.pos < self.end and self.text[self.pos] not in ",]":
            self.pos += 1
        if self._at(","):
            self.pos += 1

    def parse_number(self) -> Union[int, float]:
        """Parse a number, optionally accepting a truncated literal."""
        start = self.pos
        match = NUMBER_PATTERN.match(self.text, self.pos)
        candidate = match.group()
        if not candidate:
            char = self.text[self.pos]
            self._raise_malformed(
                f"Unexpected character {char!r}",
                suggestions=ErrorSuggestionEngine.suggest_for_invalid_value(
                    self.text[self.pos : self.pos + 10]
                ),
            )

        self.validator.check_number(candidate, start)
        self.pos = match.end()

        has_fraction = match.group("fraction") is not None
        has_exponent = match.group("exponent") is not None
        unfinished = (has_fraction and not match.group("fraction_digits")) or (
            has_exponent and not match.group("exponent_digits")
        )
        allow_partial = Allow.NUMBER in self.allow

        if unfinished and not allow_partial:
            self._raise_malformed(
                "Invalid number",
                start,
                ErrorSuggestionEngine.suggest_for_disabled_partial("NUMBER"),
            )

        try:
            value = float(candidate)
        except ValueError:
            value = None

        if value is not None:
            if not has_fraction and not has_exponent:
                return int(candidate)
            return value

        if allow_partial:
            for end in range(len(candidate) - 1, 0, -1):
                try:
                    return float(candidate[:end])
                except ValueError:
                    continue

        self._raise_malformed("Invalid number", start)


def decode_strict(text: str) -> tuple[bool, Any]:
    """Decode a complete JSON document. Returns (success, value)."""
    try:
        return True, json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return False, None


def _prepare(
    text: str, allow: Optional[Allow], config: Optional[ParseConfig]
) -> tuple[str, Allow, ParseConfig]:
    """Resolve options, validate input size and trim surrounding whitespace."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    config = config or ParseConfig()
    allow = config.allow if allow is None else Allow(allow)

    LimitValidator(config.limits).check_input(text)

    trimmed = text.strip()
    if not trimmed:
        message = "Empty string" if not text else "Empty string after trimming"
        raise MalformedJSONError(message, 0)
    return trimmed, allow, config


def parse_partial(
    text: str,
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Parse text with the tolerant parser only, skipping the strict fast path.

    Args:
        text: JSON text, possibly truncated
        allow: Categories that may be returned in partial form; defaults to
            ``config.allow``
        config: Optional ParseConfig for limits, error reporting and logging

    Raises:
        IncompleteJSONError: If completing the value needs a disabled category
        MalformedJSONError: If the text is not a prefix of valid JSON
        SecurityError: If configured limits are exceeded
    """
    trimmed, allow, config = _prepare(text, allow, config)
    return Parser(trimmed, allow, config).parse()


def parse_with_status(
    text: str,
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> tuple[bool, Any]:
    """
    Same as parse() but also reports whether the document was complete.

    Returns:
        ``(complete, value)`` where ``complete`` is True when the strict
        decoder accepted the whole text
    """
    trimmed, allow, config = _prepare(text, allow, config)

    complete, value = decode_strict(trimmed)
    if complete:
        return True, value

    (config.logger or logger).debug(
        "Strict decode failed for %d chars, parsing partially", len(trimmed)
    )
    return False, Parser(trimmed, allow, config).parse()


def parse(
    text: str,
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Parse a possibly incomplete JSON string into a Python value.

    Complete documents are decoded by the standard library and returned as-is,
    whatever ``allow`` says. Truncated documents are re-parsed and the best
    value recoverable under ``allow`` is returned.

    Args:
        text: JSON text, possibly truncated
        allow: Categories that may be returned in partial form; defaults to
            ``Allow.ALL_EXCEPT_NUMBERS``
        config: Optional ParseConfig for limits, error reporting and logging

    Returns:
        Parsed Python data structure

    Raises:
        IncompleteJSONError: If completing the value needs a disabled category
        MalformedJSONError: If the text is not a prefix of valid JSON
        SecurityError: If configured limits are exceeded

    Example:
        >>> parse('{"name": "Alice", "tags": ["a", "b')
        {'name': 'Alice', 'tags': ['a', 'b']}
    """
    return parse_with_status(text, allow, config=config)[1]


def loads(
    s: Union[str, bytes, bytearray],
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a possibly incomplete JSON document (``json.loads`` style).

    Bytes are decoded as UTF-8 before parsing.
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")
    return parse(s, allow, config=config)


def load(
    fp: TextIO,
    allow: Optional[Allow] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """Same as loads() but reads from a file-like object."""
    return loads(fp.read(), allow, config=config)
