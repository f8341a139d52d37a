"""
Test cases that cut real documents at every possible position.

These tests check the guarantees callers rely on while a response is still
arriving: tolerant options never fail on a clean prefix, strict options always
do, and the default options never report a number that may still grow.
"""

import json
import unittest

import partialjson
from partialjson import Allow
from partialjson.security.exceptions import IncompleteJSONError, ParseError

DOCUMENT = (
    '{"name": "Alice", "age": 30, "scores": [1.5, -2, 3e2], '
    '"active": true, "meta": null, "tags": ["a\\n", "\\u00e9"], '
    '"nested": {"deep": [[], {}]}, "ratio": -0.25, "missing": false}'
)


def prefixes(text):
    """Every non-empty prefix shorter than the text."""
    return [text[:i] for i in range(1, len(text))]


class TestEveryPrefix(unittest.TestCase):
    """Parse every truncation of a realistic document."""

    def test_full_document(self):
        """The full document is complete under every option set."""
        for allow in (Allow.NONE, Allow.ALL):
            self.assertEqual(partialjson.parse(DOCUMENT, allow), json.loads(DOCUMENT))

    def test_all_never_fails(self):
        """With every flag set each prefix yields a value."""
        for prefix in prefixes(DOCUMENT):
            with self.subTest(prefix=prefix):
                self.assertIsInstance(partialjson.parse(prefix, Allow.ALL), dict)

    def test_defaults_never_fail(self):
        """The default options recover an object from each prefix."""
        for prefix in prefixes(DOCUMENT):
            with self.subTest(prefix=prefix):
                self.assertIsInstance(partialjson.parse(prefix), dict)

    def test_none_always_fails(self):
        """Without tolerance each prefix is an error."""
        for prefix in prefixes(DOCUMENT):
            with self.subTest(prefix=prefix):
                with self.assertRaises(ParseError):
                    partialjson.parse(prefix, Allow.NONE)

    def test_recovered_keys_are_a_prefix(self):
        """Keys appear in document order and never disappear."""
        expected_keys = list(json.loads(DOCUMENT))
        for prefix in prefixes(DOCUMENT):
            with self.subTest(prefix=prefix):
                keys = list(partialjson.parse(prefix))
                self.assertEqual(keys, expected_keys[: len(keys)])


class TestIncompleteAtTokenBoundaries(unittest.TestCase):
    """Cuts right after a token are incomplete, never malformed."""

    def test_cut_after_separator(self):
        """Commas and colons leave the document waiting for more."""
        for prefix in prefixes(DOCUMENT):
            if prefix[-1] not in ",:":
                continue
            with self.subTest(prefix=prefix):
                with self.assertRaises(IncompleteJSONError):
                    partialjson.parse(prefix, Allow.NONE)

    def test_cut_after_complete_token(self):
        """A closed string, literal or container is still incomplete."""
        for prefix in (
            '{"name"',
            '{"name": "Alice"',
            '{"name": "Alice", "age": 30',
            '{"name": "Alice", "age": 30, "scores": [1.5, -2, 3e2]',
            '{"active": true',
        ):
            with self.subTest(prefix=prefix):
                with self.assertRaises(IncompleteJSONError):
                    partialjson.parse(prefix, Allow.NONE)


class TestGrowingNumbers(unittest.TestCase):
    """The default options never report a number that may still change."""

    def test_array_numbers_are_final(self):
        """Every recovered list is a prefix of the final list."""
        document = '{"values": [10, 200, 3000, -45000]}'
        final = json.loads(document)["values"]
        for prefix in prefixes(document):
            with self.subTest(prefix=prefix):
                values = partialjson.parse(prefix).get("values", [])
                self.assertEqual(values, final[: len(values)])

    def test_allow_all_reports_growing_numbers(self):
        """With NUMBER set the number at the cut is reported as read."""
        prefix = '{"values": [10, 20'
        self.assertEqual(partialjson.parse(prefix, Allow.ALL), {"values": [10, 20]})
        self.assertEqual(partialjson.parse(prefix), {"values": [10]})


if __name__ == '__main__':
    unittest.main()
