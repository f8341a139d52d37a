"""
Test cases for the Allow tolerance flags.

Tests focus on flag arithmetic and the named presets.
"""

import unittest

from partialjson.core.options import Allow


class TestAllowPresets(unittest.TestCase):
    """Test the named flag unions."""

    def test_all_infinity(self):
        """ALL_INFINITY covers both signs."""
        self.assertEqual(Allow.ALL_INFINITY, Allow.INFINITY | Allow.NEGATIVE_INFINITY)

    def test_special(self):
        """SPECIAL covers null, booleans, NaN and infinities."""
        expected = Allow.NULL | Allow.BOOLEAN | Allow.NAN | Allow.ALL_INFINITY
        self.assertEqual(Allow.SPECIAL, expected)

    def test_atomic_and_collections(self):
        """ATOMIC and COLLECTIONS together make ALL."""
        self.assertEqual(Allow.ATOMIC, Allow.STRING | Allow.NUMBER | Allow.SPECIAL)
        self.assertEqual(Allow.COLLECTIONS, Allow.ARRAY | Allow.OBJECT)
        self.assertEqual(Allow.ALL, Allow.ATOMIC | Allow.COLLECTIONS)

    def test_all_except_numbers(self):
        """The default preset is everything but NUMBER."""
        self.assertEqual(Allow.ALL_EXCEPT_NUMBERS, Allow.ALL.subtracting(Allow.NUMBER))
        self.assertNotIn(Allow.NUMBER, Allow.ALL_EXCEPT_NUMBERS)
        self.assertIn(Allow.STRING, Allow.ALL_EXCEPT_NUMBERS)
        self.assertIn(Allow.OBJECT, Allow.ALL_EXCEPT_NUMBERS)

    def test_none_is_empty(self):
        """NONE enables no category."""
        for flag in (Allow.STRING, Allow.NUMBER, Allow.ARRAY, Allow.OBJECT):
            self.assertNotIn(flag, Allow.NONE)
        self.assertEqual(int(Allow.NONE), 0)


class TestAllowOperations(unittest.TestCase):
    """Test contains/subtracting/from_names."""

    def test_contains_single_and_union(self):
        """contains() requires every requested flag."""
        allow = Allow.STRING | Allow.ARRAY
        self.assertTrue(allow.contains(Allow.STRING))
        self.assertTrue(allow.contains(Allow.STRING | Allow.ARRAY))
        self.assertFalse(allow.contains(Allow.STRING | Allow.OBJECT))
        self.assertTrue(allow.contains(Allow.NONE))

    def test_subtracting(self):
        """subtracting() removes flags and ignores absent ones."""
        allow = Allow.ALL.subtracting(Allow.BOOLEAN | Allow.NULL)
        self.assertNotIn(Allow.BOOLEAN, allow)
        self.assertNotIn(Allow.NULL, allow)
        self.assertIn(Allow.NAN, allow)
        self.assertEqual(Allow.STRING.subtracting(Allow.NUMBER), Allow.STRING)
        self.assertIsInstance(allow, Allow)

    def test_flags_are_commutative(self):
        """Order of combination does not matter."""
        self.assertEqual(Allow.STRING | Allow.NUMBER, Allow.NUMBER | Allow.STRING)

    def test_from_names(self):
        """from_names() accepts member names in any case."""
        allow = Allow.from_names(["string", "Array", "negative-infinity"])
        self.assertEqual(allow, Allow.STRING | Allow.ARRAY | Allow.NEGATIVE_INFINITY)
        self.assertEqual(Allow.from_names(["all_except_numbers"]), Allow.ALL_EXCEPT_NUMBERS)
        self.assertEqual(Allow.from_names([]), Allow.NONE)

    def test_from_names_unknown(self):
        """Unknown names are rejected."""
        with self.assertRaises(ValueError) as cm:
            Allow.from_names(["strings"])
        self.assertIn("strings", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
