"""
Tolerance options for partial JSON parsing.

Each flag allows one JSON category to be accepted in an incomplete form.
Flags combine with the usual bitwise operators and any subset is valid,
including ``Allow.NONE`` which rejects truncation everywhere.
"""

from collections.abc import Iterable
from enum import IntFlag


class Allow(IntFlag):
    """Which JSON categories may be returned when truncated."""

    NONE = 0

    # "hello \u12 -> "hello "
    STRING = 1 << 0
    # 123. -> 123.0
    NUMBER = 1 << 1
    # [1, 2, -> [1, 2]
    ARRAY = 1 << 2
    # {"a": 1, "b": -> {"a": 1}
    OBJECT = 1 << 3
    # nu -> None
    NULL = 1 << 4
    # tr -> True, fa -> False
    BOOLEAN = 1 << 5
    # Na -> nan
    NAN = 1 << 6
    # Inf -> inf
    INFINITY = 1 << 7
    # -Inf -> -inf
    NEGATIVE_INFINITY = 1 << 8

    ALL_INFINITY = INFINITY | NEGATIVE_INFINITY
    SPECIAL = NULL | BOOLEAN | NAN | ALL_INFINITY
    ATOMIC = STRING | NUMBER | SPECIAL
    COLLECTIONS = ARRAY | OBJECT
    ALL = ATOMIC | COLLECTIONS
    ALL_EXCEPT_NUMBERS = STRING | SPECIAL | COLLECTIONS

    def contains(self, flags: "Allow") -> bool:
        """Return True if every flag in ``flags`` is enabled."""
        return (int(self) & int(flags)) == int(flags)

    def subtracting(self, flags: "Allow") -> "Allow":
        """Return a copy with ``flags`` removed."""
        return self.__class__(int(self) & ~int(flags))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Allow":
        """Build a flag set from member names such as ``"string"`` or ``"all"``."""
        result = cls.NONE
        for name in names:
            key = name.strip().upper().replace("-", "_")
            try:
                result |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown partial option: {name!r}") from None
        return result
