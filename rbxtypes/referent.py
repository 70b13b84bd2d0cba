"""Optional, universally unique references to instances."""

from __future__ import annotations

import re
import secrets
from typing import Any

_MAX = (1 << 128) - 1
_HEX = re.compile(r"\+?[0-9a-fA-F]+")


def _parse_hex(text: str) -> int:
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {text!r}")
    if not _HEX.fullmatch(text):
        raise ValueError(f"invalid hexadecimal referent: {text!r}")
    value = int(text, 16)
    if value > _MAX:
        raise ValueError(f"referent too large to fit in 128 bits: {text!r}")
    return value


class Ref:
    """A 128-bit reference to an instance; zero means it points to nothing."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"referent must be an integer, got {value!r}")
        if not 0 <= value <= _MAX:
            raise ValueError(f"referent must fit in 128 unsigned bits, got {value}")
        self._value = value

    @classmethod
    def new(cls) -> Ref:
        """Generate a new random, non-empty Ref."""
        while True:
            value = secrets.randbits(128)
            if value:
                return cls(value)

    @classmethod
    def none(cls) -> Ref:
        """A Ref that points to nothing."""
        return cls(0)

    def is_some(self) -> bool:
        return self._value != 0

    def is_none(self) -> bool:
        return self._value == 0

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return format(self._value, "032x")

    @classmethod
    def from_str(cls, text: str) -> Ref:
        """Parse a hexadecimal referent; zero yields a Ref to nothing."""
        return cls(_parse_hex(text))

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, data: Any) -> Ref:
        return cls.from_str(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Ref, self._value))

    def __repr__(self) -> str:
        return f"Ref({self})" if self.is_some() else "Ref(none)"