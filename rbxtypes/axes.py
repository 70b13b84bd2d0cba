"""A set of zero or more 3D axes."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator


class Axes:
    """Represents a set of zero or more of the X, Y and Z axes."""

    __slots__ = ("_flags",)

    _NAMES: ClassVar[tuple[tuple[str, int], ...]] = (("X", 1), ("Y", 2), ("Z", 4))
    _ALL_BITS: ClassVar[int] = 7

    X: ClassVar[Axes]
    Y: ClassVar[Axes]
    Z: ClassVar[Axes]

    def __init__(self, bits: int = 0) -> None:
        if not isinstance(bits, int) or bits < 0 or bits & ~self._ALL_BITS:
            raise ValueError(f"invalid axes bitmask: {bits!r}")
        self._flags = bits

    @classmethod
    def empty(cls) -> Axes:
        return cls(0)

    @classmethod
    def all(cls) -> Axes:
        return cls(cls._ALL_BITS)

    def contains(self, other: Axes) -> bool:
        return self._flags & other._flags == other._flags

    def bits(self) -> int:
        return self._flags

    @classmethod
    def from_bits(cls, bits: int) -> Axes | None:
        """Build from a bitmask, or return None if it holds unknown bits."""
        if not isinstance(bits, int) or bits < 0 or bits & ~cls._ALL_BITS:
            return None
        return cls(bits)

    def _names(self) -> Iterator[str]:
        return (name for name, bit in self._NAMES if self._flags & bit)

    def to_json(self) -> list[str]:
        return list(self._names())

    @classmethod
    def from_json(cls, data: Any) -> Axes:
        if not isinstance(data, (list, tuple)):
            raise TypeError("expected a list of strings representing axes")
        lookup = dict(cls._NAMES)
        flags = 0
        for name in data:
            if not isinstance(name, str):
                raise TypeError("expected a list of strings representing axes")
            try:
                flags |= lookup[name]
            except KeyError:
                raise ValueError(f"invalid axis '{name}'") from None
        return cls(flags)

    def __or__(self, other: object) -> Axes:
        if not isinstance(other, Axes):
            return NotImplemented
        return Axes(self._flags | other._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Axes):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash((Axes, self._flags))

    def __repr__(self) -> str:
        return f"Axes({', '.join(self._names())})"


Axes.X = Axes(1)
Axes.Y = Axes(2)
Axes.Z = Axes(4)