"""A set of zero or more faces of a cube."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator


class Faces:
    """Represents a set of zero or more faces of a cube."""

    __slots__ = ("_flags",)

    _NAMES: ClassVar[tuple[tuple[str, int], ...]] = (
        ("Right", 1),
        ("Top", 2),
        ("Back", 4),
        ("Left", 8),
        ("Bottom", 16),
        ("Front", 32),
    )
    _ALL_BITS: ClassVar[int] = 63

    RIGHT: ClassVar[Faces]
    TOP: ClassVar[Faces]
    BACK: ClassVar[Faces]
    LEFT: ClassVar[Faces]
    BOTTOM: ClassVar[Faces]
    FRONT: ClassVar[Faces]

    def __init__(self, bits: int = 0) -> None:
        if not isinstance(bits, int) or bits < 0 or bits & ~self._ALL_BITS:
            raise ValueError(f"invalid faces bitmask: {bits!r}")
        self._flags = bits

    @classmethod
    def empty(cls) -> Faces:
        return cls(0)

    @classmethod
    def all(cls) -> Faces:
        return cls(cls._ALL_BITS)

    def contains(self, other: Faces) -> bool:
        return self._flags & other._flags == other._flags

    def bits(self) -> int:
        return self._flags

    @classmethod
    def from_bits(cls, bits: int) -> Faces | None:
        """Build from a bitmask, or return None if it holds unknown bits."""
        if not isinstance(bits, int) or bits < 0 or bits & ~cls._ALL_BITS:
            return None
        return cls(bits)

    def _names(self) -> Iterator[str]:
        return (name for name, bit in self._NAMES if self._flags & bit)

    def to_json(self) -> list[str]:
        return list(self._names())

    @classmethod
    def from_json(cls, data: Any) -> Faces:
        if not isinstance(data, (list, tuple)):
            raise TypeError("expected a list of strings representing faces")
        lookup = dict(cls._NAMES)
        flags = 0
        for name in data:
            if not isinstance(name, str):
                raise TypeError("expected a list of strings representing faces")
            try:
                flags |= lookup[name]
            except KeyError:
                raise ValueError(f"invalid face '{name}'") from None
        return cls(flags)

    def __or__(self, other: object) -> Faces:
        if not isinstance(other, Faces):
            return NotImplemented
        return Faces(self._flags | other._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Faces):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash((Faces, self._flags))

    def __repr__(self) -> str:
        return f"Faces({', '.join(self._names())})"


Faces.RIGHT = Faces(1)
Faces.TOP = Faces(2)
Faces.BACK = Faces(4)
Faces.LEFT = Faces(8)
Faces.BOTTOM = Faces(16)
Faces.FRONT = Faces(32)