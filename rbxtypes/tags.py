"""A list of tags that can be applied to an instance."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Tags:
    """An ordered list of tags; duplicates are allowed."""

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[str] | None = None) -> None:
        self._members: list[str] = list(members) if members is not None else []

    def push(self, tag: str) -> None:
        self._members.append(tag)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    @classmethod
    def decode(cls, buf: bytes) -> Tags:
        """Decode tags from NUL-delimited UTF-8 names, skipping empty ones."""
        return cls(part.decode("utf-8") for part in bytes(buf).split(b"\0") if part)

    def encode(self) -> bytes:
        """Encode tags by joining them with NUL bytes."""
        return "\0".join(self._members).encode("utf-8")

    def to_json(self) -> list[str]:
        return list(self._members)

    @classmethod
    def from_json(cls, data: Any) -> Tags:
        if not isinstance(data, (list, tuple)) or not all(isinstance(t, str) for t in data):
            raise TypeError("expected a list of strings")
        return cls(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tags({self._members!r})"