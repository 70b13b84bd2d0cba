"""A sorted collection of named attribute values."""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Iterable, Iterator, Mapping

from .attribute_codec import read_attributes, write_attributes
from .variant import Variant


def _check_entry(key: Any, value: Any) -> tuple[str, Variant]:
    if not isinstance(key, str):
        raise TypeError(f"attribute names must be strings, got {key!r}")
    if not isinstance(value, Variant):
        raise TypeError(f"attribute values must be Variants, got {value!r}")
    return key, value


class Attributes:
    """Named attribute values, kept in name order."""

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[str, Variant] | Iterable[tuple[str, Variant]] | None = None,
    ) -> None:
        self._data: dict[str, Variant] = {}
        if data is None:
            return
        pairs = data.items() if isinstance(data, Mapping) else data
        for key, value in pairs:
            key, value = _check_entry(key, value)
            self._data[key] = value

    @classmethod
    def from_reader(cls, reader: BinaryIO | bytes | bytearray | memoryview) -> Attributes:
        """Read attributes from a binary stream or a bytes-like blob."""
        if isinstance(reader, (bytes, bytearray, memoryview)):
            reader = io.BytesIO(bytes(reader))
        return cls(read_attributes(reader))

    def to_writer(self, writer: BinaryIO) -> None:
        """Write the attributes in their binary form to a stream."""
        write_attributes(self._data, writer)

    def get(self, key: str) -> Variant | None:
        return self._data.get(key)

    def insert(self, key: str, value: Variant) -> Variant | None:
        """Set an attribute and return the value it replaced, if any."""
        key, value = _check_entry(key, value)
        previous = self._data.get(key)
        self._data[key] = value
        return previous

    def with_attribute(self, key: str, value: Any) -> Attributes:
        """Set an attribute, converting plain values to Variants; returns self."""
        self.insert(key, Variant.of(value))
        return self

    def remove(self, key: str) -> Variant | None:
        """Remove an attribute and return its value, if it existed."""
        return self._data.pop(key, None)

    def __iter__(self) -> Iterator[tuple[str, Variant]]:
        """Iterate over (name, value) pairs in name order."""
        return iter(sorted(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def to_json(self) -> dict[str, Any]:
        return {key: value.to_json() for key, value in self}

    @classmethod
    def from_json(cls, data: Any) -> Attributes:
        if not isinstance(data, dict):
            raise TypeError("expected an object of attributes")
        return cls((key, Variant.from_json(value)) for key, value in data.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Attributes({dict(sorted(self._data.items()))!r})"