"""A reference to a Roblox asset."""

from __future__ import annotations

from typing import Any


class Content(str):
    """A reference to an asset; behaves as the URL string it holds."""

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, data: Any) -> Content:
        if not isinstance(data, str):
            raise TypeError("expected a string")
        return cls(data)

    def __repr__(self) -> str:
        return f"Content({str(self)!r})"