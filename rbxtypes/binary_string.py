"""Container for untyped binary data."""

from __future__ import annotations

import base64
import binascii
from typing import Any


class BinaryString(bytes):
    """Untyped binary data, used where no stronger type interprets the bytes."""

    def to_json(self) -> str:
        return base64.b64encode(self).decode("ascii")

    @classmethod
    def from_json(cls, data: Any) -> BinaryString:
        if not isinstance(data, str):
            raise TypeError("expected a base64-encoded string")
        try:
            return cls(base64.b64decode(data, validate=True))
        except binascii.Error as exc:
            raise ValueError(f"invalid base64 data: {exc}") from exc

    def __repr__(self) -> str:
        return f"BinaryString({bytes(self)!r})"