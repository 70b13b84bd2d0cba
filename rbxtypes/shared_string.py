"""Deduplicated binary data for values that are commonly repeated."""

from __future__ import annotations

import hashlib
import threading
import weakref
from dataclasses import dataclass
from typing import Any

_DIGEST_SIZE = 32


class _Buffer:
    """Holder for the shared bytes; weakly referenced by the cache."""

    __slots__ = ("data", "__weakref__")

    def __init__(self, data: bytes) -> None:
        self.data = data


_CACHE: weakref.WeakValueDictionary[bytes, _Buffer] = weakref.WeakValueDictionary()
_LOCK = threading.Lock()


def _digest(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=_DIGEST_SIZE).digest()


@dataclass(frozen=True, order=True)
class SharedStringHash:
    """The 32-byte content hash identifying a SharedString's data."""

    digest: bytes

    def as_bytes(self) -> bytes:
        return self.digest

    def __repr__(self) -> str:
        return f"SharedStringHash({self.digest.hex()})"


class SharedString:
    """Binary data that is deduplicated as it is loaded.

    Every SharedString built from equal bytes shares a single buffer for as
    long as any of them is alive; the buffer leaves the cache once the last
    one is gone.
    """

    __slots__ = ("_buffer", "_hash")

    def __init__(self, data: Any) -> None:
        data = bytes(data)
        digest = _digest(data)
        with _LOCK:
            buffer = _CACHE.get(digest)
            if buffer is None:
                buffer = _Buffer(data)
                _CACHE[digest] = buffer
        self._buffer = buffer
        self._hash = SharedStringHash(digest)

    def data(self) -> bytes:
        return self._buffer.data

    def hash(self) -> SharedStringHash:
        return self._hash

    def __bytes__(self) -> bytes:
        return self._buffer.data

    def __len__(self) -> int:
        return len(self._buffer.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharedString):
            return NotImplemented
        return self._hash == other._hash

    def __hash__(self) -> int:
        return hash((SharedString, self._hash.digest))

    def __repr__(self) -> str:
        return f"SharedString({self._buffer.data!r})"