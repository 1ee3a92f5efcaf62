"""Lookup of hashed entries in a flat binary blob.

The blob begins with an 8-byte header whose second 32-bit word is the total
size of the blob. Entries follow, each an 8-byte header (key hash, payload
size) and then the payload. All integers are little-endian.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator

from gamesys.hashed_string import HashedString, jenkins_hash

_ENTRY = struct.Struct("<II")
_INT32 = struct.Struct("<i")


def _key_hash(key: str | HashedString) -> int:
    if isinstance(key, HashedString):
        return key.hash
    return jenkins_hash(key)


class BinaryStruct:
    """A read-only view of hashed entries stored in a binary blob."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = bytes(data)

    @classmethod
    def from_file(cls, file_name: str | os.PathLike[str]) -> BinaryStruct:
        """Load the blob from a file."""
        with open(file_name, "rb") as stream:
            return cls(stream.read())

    def _entries(self) -> Iterator[tuple[int, int, int]]:
        """Yield (hash, payload offset, payload size) for each entry."""
        if not self.data:
            return
        if len(self.data) < _ENTRY.size:
            raise ValueError("binary struct is shorter than its header")
        _, total = _ENTRY.unpack_from(self.data, 0)
        if total > len(self.data):
            raise ValueError(
                f"binary struct declares {total} bytes but holds {len(self.data)}"
            )
        position = _ENTRY.size
        while position + _ENTRY.size <= total:
            entry_hash, size = _ENTRY.unpack_from(self.data, position)
            position += _ENTRY.size
            yield entry_hash, position, size
            if position + size >= total:
                break
            position += size

    def get_raw(self, key: str | HashedString) -> bytes:
        """Return the payload stored under key; raise KeyError if there is none."""
        wanted = _key_hash(key)
        for entry_hash, offset, size in self._entries():
            if entry_hash == wanted:
                return self.data[offset:offset + size]
        raise KeyError(str(key))

    def get_int32(self, key: str | HashedString) -> int:
        """Return the signed 32-bit integer stored under key."""
        raw = self.get_raw(key)
        if len(raw) < _INT32.size:
            raise ValueError(f"entry {str(key)!r} is too short for an integer")
        return _INT32.unpack_from(raw, 0)[0]

    def get_string(self, key: str | HashedString) -> str:
        """Return the NUL-terminated UTF-8 string stored under key."""
        raw = self.get_raw(key)
        return raw.split(b"\0", 1)[0].decode("utf-8")