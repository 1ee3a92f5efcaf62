"""32-bit one-at-a-time hashing and a string that carries its hash."""

from __future__ import annotations

from dataclasses import dataclass, field

_MASK32 = 0xFFFFFFFF


def jenkins_hash(text: str | bytes) -> int:
    """Return the Jenkins one-at-a-time hash of text as an unsigned 32-bit int.

    Text is hashed as UTF-8; bytes above 0x7F count as signed values.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = 0
    for byte in data:
        signed = byte - 0x100 if byte >= 0x80 else byte
        value = (value + signed) & _MASK32
        value = (value + (value << 10)) & _MASK32
        value ^= value >> 6
    if not data:
        return 0
    value = (value + (value << 3)) & _MASK32
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK32
    return value


@dataclass(eq=False)
class HashedString:
    """A string together with its hash; two of them are equal when their hashes are."""

    text: str = ""
    hash: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.rehash()

    def rehash(self) -> None:
        """Recompute the hash after the text has changed."""
        self.hash = jenkins_hash(self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashedString):
            return NotImplemented
        return self.hash == other.hash

    def __hash__(self) -> int:
        return self.hash

    def __str__(self) -> str:
        return self.text