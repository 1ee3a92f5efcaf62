"""Simple byte-shifting ciphers.

All functions work on bytes; every byte wraps around modulo 256.
"""

from __future__ import annotations

import random
from itertools import islice
from typing import Sequence

_OFFSET_RANGE = 10


def caesar_encrypt(data: bytes, offset: int) -> bytes:
    """Shift every byte up by offset."""
    return bytes((b + offset) & 0xFF for b in data)


def caesar_decrypt(data: bytes, offset: int) -> bytes:
    """Shift every byte down by offset."""
    return bytes((b - offset) & 0xFF for b in data)


def _moving(data: bytes, offset: int, limit: int, sign: int) -> bytes:
    out = bytearray()
    step = 0
    for b in data:
        out.append((b + sign * (offset + step)) & 0xFF)
        step += 1
        if step >= limit:
            step = 0
    return bytes(out)


def caesar_moving_encrypt(data: bytes, offset: int, limit: int) -> bytes:
    """Shift bytes up by offset plus a step that counts 0..limit-1 and repeats."""
    return _moving(data, offset, limit, 1)


def caesar_moving_decrypt(data: bytes, offset: int, limit: int) -> bytes:
    """Undo caesar_moving_encrypt."""
    return _moving(data, offset, limit, -1)


def _encrypt_byte(byte: int, magic_value: int, rng: random.Random) -> tuple[int, int]:
    """Shift byte by magic_value plus a random 0..9 so that it stays below 0x80."""
    if not any((byte + r + magic_value) & 0xFF < 0x80 for r in range(_OFFSET_RANGE)):
        raise ValueError(
            f"byte 0x{byte:02x} cannot be shifted below 0x80 with magic value {magic_value}"
        )
    while True:
        r = rng.randrange(_OFFSET_RANGE)
        shifted = (byte + r + magic_value) & 0xFF
        if shifted < 0x80:
            return shifted, r


def caesar_random_encrypt(
    data: bytes, magic_value: int, rng: random.Random | None = None
) -> tuple[bytes, list[int]]:
    """Shift each byte by magic_value plus a random offset; return (cipher, offsets)."""
    rng = rng or random.Random()
    out = bytearray()
    offsets: list[int] = []
    for b in data:
        shifted, r = _encrypt_byte(b, magic_value, rng)
        out.append(shifted)
        offsets.append(r)
    return bytes(out), offsets


def caesar_random_decrypt(data: bytes, offsets: Sequence[int], magic_value: int) -> bytes:
    """Undo caesar_random_encrypt with the offsets it returned."""
    if len(data) != len(offsets):
        raise ValueError("data and offsets differ in length")
    return bytes((b - off - magic_value) & 0xFF for b, off in zip(data, offsets))


def caesar_random_encrypt_with_filling(
    data: bytes, magic_value: int, filling_count: int, rng: random.Random | None = None
) -> tuple[bytes, list[int]]:
    """Encrypt like caesar_random_encrypt, following each byte with random filler.

    Every input byte becomes filling_count output bytes: the shifted byte
    and filling_count - 1 random bytes in 33..254.
    """
    if filling_count < 1:
        raise ValueError("filling_count must be at least 1")
    rng = rng or random.Random()
    out = bytearray()
    offsets: list[int] = []
    for b in data:
        shifted, r = _encrypt_byte(b, magic_value, rng)
        out.append(shifted)
        offsets.append(r)
        for _ in range(filling_count - 1):
            out.append(rng.randrange(222) + 33)
            offsets.append(rng.randrange(_OFFSET_RANGE))
    return bytes(out), offsets


def caesar_random_decrypt_with_filling(
    data: bytes, offsets: Sequence[int], magic_value: int, filling_count: int
) -> bytes:
    """Undo caesar_random_encrypt_with_filling, dropping the filler bytes."""
    if filling_count < 1:
        raise ValueError("filling_count must be at least 1")
    if len(data) != len(offsets):
        raise ValueError("data and offsets differ in length")
    pairs = islice(zip(data, offsets), 0, None, filling_count)
    return bytes((b - off - magic_value) & 0xFF for b, off in pairs)


def invert_bits(data: bytes) -> bytes:
    """Flip every bit of every byte."""
    return bytes(b ^ 0xFF for b in data)