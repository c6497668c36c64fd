from __future__ import annotations

import struct
from typing import Any, NamedTuple

from .exceptions import KeyTooShort

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_KEY = struct.Struct("<QQ")


def _check_half(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _MASK_64:
        raise ValueError(f"{name} must fit in 64 unsigned bits")
    return value


class SipHashKey(NamedTuple):
    """The two 64-bit halves of a 128-bit SipHash key."""

    k0: int
    k1: int

    @classmethod
    def from_key(cls, key: Any) -> "SipHashKey":
        """
        Convert user key material into key halves.

        Accepted forms:
        - a ``(k0, k1)`` pair of unsigned 64-bit integers
        - bytes, bytearray or memoryview of at least 16 bytes; only the
          first 16 are used, each half read little-endian
        - an unsigned 128-bit integer; ``k0`` is the high half
        - an existing ``SipHashKey``

        Raises:
            KeyTooShort: If bytes-like key material is shorter than 16 bytes
            TypeError: If the key is of an unsupported type
            ValueError: If an integer key or half is out of range
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, (bytes, bytearray, memoryview)):
            raw = memoryview(key).cast("B")
            if len(raw) < 16:
                raise KeyTooShort(len(raw))
            return cls(*_KEY.unpack_from(raw))
        if isinstance(key, tuple) and len(key) == 2:
            return cls(_check_half(key[0], "k0"), _check_half(key[1], "k1"))
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < 1 << 128:
                raise ValueError("integer key must fit in 128 unsigned bits")
            return cls(key >> 64, key & _MASK_64)
        raise TypeError(
            f"key must be bytes-like, an int or a (k0, k1) pair, got {type(key).__name__}"
        )


__all__ = ["SipHashKey"]
