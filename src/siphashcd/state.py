from __future__ import annotations

from typing import Tuple

_MASK_64 = 0xFFFFFFFFFFFFFFFF


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def sip_round(v0: int, v1: int, v2: int, v3: int) -> Tuple[int, int, int, int]:
    """Apply one SipRound to the four lanes and return the new lanes."""
    v0 = (v0 + v1) & _MASK_64
    v2 = (v2 + v3) & _MASK_64
    v1 = _rotl(v1, 13)
    v3 = _rotl(v3, 16)
    v1 ^= v0
    v3 ^= v2
    v0 = _rotl(v0, 32)

    v2 = (v2 + v1) & _MASK_64
    v0 = (v0 + v3) & _MASK_64
    v1 = _rotl(v1, 17)
    v3 = _rotl(v3, 21)
    v1 ^= v2
    v3 ^= v0
    v2 = _rotl(v2, 32)

    return v0, v1, v2, v3


class State:
    """
    The four-lane SipHash state for fixed ``c`` and ``d`` round counts.

    The lanes only change through compression, finalization and the
    128-bit tweak. ``copy()`` gives an independent state, which lets a
    caller finalize without touching the live one.
    """

    __slots__ = ("c", "d", "v")

    def __init__(self, k0: int, k1: int, c: int = 2, d: int = 4):
        self.c = c
        self.d = d
        self.v = [
            k0 ^ 0x736F6D6570736575,
            k1 ^ 0x646F72616E646F6D,
            k0 ^ 0x6C7967656E657261,
            k1 ^ 0x7465646279746573,
        ]

    def copy(self) -> "State":
        dup = self.__class__.__new__(self.__class__)
        dup.c = self.c
        dup.d = self.d
        dup.v = list(self.v)
        return dup

    def compress_chunk(self, m: int) -> None:
        self.v[3] ^= m
        self._rounds(self.c)
        self.v[0] ^= m

    def finalize(self, lane: int, constant: int) -> int:
        # lane 2 / 0xFF for 64-bit output; 2 / 0xEE then 1 / 0xDD for 128-bit
        if lane not in (1, 2):
            raise ValueError(f"finalization lane must be 1 or 2, got {lane}")
        self.v[lane] ^= constant
        self._rounds(self.d)
        v0, v1, v2, v3 = self.v
        return v0 ^ v1 ^ v2 ^ v3

    def apply_128_bit_tweak(self) -> None:
        self.v[1] ^= 0xEE

    def _rounds(self, count: int) -> None:
        v0, v1, v2, v3 = self.v
        for _ in range(count):
            v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
        self.v = [v0, v1, v2, v3]


__all__ = ["State", "sip_round"]
