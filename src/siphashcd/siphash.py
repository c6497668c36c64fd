from __future__ import annotations

import struct
from typing import Any, Optional

from .chunker import MessageChunks
from .key import SipHashKey
from .residue import Residue
from .state import State

_WORD = struct.Struct("<Q")


def _check_rounds(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative int, got {value!r}")
    return value


def _as_view(data: Any) -> memoryview:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return memoryview(data).cast("B")


class _SipHashBase:
    """
    Shared feed/finish machinery for SipHash-c-d.

    Subclasses fix the output width through ``_prepare`` (run once on a
    fresh state) and ``_finalize`` (run on a fully compressed state).
    """

    c = 2
    d = 4
    digest_size = 8
    block_size = 8

    def __init__(
        self,
        key: Any,
        data: bytes = b"",
        c: Optional[int] = None,
        d: Optional[int] = None,
    ):
        self._state = self._new_state(key, c, d)
        self.c = self._state.c
        self.d = self._state.d
        self._residue = Residue()
        if data:
            self.update(data)

    @classmethod
    def _new_state(cls, key: Any, c: Optional[int], d: Optional[int]) -> State:
        c = _check_rounds(cls.c if c is None else c, "c")
        d = _check_rounds(cls.d if d is None else d, "d")
        k0, k1 = SipHashKey.from_key(key)
        state = State(k0, k1, c, d)
        cls._prepare(state)
        return state

    @classmethod
    def hash(
        cls,
        key: Any,
        message: bytes,
        c: Optional[int] = None,
        d: Optional[int] = None,
    ) -> int:
        """Hash a whole message in one call."""
        view = _as_view(message)
        state = cls._new_state(key, c, d)
        for word in MessageChunks(view):
            state.compress_chunk(word)
        return cls._finalize(state)

    @property
    def name(self) -> str:
        return f"siphash-{self.c}-{self.d}"

    def copy(self):
        dup = self.__class__.__new__(self.__class__)
        dup._state = self._state.copy()
        dup._residue = self._residue.copy()
        dup.c = self.c
        dup.d = self.d
        return dup

    def update(self, data: bytes):
        view = _as_view(data)
        if not view:
            return self

        residue = self._residue
        residue.total_length += len(view)
        offset = residue.push(view)
        if not residue.is_full():
            return self

        state = self._state
        state.compress_chunk(residue.word())
        residue.clear()

        aligned_end = offset + (len(view) - offset) // 8 * 8
        for idx in range(offset, aligned_end, 8):
            state.compress_chunk(_WORD.unpack_from(view, idx)[0])

        # fewer than 8 bytes remain, so this cannot fill the residue again
        residue.push(view[aligned_end:])
        return self

    def finish(self) -> int:
        """Return the digest of everything fed so far without consuming it."""
        state = self._state.copy()
        state.compress_chunk(self._residue.padded_word())
        return self._finalize(state)

    def intdigest(self) -> int:
        return self.finish()

    def digest(self) -> bytes:
        return self.finish().to_bytes(self.digest_size, byteorder="little")

    def hexdigest(self) -> str:
        return self.digest().hex()

    @staticmethod
    def _prepare(state: State) -> None:
        raise NotImplementedError

    @staticmethod
    def _finalize(state: State) -> int:
        raise NotImplementedError


class SipHash64(_SipHashBase):
    """
    SipHash-c-d with a 64-bit output and a hashlib-style streaming API.

    ``c`` and ``d`` default to 2 and 4 and are fixed for the lifetime of
    the hasher.
    """

    digest_size = 8

    @staticmethod
    def _prepare(state: State) -> None:
        pass

    @staticmethod
    def _finalize(state: State) -> int:
        return state.finalize(2, 0xFF)


class SipHash128(_SipHashBase):
    """SipHash-c-d with a 128-bit output."""

    digest_size = 16

    @property
    def name(self) -> str:
        return f"siphash-{self.c}-{self.d}-128"

    @staticmethod
    def _prepare(state: State) -> None:
        state.apply_128_bit_tweak()

    @staticmethod
    def _finalize(state: State) -> int:
        low = state.finalize(2, 0xEE)
        high = state.finalize(1, 0xDD)
        return high << 64 | low


class SipHash24(SipHash64):
    """SipHash-2-4, 64-bit output."""

    c = 2
    d = 4


class SipHash48(SipHash64):
    """SipHash-4-8, 64-bit output."""

    c = 4
    d = 8


_WIDTHS = {64: SipHash64, 128: SipHash128}


def siphash(
    key: Any, message: bytes, c: int = 2, d: int = 4, digest_bits: int = 64
) -> int:
    """
    One-shot SipHash-c-d of ``message``.

    Args:
        key: 16+ bytes, an unsigned 128-bit int or a (k0, k1) pair
        message: Bytes-like message
        c: Compression rounds per message word
        d: Finalization rounds
        digest_bits: 64 or 128

    Returns:
        The digest as an unsigned integer.

    Raises:
        KeyTooShort: If a bytes-like key is shorter than 16 bytes
        ValueError: If digest_bits or a round count is invalid
        TypeError: If key or message has an unsupported type
    """
    try:
        hasher_cls = _WIDTHS[digest_bits]
    except KeyError:
        raise ValueError(f"digest_bits must be 64 or 128, got {digest_bits!r}") from None
    return hasher_cls.hash(key, message, c=c, d=d)


def siphash24(key: Any, data: bytes = b"") -> SipHash24:
    """Convenience constructor matching hashlib-style usage."""
    return SipHash24(key, data)


def siphash48(key: Any, data: bytes = b"") -> SipHash48:
    """Convenience constructor matching hashlib-style usage."""
    return SipHash48(key, data)


def siphash128(key: Any, data: bytes = b"", c: int = 2, d: int = 4) -> SipHash128:
    """Convenience constructor for the 128-bit variant."""
    return SipHash128(key, data, c=c, d=d)


__all__ = [
    "SipHash64",
    "SipHash128",
    "SipHash24",
    "SipHash48",
    "siphash",
    "siphash24",
    "siphash48",
    "siphash128",
]
