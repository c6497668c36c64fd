from __future__ import annotations

import struct
from typing import Iterator

_WORD = struct.Struct("<Q")


def bytes_to_u64(block) -> int:
    """Decode exactly 8 bytes as a little-endian unsigned 64-bit word."""
    return _WORD.unpack(block)[0]


def padding_word(remainder, total_length: int) -> int:
    """
    Build the final message word.

    The 0-7 remainder bytes are left-aligned in a zeroed block and byte 7
    holds the total message length modulo 256.
    """
    if len(remainder) > 7:
        raise ValueError(f"remainder must be shorter than 8 bytes, got {len(remainder)}")
    block = bytearray(8)
    block[: len(remainder)] = remainder
    block[7] = total_length & 0xFF
    return _WORD.unpack(block)[0]


class MessageChunks:
    """
    Lazy, single-pass iterator over the 64-bit words of a message.

    Yields one little-endian word per full 8-byte group, then exactly one
    padding word (see ``padding_word``), even when the message length is a
    multiple of 8. Once exhausted it stays exhausted.
    """

    __slots__ = ("_message", "_length", "_offset", "_done")

    def __init__(self, message):
        self._message = memoryview(message).cast("B")
        self._length = len(self._message)
        self._offset = 0
        self._done = False

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._done:
            raise StopIteration
        start = self._offset
        if start + 8 <= self._length:
            self._offset = start + 8
            return _WORD.unpack_from(self._message, start)[0]
        self._done = True
        return padding_word(self._message[start:], self._length)


__all__ = ["MessageChunks", "bytes_to_u64", "padding_word"]
