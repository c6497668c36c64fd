from __future__ import annotations

from .chunker import bytes_to_u64, padding_word


class Residue:
    """
    Up to 8 bytes of not-yet-compressed input plus the running input length.

    ``total_length`` counts every byte fed since construction; ``clear()``
    empties the buffer but keeps it.
    """

    __slots__ = ("data", "length", "total_length")

    def __init__(self):
        self.data = bytearray(8)
        self.length = 0
        self.total_length = 0

    def copy(self) -> "Residue":
        dup = self.__class__.__new__(self.__class__)
        dup.data = bytearray(self.data)
        dup.length = self.length
        dup.total_length = self.total_length
        return dup

    def push_byte(self, x: int) -> None:
        if self.length >= 8:
            raise OverflowError("residue is full")
        self.data[self.length] = x
        self.length += 1

    def push(self, data) -> int:
        """Copy bytes from the start of ``data`` until full; return how many were taken."""
        taken = min(8 - self.length, len(data))
        self.data[self.length : self.length + taken] = data[:taken]
        self.length += taken
        return taken

    def is_full(self) -> bool:
        return self.length == 8

    def clear(self) -> None:
        self.data = bytearray(8)
        self.length = 0

    def word(self) -> int:
        return bytes_to_u64(self.data)

    def padded_word(self) -> int:
        return padding_word(self.data[: self.length], self.total_length)


__all__ = ["Residue"]
