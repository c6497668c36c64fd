from __future__ import annotations


class SipError(ValueError):
    """Base class for errors raised while preparing a SipHash computation."""


class KeyTooShort(SipError):
    """The key material holds fewer than the 16 bytes SipHash needs."""

    def __init__(self, actual_length: int):
        self.actual_length = actual_length
        super().__init__(
            f"SipHash key must be at least 16 bytes, got {actual_length}"
        )


__all__ = ["SipError", "KeyTooShort"]
