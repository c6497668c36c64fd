"""
Pure-Python SipHash-c-d with 64-bit and 128-bit outputs.
"""

from .exceptions import KeyTooShort, SipError
from .key import SipHashKey
from .siphash import (
    SipHash24,
    SipHash48,
    SipHash64,
    SipHash128,
    siphash,
    siphash24,
    siphash48,
    siphash128,
)
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "KeyTooShort",
    "SipError",
    "SipHashKey",
    "SipHash24",
    "SipHash48",
    "SipHash64",
    "SipHash128",
    "siphash",
    "siphash24",
    "siphash48",
    "siphash128",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
