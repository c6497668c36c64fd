from __future__ import annotations

from typing import Any

from .key import SipHashKey
from .siphash import SipHash64


def _encode(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Unsupported type for column hashing: {type(value)!r}")


def _hash_values(values, key: Any, c: int, d: int):
    # convert the key once for the whole column
    key_halves = SipHashKey.from_key(key)
    return [SipHash64.hash(key_halves, _encode(val), c=c, d=d) for val in values]


def hash_pandas_series(series: Any, key: Any, c: int = 2, d: int = 4):
    """
    Hash a pandas Series of bytes or str values into a uint64 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, key, c, d)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint64")


def hash_arrow_array(array: Any, key: Any, c: int = 2, d: int = 4):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    values = (val.as_py() if hasattr(val, "as_py") else val for val in arr)
    return pa.array(_hash_values(values, key, c, d), type=pa.uint64())


def hash_polars_series(series: Any, key: Any, c: int = 2, d: int = 4):
    """
    Hash a polars Series of bytes or str values into a UInt64 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser, key, c, d)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
