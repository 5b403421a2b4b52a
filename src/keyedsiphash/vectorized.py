from __future__ import annotations

from typing import Any, Callable

from .siphash import hash64, split_key


def _message_hasher(key: bytes) -> Callable[[Any], int]:
    # Null entries (None, pandas NA, arrow null) are not bytes-like: TypeError.
    k0, k1 = split_key(key)

    def hash_value(value: Any) -> int:
        if isinstance(value, str):
            value = value.encode("utf-8")
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Column values must be bytes or str, got {type(value)!r}"
            )
        return hash64(k0, k1, value)

    return hash_value


def hash_pandas_series(series: Any, key: bytes):
    """
    Hash a pandas Series of bytes/str values into a uint64 Series.

    Null entries raise TypeError.
    """
    hash_value = _message_hasher(key)
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = [hash_value(val) for val in series]
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint64")


def hash_arrow_array(array: Any, key: bytes):
    """
    Hash a pyarrow Array (or values coercible to one) of binary/string values
    into a uint64 Array.

    Null entries raise TypeError.
    """
    hash_value = _message_hasher(key)
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = [
        hash_value(val.as_py() if hasattr(val, "as_py") else val) for val in arr
    ]
    return pa.array(hashes, type=pa.uint64())


def hash_polars_series(series: Any, key: bytes):
    """
    Hash a polars Series of binary/string values into a UInt64 Series.

    Null entries raise TypeError.
    """
    hash_value = _message_hasher(key)
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = [hash_value(val) for val in ser]
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
