"""
Keyed SipHash-2-4 tags for byte strings, with scoped key storage.
"""

from .errors import (
    ConfigurationError,
    KeyReleasedError,
    ServiceDisposedError,
    SipHashError,
)
from .keys import KeyMaterial
from .options import SipHashOptions
from .service import SipHashService
from .siphash import SipHash24, format_tag, hash64, siphash24, split_key
from .tag import SipTag, sip_tag
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "ConfigurationError",
    "KeyMaterial",
    "KeyReleasedError",
    "ServiceDisposedError",
    "SipHash24",
    "SipHashError",
    "SipHashOptions",
    "SipHashService",
    "SipTag",
    "format_tag",
    "hash64",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
    "sip_tag",
    "siphash24",
    "split_key",
]
