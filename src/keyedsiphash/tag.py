from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Union

from .siphash import format_tag, hash64, split_key


@dataclass(frozen=True)
class SipTag:
    value: int

    def digest(self) -> bytes:
        return struct.pack("<Q", self.value)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return format_tag(self.value)


def sip_tag(message: Union[bytes, bytearray, memoryview, str], key: bytes) -> SipTag:
    """
    Hash a message with a 16-byte SipHash-2-4 key.

    Args:
        message: Bytes-like data, or a str which is hashed as its UTF-8 encoding
        key: 16-byte key; bytes 0-7 and 8-15 are the little-endian k0 and k1

    Returns:
        SipTag with digest(), hexdigest() and intdigest() methods. ``str(tag)``
        gives the most-significant-byte-first hex rendering.

    Raises:
        TypeError: If key or message has the wrong type
        ValueError: If key is not 16 bytes long
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
    k0, k1 = split_key(key)
    return SipTag(hash64(k0, k1, message))


__all__ = ["SipTag", "sip_tag"]
