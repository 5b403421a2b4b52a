from __future__ import annotations

import logging
import struct

from .errors import KeyReleasedError
from .siphash import check_word, split_key

logger = logging.getLogger(__name__)

_WORD = struct.Struct("<Q")


class KeyMaterial:
    """
    Owns the two SipHash key words for a bounded lifetime.

    The words live in a private ``bytearray`` that is overwritten with zeros on
    :meth:`release`. Used as a context manager, the buffer is cleared on every
    exit path out of the ``with`` block.
    """

    __slots__ = ("_buffer", "_released")

    def __init__(self, k0: int, k1: int):
        check_word("k0", k0)
        check_word("k1", k1)
        self._buffer = bytearray(16)
        _WORD.pack_into(self._buffer, 0, k0)
        _WORD.pack_into(self._buffer, 8, k1)
        self._released = False

    @classmethod
    def from_bytes(cls, key) -> "KeyMaterial":
        k0, k1 = split_key(key)
        return cls(k0, k1)

    @property
    def released(self) -> bool:
        return self._released

    def read(self, index: int) -> int:
        if self._released:
            raise KeyReleasedError("key material has been released")
        if index not in (0, 1):
            raise IndexError(f"key word index must be 0 or 1, got {index!r}")
        return _WORD.unpack_from(self._buffer, 8 * index)[0]

    def words(self):
        return self.read(0), self.read(1)

    def release(self) -> None:
        if self._released:
            return
        for idx in range(len(self._buffer)):
            self._buffer[idx] = 0
        self._released = True
        logger.debug("Released SipHash key material")

    def __enter__(self) -> "KeyMaterial":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "held"
        return f"<{self.__class__.__name__} {state}>"


__all__ = ["KeyMaterial"]
