from __future__ import annotations

import struct
from typing import Iterator, Tuple

MAX_WORD = 0xFFFFFFFFFFFFFFFF
_MASK_64 = MAX_WORD

# "somepseu", "dorandom", "lygenera", "tedbytes" as little-endian words.
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_FINAL_XOR = 0xFF

State = Tuple[int, int, int, int]


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def check_word(name: str, value: int) -> int:
    """Return ``value`` if it is an int in ``[0, 2**64)``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= MAX_WORD:
        raise ValueError(f"{name} must fit in 64 unsigned bits")
    return value


def _as_view(data) -> memoryview:
    # A flat byte view over the caller's buffer; no copy of the message.
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return memoryview(data).cast("B")


def _tail_of(view: memoryview) -> bytes:
    return bytes(view[len(view) - (len(view) % 8):])


def initial_state(k0: int, k1: int) -> State:
    return (_INIT_V0 ^ k0, _INIT_V1 ^ k1, _INIT_V2 ^ k0, _INIT_V3 ^ k1)


def sip_round(v0: int, v1: int, v2: int, v3: int) -> State:
    """One SipRound over the four state words."""
    v0 = (v0 + v1) & _MASK_64
    v2 = (v2 + v3) & _MASK_64
    v1 = _rotl(v1, 13)
    v3 = _rotl(v3, 16)
    v1 ^= v0
    v3 ^= v2
    v0 = _rotl(v0, 32)

    v2 = (v2 + v1) & _MASK_64
    v0 = (v0 + v3) & _MASK_64
    v1 = _rotl(v1, 17)
    v3 = _rotl(v3, 21)
    v1 ^= v2
    v3 ^= v0
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def iter_blocks(message) -> Iterator[int]:
    """Yield every full 8-byte block of ``message`` as a little-endian word."""
    view = _as_view(message)
    limit = len(view) - (len(view) % 8)
    for offset in range(0, limit, 8):
        yield struct.unpack_from("<Q", view, offset)[0]


def _pack_final(tail: bytes, total_len: int) -> int:
    # Only the low byte of the length survives; 256 aliases 0.
    b = (total_len & 0xFF) << 56
    for idx, value in enumerate(tail):
        b |= value << (8 * idx)
    return b


def final_block(message) -> int:
    """
    Build the last word absorbed for ``message``.

    The 0-7 trailing bytes occupy the low-order bytes and the top byte holds
    ``len(message) mod 256``.
    """
    view = _as_view(message)
    return _pack_final(_tail_of(view), len(view))


def _absorb(state: State, m: int) -> State:
    v0, v1, v2, v3 = state
    v3 ^= m
    v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
    v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
    v0 ^= m
    return v0, v1, v2, v3


def _finish(state: State) -> int:
    v0, v1, v2, v3 = state
    v2 ^= _FINAL_XOR
    for _ in range(4):
        v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def hash64(k0: int, k1: int, message) -> int:
    """
    Compute the SipHash-2-4 tag of ``message`` under the key ``(k0, k1)``.

    Args:
        k0: Low key word, an int in ``[0, 2**64)``
        k1: High key word, an int in ``[0, 2**64)``
        message: bytes, bytearray or memoryview

    Returns:
        The 64-bit tag as a Python int.

    Raises:
        TypeError: If a key word is not an int or message is not bytes-like
        ValueError: If a key word is out of 64-bit range
    """
    check_word("k0", k0)
    check_word("k1", k1)
    view = _as_view(message)

    state = initial_state(k0, k1)
    for m in iter_blocks(view):
        state = _absorb(state, m)

    state = _absorb(state, _pack_final(_tail_of(view), len(view)))
    return _finish(state)


def split_key(key) -> Tuple[int, int]:
    """Unpack a 16-byte key into its two little-endian words ``(k0, k1)``."""
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError("key must be bytes-like")
    key_bytes = bytes(key)
    if len(key_bytes) != 16:
        raise ValueError("SipHash24 key must be exactly 16 bytes")
    return struct.unpack("<QQ", key_bytes)


def format_tag(tag: int) -> str:
    """Render a tag as 16 lowercase hex digits, most-significant byte first."""
    return f"{check_word('tag', tag):016x}"


class SipHash24:
    """
    Pure-Python SipHash-2-4 implementation with a streaming API.

    The interface mirrors hashlib-style objects and returns 64-bit digests.
    Feeding a message in any number of ``update`` calls gives the same tag
    as a single :func:`hash64` call.
    """

    digest_size = 8
    block_size = 8
    name = "siphash24"

    def __init__(self, key: bytes):
        k0, k1 = split_key(key)
        self._state = initial_state(k0, k1)
        self._tail = b""
        self._total_len = 0

    @classmethod
    def from_words(cls, k0: int, k1: int) -> "SipHash24":
        check_word("k0", k0)
        check_word("k1", k1)
        return cls(struct.pack("<QQ", k0, k1))

    def copy(self) -> "SipHash24":
        dup = self.__class__.__new__(self.__class__)
        dup._state = self._state
        dup._tail = self._tail
        dup._total_len = self._total_len
        return dup

    def update(self, data) -> "SipHash24":
        view = _as_view(data)
        self._total_len += len(view)

        state = self._state
        if self._tail:
            # Top up the buffered partial block before reading the new data.
            need = 8 - len(self._tail)
            head = self._tail + bytes(view[:need])
            if len(head) < 8:
                self._tail = head
                return self
            state = _absorb(state, struct.unpack("<Q", head)[0])
            view = view[need:]

        for m in iter_blocks(view):
            state = _absorb(state, m)
        self._state = state
        self._tail = _tail_of(view)
        return self

    def digest(self) -> bytes:
        return struct.pack("<Q", self.intdigest())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        state = _absorb(self._state, _pack_final(self._tail, self._total_len))
        return _finish(state)


def siphash24(key: bytes, data=None) -> SipHash24:
    """Convenience constructor matching hashlib-style usage."""
    hasher = SipHash24(key)
    if data is not None:
        hasher.update(data)
    return hasher


__all__ = [
    "MAX_WORD",
    "SipHash24",
    "check_word",
    "final_block",
    "format_tag",
    "hash64",
    "initial_state",
    "iter_blocks",
    "sip_round",
    "siphash24",
    "split_key",
]
