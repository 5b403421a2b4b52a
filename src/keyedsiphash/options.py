from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .errors import ConfigurationError
from .siphash import check_word


def _parse_word(name: str, raw: Any) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ConfigurationError(f"{name} must be an integer, got a bool")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = int(text, 0)
        except ValueError as exc:
            raise ConfigurationError(f"{name} is not a valid integer: {raw!r}") from exc
    else:
        raise ConfigurationError(f"{name} must be an int or str, got {type(raw)!r}")
    try:
        return check_word(name, value)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


@dataclass(frozen=True)
class SipHashOptions:
    """The two key words handed to :class:`~keyedsiphash.service.SipHashService`."""

    k0: Optional[int] = None
    k1: Optional[int] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping, prefix: str = "") -> "SipHashOptions":
        """
        Read ``K0`` and ``K1`` (after ``prefix``) from a mapping.

        Values may be ints or strings in any base ``int(x, 0)`` accepts, such
        as ``"0x0706050403020100"``. Empty strings count as unset.

        Raises:
            ConfigurationError: If a value is malformed or out of range
        """
        return cls(
            k0=_parse_word(f"{prefix}K0", mapping.get(f"{prefix}K0")),
            k1=_parse_word(f"{prefix}K1", mapping.get(f"{prefix}K1")),
        )

    @classmethod
    def from_env(
        cls, prefix: str = "SIPHASH_", environ: Optional[Mapping] = None
    ) -> "SipHashOptions":
        return cls.from_mapping(os.environ if environ is None else environ, prefix=prefix)

    def validate(self) -> Tuple[int, int]:
        """Return ``(k0, k1)`` or raise ConfigurationError if either is unusable."""
        k0 = _parse_word("k0", self.k0)
        k1 = _parse_word("k1", self.k1)
        if k0 is None or k1 is None:
            raise ConfigurationError("SipHashOptions requires k0 and k1 to be set.")
        return k0, k1


__all__ = ["SipHashOptions"]
