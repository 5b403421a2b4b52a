from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from .errors import KeyReleasedError, ServiceDisposedError
from .keys import KeyMaterial
from .options import SipHashOptions
from .siphash import hash64
from .tag import SipTag

logger = logging.getLogger(__name__)


class SipHashService:
    """
    Long-lived SipHash-2-4 hasher bound to a configured key.

    The key words are held in a :class:`KeyMaterial` that is zeroed by
    :meth:`close`. After closing, hashing raises ServiceDisposedError.
    """

    def __init__(self, options: SipHashOptions):
        if options is None:
            raise TypeError("options must not be None")
        k0, k1 = options.validate()
        self._keys = KeyMaterial(k0, k1)
        self._closed = False
        logger.debug("Created %s", self.__class__.__name__)

    @classmethod
    def from_env(
        cls, prefix: str = "SIPHASH_", environ: Optional[Mapping] = None
    ) -> "SipHashService":
        return cls(SipHashOptions.from_env(prefix=prefix, environ=environ))

    @property
    def closed(self) -> bool:
        return self._closed

    def compute_hash(self, data) -> int:
        if self._closed:
            raise ServiceDisposedError("SipHashService has been closed")
        try:
            k0 = self._keys.read(0)
            k1 = self._keys.read(1)
        except KeyReleasedError as exc:
            raise ServiceDisposedError("SipHashService has been closed") from exc
        return hash64(k0, k1, data)

    def compute_tag(self, data) -> SipTag:
        return SipTag(self.compute_hash(data))

    def close(self) -> None:
        if self._closed:
            return
        self._keys.release()
        self._closed = True
        logger.debug("Closed %s", self.__class__.__name__)

    def __enter__(self) -> "SipHashService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["SipHashService"]
