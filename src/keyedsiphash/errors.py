class SipHashError(Exception):
    """Base class for errors raised by keyedsiphash collaborators."""


class ConfigurationError(SipHashError, ValueError):
    """Key words are missing, malformed, or out of 64-bit range."""


class KeyReleasedError(SipHashError, RuntimeError):
    """Key material was read after it had been released."""


class ServiceDisposedError(SipHashError, RuntimeError):
    """A closed SipHashService was asked to hash."""


__all__ = [
    "ConfigurationError",
    "KeyReleasedError",
    "ServiceDisposedError",
    "SipHashError",
]
