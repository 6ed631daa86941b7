"""Exceptions raised by the Python surface of the engine.

The arithmetic core itself never raises: a zero modulus or a buffer of the
wrong width is a caller precondition violation, not a reported fault.
"""


class RsaEngineError(Exception):
    """Base class for all engine errors."""


class RsaConfigurationError(RsaEngineError, ValueError):
    """Raised when the engine width or private op variant is invalid."""


class PrivateOpDisabledError(RsaEngineError):
    """Raised when a private op is requested from an engine built without one."""
