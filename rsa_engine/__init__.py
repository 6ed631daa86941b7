"""Fixed-width multi-precision RSA engine."""

from .constants import LIMB_BITS, PUBLIC_EXPONENT
from .errors import RsaEngineError, RsaConfigurationError, PrivateOpDisabledError
from .rsa import PrivateOpVariant, RsaEngine, RsaEngineBuilder, RsaState
from .converters import BigIntConverter
from .verify import SignatureVerifier

__version__ = "0.1.0"

__all__ = [
    "LIMB_BITS",
    "PUBLIC_EXPONENT",
    "RsaEngineError",
    "RsaConfigurationError",
    "PrivateOpDisabledError",
    "PrivateOpVariant",
    "RsaEngine",
    "RsaEngineBuilder",
    "RsaState",
    "BigIntConverter",
    "SignatureVerifier",
]
