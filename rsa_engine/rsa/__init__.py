"""RSA exponentiation over fixed-width limb buffers."""

from .PrivateOpVariant import PrivateOpVariant
from .RsaState import RsaState
from .PowerStep import LowRamPowerStep, BigRamPowerStep, power_step_for
from .RsaEngine import RsaEngine
from .RsaEngineBuilder import RsaEngineBuilder
from .abstract.IPowerStep import IPowerStep
from .abstract.IRsaEngine import IRsaEngine
from .abstract.IRsaEngineBuilder import IRsaEngineBuilder

__all__ = [
    "PrivateOpVariant",
    "RsaState",
    "LowRamPowerStep",
    "BigRamPowerStep",
    "power_step_for",
    "RsaEngine",
    "RsaEngineBuilder",
    "IPowerStep",
    "IRsaEngine",
    "IRsaEngineBuilder",
]
