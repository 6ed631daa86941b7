"""Fixed-width big integer arithmetic."""

from .Limbs import Limbs
from .Multiplier import Multiplier
from .ModularReducer import ModularReducer
from .abstract.IMultiplier import IMultiplier
from .abstract.IModularReducer import IModularReducer

__all__ = [
    "Limbs",
    "Multiplier",
    "ModularReducer",
    "IMultiplier",
    "IModularReducer",
]
