from typing import Dict, Optional, Type

from ..bigint import Limbs, ModularReducer, Multiplier
from ..types import LimbView
from .PrivateOpVariant import PrivateOpVariant
from .RsaState import RsaState
from .abstract.IPowerStep import IPowerStep


class LowRamPowerStep(IPowerStep):
    """Squares the power through tmp_a, parking the result in tmp_b meanwhile.

    Keeps tmp_c at N+1 limbs at the cost of two extra copies per bit.
    """

    @staticmethod
    def power_limbs(limbs: int) -> int:
        return limbs + 1

    @staticmethod
    def advance(state: RsaState, modulus: LimbView, limbs: int) -> None:
        Limbs.copy(state.tmp_b, state.tmp_a, limbs)  # save tmp_a
        Multiplier.multiply(state.tmp_a, state.tmp_c, state.tmp_c, limbs)
        ModularReducer.reduce(state.tmp_a, modulus, state.tmp_c, limbs)
        Limbs.copy(state.tmp_c, state.tmp_a, limbs)
        Limbs.copy(state.tmp_a, state.tmp_b, limbs)  # restore tmp_a


class BigRamPowerStep(IPowerStep):
    """Squares the power straight into a 2N-limb tmp_c."""

    @staticmethod
    def power_limbs(limbs: int) -> int:
        return limbs * 2

    @staticmethod
    def advance(state: RsaState, modulus: LimbView, limbs: int) -> None:
        Limbs.copy(state.tmp_b, state.tmp_c, limbs)
        Multiplier.multiply(state.tmp_c, state.tmp_b, state.tmp_b, limbs)
        ModularReducer.reduce(state.tmp_c, modulus, state.tmp_b, limbs)


POWER_STEPS: Dict[PrivateOpVariant, Type[IPowerStep]] = {
    PrivateOpVariant.LOW_RAM: LowRamPowerStep,
    PrivateOpVariant.BIG_RAM: BigRamPowerStep,
}


def power_step_for(variant: PrivateOpVariant) -> Optional[Type[IPowerStep]]:
    """Get the power step for a variant, or None when private ops are disabled."""
    return POWER_STEPS.get(variant)
