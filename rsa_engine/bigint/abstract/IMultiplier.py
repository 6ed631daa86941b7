from abc import ABC, abstractmethod
from ...types import LimbBuffer, LimbView


class IMultiplier(ABC):
    """Abstract base class defining the interface for fixed-width multiplication."""

    @staticmethod
    @abstractmethod
    def multiply(ret: LimbBuffer, a: LimbView, b: LimbView, limbs: int) -> None:
        """Write the exact product a * b into ret.

        Args:
            ret (LimbBuffer): Output buffer of 2 * limbs limbs, must not overlap a or b
            a (LimbView): First operand, limbs limbs
            b (LimbView): Second operand, limbs limbs
            limbs (int): Operand width N
        """
