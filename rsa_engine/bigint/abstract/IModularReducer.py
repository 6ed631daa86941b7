from abc import ABC, abstractmethod
from ...types import LimbBuffer, LimbView


class IModularReducer(ABC):
    """Abstract base class defining the interface for in-place modular reduction."""

    @staticmethod
    @abstractmethod
    def reduce(num: LimbBuffer, modulus: LimbView, tmp: LimbBuffer, limbs: int) -> None:
        """Reduce num modulo modulus in place.

        On return the low limbs limbs of num hold the remainder and the high
        limbs are zero.

        Args:
            num (LimbBuffer): Numerator, 2 * limbs limbs
            modulus (LimbView): Non-zero modulus, limbs limbs
            tmp (LimbBuffer): Scratch shift register, limbs + 1 limbs
            limbs (int): Modulus width N
        """
