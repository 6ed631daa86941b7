from abc import ABC, abstractmethod
from ...types import LimbView
from ..RsaState import RsaState


class IPowerStep(ABC):
    """Abstract base class for the "square the running power" step of the private op."""

    @staticmethod
    @abstractmethod
    def power_limbs(limbs: int) -> int:
        """Get the width of the power buffer (tmp_c) this step needs.

        Args:
            limbs (int): Engine width N

        Returns:
            int: Number of limbs to allocate for tmp_c
        """

    @staticmethod
    @abstractmethod
    def advance(state: RsaState, modulus: LimbView, limbs: int) -> None:
        """Replace the power held in state.tmp_c by its square modulo modulus.

        The low limbs of state.tmp_a (the running result) must be intact on return.

        Args:
            state (RsaState): Scratch buffers of the running operation
            modulus (LimbView): The modulus
            limbs (int): Engine width N
        """
