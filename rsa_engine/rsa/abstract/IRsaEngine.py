from abc import ABC, abstractmethod
from ...types import LimbView
from ..PrivateOpVariant import PrivateOpVariant
from ..RsaState import RsaState


class IRsaEngine(ABC):
    """Abstract base class defining the interface for the fixed-width RSA engine."""

    @abstractmethod
    def get_limbs(self) -> int:
        """Get the engine width in limbs.

        Returns:
            int: Number of 32-bit limbs N in every BigInt
        """

    @abstractmethod
    def get_bit_length(self) -> int:
        """Get the engine width in bits.

        Returns:
            int: 32 * N
        """

    @abstractmethod
    def get_variant(self) -> PrivateOpVariant:
        """Get the configured private op variant.

        Returns:
            PrivateOpVariant: The variant chosen when the engine was built
        """

    @abstractmethod
    def new_state(self) -> RsaState:
        """Allocate a scratch state sized for this engine.

        Returns:
            RsaState: Fresh scratch buffers, owned by the caller
        """

    @abstractmethod
    def public_op(self, state: RsaState, base: LimbView, modulus: LimbView) -> memoryview:
        """Compute base^65537 mod modulus.

        Args:
            state (RsaState): Scratch buffers, exclusively owned for the call
            base (LimbView): The base, N limbs
            modulus (LimbView): Non-zero modulus, N limbs

        Returns:
            memoryview: N limbs held by state, valid until its next use
        """

    @abstractmethod
    def private_op(
        self, state: RsaState, base: LimbView, exponent: LimbView, modulus: LimbView
    ) -> memoryview:
        """Compute base^exponent mod modulus.

        Args:
            state (RsaState): Scratch buffers, exclusively owned for the call
            base (LimbView): The base, N limbs
            exponent (LimbView): The exponent, N limbs
            modulus (LimbView): Non-zero modulus, N limbs

        Returns:
            memoryview: N limbs held by state, valid until its next use
        """
