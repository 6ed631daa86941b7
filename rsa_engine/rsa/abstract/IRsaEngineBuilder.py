from abc import ABC, abstractmethod
from typing import Self, Union
from ..PrivateOpVariant import PrivateOpVariant
from ..RsaEngine import RsaEngine


class IRsaEngineBuilder(ABC):
    """Abstract base class defining the interface for an RSA engine builder."""

    @abstractmethod
    def set_bit_length(self, bit_length: int) -> Self:
        """Set the engine width in bits.

        Args:
            bit_length (int): Width in bits, a positive multiple of 32

        Returns:
            IRsaEngineBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_limbs(self, limbs: int) -> Self:
        """Set the engine width in limbs.

        Args:
            limbs (int): Number of 32-bit limbs N

        Returns:
            IRsaEngineBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_private_op_variant(self, variant: Union[PrivateOpVariant, str]) -> Self:
        """Set the private op variant.

        Args:
            variant (PrivateOpVariant | str): Variant or its configuration name

        Returns:
            IRsaEngineBuilder: The builder instance for chaining
        """

    @abstractmethod
    def build(self) -> RsaEngine:
        """Build the engine.

        Returns:
            RsaEngine: The configured engine
        """
