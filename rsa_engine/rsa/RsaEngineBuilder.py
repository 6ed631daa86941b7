from typing import Self, Union

from ..constants import LIMB_BITS
from ..errors import RsaConfigurationError
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .PrivateOpVariant import PrivateOpVariant
from .RsaEngine import RsaEngine
from .abstract.IRsaEngineBuilder import IRsaEngineBuilder


class RsaEngineBuilder(IRsaEngineBuilder):
    """Implementation of RSA engine builder."""

    def __init__(self) -> None:
        self._limbs = None
        self._variant = PrivateOpVariant.LOW_RAM

    @classmethod
    def from_environment(cls) -> Self:
        """Create a builder preloaded from RSA_LEN and RSA_PRIV_OP."""
        return (
            cls()
            .set_bit_length(EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN))
            .set_private_op_variant(
                EnvironmentManager.get_string(EnvironmentVariables.RSA_PRIV_OP)
            )
        )

    def set_bit_length(self, bit_length: int) -> Self:
        if bit_length <= 0 or bit_length % LIMB_BITS:
            raise RsaConfigurationError(
                f"Bit length must be a positive multiple of {LIMB_BITS}, got {bit_length}"
            )
        self._limbs = bit_length // LIMB_BITS
        return self

    def set_limbs(self, limbs: int) -> Self:
        if limbs < 1:
            raise RsaConfigurationError(f"Engine width must be at least one limb, got {limbs}")
        self._limbs = limbs
        return self

    def set_private_op_variant(self, variant: Union[PrivateOpVariant, str]) -> Self:
        if isinstance(variant, str):
            variant = PrivateOpVariant.from_name(variant)
        self._variant = variant
        return self

    def build(self) -> RsaEngine:
        if self._limbs is None:
            raise RsaConfigurationError("Engine width must be set before building")
        return RsaEngine(self._limbs, self._variant)
