import logging

from ..bigint import Limbs, ModularReducer, Multiplier
from ..types import LimbView
from ..constants import LIMB_BITS, PUBLIC_EXPONENT_SQUARINGS
from ..errors import PrivateOpDisabledError, RsaConfigurationError
from .PowerStep import power_step_for
from .PrivateOpVariant import PrivateOpVariant
from .RsaState import RsaState
from .abstract.IRsaEngine import IRsaEngine

logger = logging.getLogger(__name__)


class RsaEngine(IRsaEngine):
    """RSA modular exponentiation over fixed-width limb buffers.

    All operands are N-limb buffers, least significant limb first. The
    modulus must be non-zero; that, and every operand being exactly N limbs
    wide, is left to the caller and never checked.

    The private op branches on every exponent bit and is therefore not
    resistant to timing side channels.
    """

    def __init__(
        self, limbs: int, variant: PrivateOpVariant = PrivateOpVariant.LOW_RAM
    ) -> None:
        """Initialize the engine.

        Args:
            limbs (int): Width N of every BigInt, in 32-bit limbs
            variant (PrivateOpVariant): Scratch reuse strategy for the private op
        """
        if limbs < 1:
            raise RsaConfigurationError(f"Engine width must be at least one limb, got {limbs}")
        self._limbs = limbs
        self._variant = variant
        self._power_step = power_step_for(variant)
        logger.debug(
            "RSA engine ready: %d bits, private op %s", limbs * LIMB_BITS, variant.value
        )

    def get_limbs(self) -> int:
        return self._limbs

    def get_bit_length(self) -> int:
        return self._limbs * LIMB_BITS

    def get_variant(self) -> PrivateOpVariant:
        return self._variant

    def new_state(self) -> RsaState:
        power_limbs = self._power_step.power_limbs(self._limbs) if self._power_step else 0
        return RsaState(self._limbs, power_limbs)

    def public_op(self, state: RsaState, base: LimbView, modulus: LimbView) -> memoryview:
        n = self._limbs
        tmp_a, tmp_b = state.tmp_a, state.tmp_b

        # tmp_b = base ^ 65536 mod modulus
        Limbs.copy(tmp_b, base, n)
        for _ in range(PUBLIC_EXPONENT_SQUARINGS):
            Multiplier.multiply(tmp_a, tmp_b, tmp_b, n)
            ModularReducer.reduce(tmp_a, modulus, tmp_b, n)
            Limbs.copy(tmp_b, tmp_a, n)

        # tmp_a = tmp_b * base mod modulus == base ^ 65537 mod modulus
        Multiplier.multiply(tmp_a, tmp_b, base, n)
        ModularReducer.reduce(tmp_a, modulus, tmp_b, n)

        return state.result()

    def private_op(
        self, state: RsaState, base: LimbView, exponent: LimbView, modulus: LimbView
    ) -> memoryview:
        if self._power_step is None:
            raise PrivateOpDisabledError(
                "Private op requested from an engine built without private key support"
            )

        n = self._limbs
        tmp_a, tmp_b, tmp_c = state.tmp_a, state.tmp_b, state.tmp_c

        # tmp_c holds the running power of the base
        Limbs.copy(tmp_c, base, n)

        # tmp_a holds the result, starting from 1 mod modulus
        Limbs.zero(tmp_a, 0, n * 2)
        tmp_a[0] = 1
        ModularReducer.reduce(tmp_a, modulus, tmp_b, n)

        for i in range(n * LIMB_BITS):
            if (exponent[i // LIMB_BITS] >> (i % LIMB_BITS)) & 1:
                Limbs.copy(tmp_b, tmp_a, n)
                Multiplier.multiply(tmp_a, tmp_b, tmp_c, n)
                ModularReducer.reduce(tmp_a, modulus, tmp_b, n)

            self._power_step.advance(state, modulus, n)

        return state.result()
