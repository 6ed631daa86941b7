from ..constants import LIMB_BITS, LIMB_MASK
from ..types import LimbBuffer, LimbView
from .Limbs import Limbs
from .abstract.IMultiplier import IMultiplier


class Multiplier(IMultiplier):
    """Schoolbook multiplication of two N-limb integers into a 2N-limb product."""

    @staticmethod
    def multiply(ret: LimbBuffer, a: LimbView, b: LimbView, limbs: int) -> None:
        double = limbs * 2
        Limbs.zero(ret, 0, double)

        for i in range(limbs):
            a_i = a[i]

            # produce a partial sum and add it in; acc never exceeds 2^64 - 1
            carry = 0
            for j in range(limbs):
                acc = a_i * b[j] + carry + ret[i + j]
                ret[i + j] = acc & LIMB_MASK
                carry = acc >> LIMB_BITS

            # carry the carry to the end
            for j in range(i + limbs, double):
                acc = ret[j] + carry
                ret[j] = acc & LIMB_MASK
                carry = acc >> LIMB_BITS
