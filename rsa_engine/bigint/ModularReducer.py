from ..constants import LIMB_BITS, LIMB_MASK, LIMB_TOP_BIT
from ..types import LimbBuffer, LimbView
from .Limbs import Limbs
from .abstract.IModularReducer import IModularReducer


class ModularReducer(IModularReducer):
    """Binary long division that keeps only the running remainder.

    The modulus is loaded into an (N+1)-limb shift register, aligned as far
    left as it goes against the top of the 2N-limb numerator, then walked back
    down one bit at a time. At every alignment the register is subtracted from
    the numerator window it lines up with whenever that window is not smaller.
    Once the register has walked a full limb, it is reloaded one limb further
    down the numerator. No quotient is ever produced.
    """

    @staticmethod
    def reduce(num: LimbBuffer, modulus: LimbView, tmp: LimbBuffer, limbs: int) -> None:
        double = limbs * 2
        bitsh = LIMB_BITS
        limbsh = limbs - 1

        # tmp = modulus << 32, then left as far as it will go
        ModularReducer._load(tmp, modulus, limbs)
        while not tmp[limbs] & LIMB_TOP_BIT:
            ModularReducer._shift_left(tmp, limbs)
            bitsh += 1

        while True:
            if not ModularReducer._window_less_than(num, tmp, limbsh, limbs):
                t = 0
                for i in range(limbs + 1):
                    t += num[limbsh + i] - tmp[i]
                    num[limbsh + i] = t & LIMB_MASK
                    t >>= LIMB_BITS

                # carry the borrow to the end
                for i in range(limbs + limbsh + 1, double):
                    t += num[i]
                    num[i] = t & LIMB_MASK
                    t >>= LIMB_BITS

            if not bitsh:
                if not limbsh:
                    break
                ModularReducer._load(tmp, modulus, limbs)
                bitsh = LIMB_BITS
                limbsh -= 1
            else:
                ModularReducer._shift_right(tmp, limbs)
                bitsh -= 1

    # Private Methods
    # --------------

    @staticmethod
    def _load(tmp: LimbBuffer, modulus: LimbView, limbs: int) -> None:
        """tmp = modulus << 32"""
        Limbs.copy(tmp, modulus, limbs, dst_offset=1)
        tmp[0] = 0

    @staticmethod
    def _shift_left(tmp: LimbBuffer, limbs: int) -> None:
        # tmp[0] is still zero while shifting left, so it is left alone
        for i in range(limbs, 0, -1):
            tmp[i] = ((tmp[i] << 1) & LIMB_MASK) | (tmp[i - 1] >> (LIMB_BITS - 1))

    @staticmethod
    def _shift_right(tmp: LimbBuffer, limbs: int) -> None:
        for i in range(limbs):
            tmp[i] = (tmp[i] >> 1) | ((tmp[i + 1] & 1) << (LIMB_BITS - 1))
        tmp[limbs] >>= 1

    @staticmethod
    def _window_less_than(num: LimbView, tmp: LimbView, limbsh: int, limbs: int) -> bool:
        """Compare num[limbsh:limbsh + limbs + 1] against tmp, most significant limb first."""
        for i in range(limbs, -1, -1):
            if num[limbsh + i] < tmp[i]:
                return True
            if num[limbsh + i] > tmp[i]:
                return False
        return False
