"""Fixed-width limb buffers.

A big integer is a sequence of 32-bit limbs, least significant limb first.
Buffers are ``array.array`` objects with a 4-byte unsigned typecode, so
storing a value that was not masked down to a limb raises ``OverflowError``
instead of silently wrapping.
"""

from array import array

from ..constants import LIMB_BITS
from ..types import LimbBuffer, LimbView

TYPECODE = "I" if array("I").itemsize * 8 == LIMB_BITS else "L"


class Limbs:
    """Allocation and copy helpers for limb buffers."""

    @staticmethod
    def allocate(count: int) -> array:
        """Return a zeroed buffer of ``count`` limbs."""
        return array(TYPECODE, bytes(count * array(TYPECODE).itemsize))

    @staticmethod
    def copy(dst: LimbBuffer, src: LimbView, count: int, dst_offset: int = 0) -> None:
        """Copy the low ``count`` limbs of ``src`` into ``dst`` starting at ``dst_offset``."""
        for i in range(count):
            dst[dst_offset + i] = src[i]

    @staticmethod
    def zero(buf: LimbBuffer, start: int, stop: int) -> None:
        for i in range(start, stop):
            buf[i] = 0
