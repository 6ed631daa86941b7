"""Converter between limb buffers and Python / gmpy2 integers, bytes and hex."""

from array import array

from ..bigint.Limbs import Limbs
from ..constants import LIMB_BITS, LIMB_BYTES, LIMB_MASK
from ..mpc import MPC
from ..types import IntLike, LimbView, MPZ


class BigIntConverter:
    """Marshals values into and out of fixed-width limb buffers."""

    @staticmethod
    def from_int(value: IntLike, limbs: int) -> array:
        """Split a non-negative integer into a buffer of limbs limbs.

        Args:
            value (int | MPZ): The integer to convert
            limbs (int): Width of the resulting buffer

        Returns:
            array: limbs limbs, least significant first

        Raises:
            ValueError: If value is negative or needs more than limbs limbs
        """
        value = int(value)
        if value < 0:
            raise ValueError(f"Cannot store negative value {value} in limbs")
        if value >> (limbs * LIMB_BITS):
            raise ValueError(
                f"Value of {value.bit_length()} bits does not fit in {limbs * LIMB_BITS} bits"
            )
        buf = Limbs.allocate(limbs)
        for i in range(limbs):
            buf[i] = value & LIMB_MASK
            value >>= LIMB_BITS
        return buf

    @staticmethod
    def to_int(buf: LimbView) -> MPZ:
        """Join a limb buffer back into an mpz."""
        value = MPC.mpz(0)
        for i in range(len(buf) - 1, -1, -1):
            value = (value << LIMB_BITS) | buf[i]
        return value

    @staticmethod
    def from_bytes(data: bytes, limbs: int) -> array:
        """Convert a big-endian byte string, as signatures and moduli travel on the wire."""
        return BigIntConverter.from_int(int.from_bytes(data, "big"), limbs)

    @staticmethod
    def to_bytes(buf: LimbView) -> bytes:
        """Convert a limb buffer to big-endian bytes, 4 bytes per limb."""
        return int(BigIntConverter.to_int(buf)).to_bytes(len(buf) * LIMB_BYTES, "big")

    @staticmethod
    def from_hex(text: str, limbs: int) -> array:
        """Convert a hex string, with or without a 0x prefix."""
        return BigIntConverter.from_int(int(text, 16), limbs)

    @staticmethod
    def to_hex(buf: LimbView) -> str:
        """Convert a limb buffer to a lowercase hex string without prefix."""
        return BigIntConverter.to_int(buf).digits(16)
