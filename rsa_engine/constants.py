"""Limb layout and public exponent constants shared by the arithmetic core."""

LIMB_BITS = 32
LIMB_BYTES = LIMB_BITS // 8
LIMB_MASK = 0xFFFFFFFF
LIMB_TOP_BIT = 0x80000000

# 65537 == 2^16 + 1
PUBLIC_EXPONENT = 65537
PUBLIC_EXPONENT_SQUARINGS = 16
