"""Type aliases shared across the engine."""

from typing import MutableSequence, NewType, Sequence, Union

from gmpy2 import mpz as _mpz, random_state as _random_state

# Arbitrary precision values, only ever used outside the limb arithmetic
MPZ = NewType("MPZ", _mpz)
RandomState = NewType("RandomState", _random_state)
IntLike = Union[int, MPZ]

# Limb buffers: anything indexable holding 32-bit words, least significant first.
# Buffers the engine writes to must be mutable; operands only need to be readable.
LimbBuffer = MutableSequence[int]
LimbView = Sequence[int]
