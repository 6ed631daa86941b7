import gmpy2
from .abstract.IMPC import IMPC
from ..types import MPZ, RandomState


class MPC(IMPC):
    """gmpy2 backed multi-precision operations.

    The limb engine never calls into this class on its arithmetic path; it is
    used to marshal values in and out of limb buffers and as the independent
    reference the engine is checked against.
    """

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def next_prime(value: MPZ) -> MPZ:
        return gmpy2.next_prime(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        return gmpy2.gcd(a, b)

    @staticmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        return gmpy2.invert(value, modulus)
