from abc import ABC, abstractmethod
from ...types import MPZ, RandomState


class IMPC(ABC):
    """Interface for the arbitrary precision operations the engine is checked against."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Wrap a Python integer as an mpz."""

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a reproducible random state from a seed."""

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Draw a uniform integer in [0, 2^bit_count).

        Args:
            state (RandomState): Random state to draw from
            bit_count (int): Width of the result in bits

        Returns:
            MPZ: Random integer
        """

    @staticmethod
    @abstractmethod
    def next_prime(value: MPZ) -> MPZ:
        """Get the smallest prime greater than value."""

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod.

        This is the reference result for RsaEngine.public_op and
        RsaEngine.private_op.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus, the reference for ModularReducer.reduce."""

    @staticmethod
    @abstractmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        """Compute the greatest common divisor of a and b."""

    @staticmethod
    @abstractmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute y such that value * y == 1 (mod modulus).

        Raises:
            ZeroDivisionError: If value has no inverse modulo modulus
        """
