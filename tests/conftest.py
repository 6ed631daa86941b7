from typing import Tuple

import pytest
from gmpy2 import mpz

from rsa_engine.constants import PUBLIC_EXPONENT
from rsa_engine.mpc import MPC
from rsa_engine.types import RandomState

TEST_BITS = 128


def _prime(state: RandomState, bits: int) -> mpz:
    return MPC.next_prime(MPC.mpz_urandomb(state, bits) | (mpz(1) << (bits - 1)))


@pytest.fixture
def rand() -> RandomState:
    """Fixed-seed random state so failures reproduce."""
    return MPC.random_state(20161117)


@pytest.fixture(scope="session")
def key_pair() -> Tuple[mpz, mpz, mpz]:
    """Small RSA-like key pair (n, e, d) whose modulus fits in TEST_BITS."""
    state = MPC.random_state(42)
    e = mpz(PUBLIC_EXPONENT)
    while True:
        p = _prime(state, TEST_BITS // 2 - 1)
        q = _prime(state, TEST_BITS // 2 - 1)
        phi = (p - 1) * (q - 1)
        if p != q and MPC.gcd(e, phi) == 1:
            return p * q, e, MPC.invert(e, phi)
