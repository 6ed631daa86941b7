"""Script for checking a raw RSA signature against an expected message."""

import argparse
import logging
import sys
import time

from rsa_engine.converters import BigIntConverter
from rsa_engine.errors import RsaConfigurationError
from rsa_engine.protocol_constants import RSA_LEN
from rsa_engine.rsa import PrivateOpVariant, RsaEngineBuilder
from rsa_engine.utils import EnvironmentManager, EnvironmentVariables
from rsa_engine.verify import SignatureVerifier


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify a raw RSA signature (signature^65537 mod N == expected)."
    )
    parser.add_argument(
        "signature",
        type=str,
        help="The signature (hex string)",
    )
    parser.add_argument(
        "N",
        type=str,
        help="The public modulus N (hex string)",
    )
    parser.add_argument(
        "expected",
        type=str,
        help="The encoded message the signature must open to (hex string)",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=RSA_LEN,
        help=f"Engine width in bits (default: RSA_LEN, currently {RSA_LEN})",
    )
    return parser.parse_args()


def main() -> int:
    """Verify one signature and report accept or reject."""
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = parse_args()

    try:
        engine = (
            RsaEngineBuilder()
            .set_bit_length(args.bits)
            .set_private_op_variant(PrivateOpVariant.DISABLED)
            .build()
        )
        limbs = engine.get_limbs()
        signature = BigIntConverter.from_hex(args.signature, limbs)
        N = BigIntConverter.from_hex(args.N, limbs)
        if not any(N):
            raise ValueError("modulus N must be non-zero")
        expected = BigIntConverter.from_hex(args.expected, limbs)
    except (RsaConfigurationError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Verifying {engine.get_bit_length()}-bit signature...")
    start_time = time.time()
    accepted = SignatureVerifier(engine).verify_limbs(signature, N, expected)
    total_time = time.time() - start_time

    print(f"{'ACCEPT' if accepted else 'REJECT'} ({total_time:.4f} seconds)")
    return 0 if accepted else 1


if __name__ == "__main__":
    sys.exit(main())
