from abc import ABC, abstractmethod
from typing import List, Tuple
from ...types import LimbView


class ISignatureVerifier(ABC):
    """Abstract base class defining the interface for raw RSA signature verification."""

    @abstractmethod
    def verify(self, signature: bytes, modulus: bytes, expected: bytes) -> bool:
        """Check that signature^65537 mod modulus equals the expected encoded message.

        Args:
            signature (bytes): Big-endian signature
            modulus (bytes): Big-endian public modulus
            expected (bytes): Big-endian encoded message the signature must open to

        Returns:
            bool: True to accept, False to reject
        """

    @abstractmethod
    def verify_limbs(self, signature: LimbView, modulus: LimbView, expected: LimbView) -> bool:
        """Same as verify, on values already marshalled into limb buffers.

        The modulus is not checked; a zero modulus never returns.

        Returns:
            bool: True to accept, False to reject
        """

    @staticmethod
    @abstractmethod
    def verify_many(
        requests: List[Tuple[bytes, bytes, bytes]], bit_length: int
    ) -> List[bool]:
        """Verify many signatures in parallel using multiprocessing.

        Args:
            requests: List of (signature, modulus, expected) tuples
            bit_length: Engine width in bits each worker is built with

        Returns:
            List[bool]: Verdicts in the same order as requests
        """
