import logging
from multiprocessing import Pool
from typing import List, Tuple

from ..types import LimbView
from ..converters import BigIntConverter
from ..rsa import PrivateOpVariant, RsaEngine, RsaEngineBuilder
from ..utils.SystemSpecs import SystemSpecs
from .abstract.ISignatureVerifier import ISignatureVerifier

logger = logging.getLogger(__name__)


class SignatureVerifier(ISignatureVerifier):
    """Accept/reject decision for a raw RSA signature against an expected message.

    Only the public op is run; whatever padding the expected message carries
    is compared verbatim, never parsed. Each verifier owns one scratch state,
    so a verifier must not be shared between threads.
    """

    def __init__(self, engine: RsaEngine) -> None:
        self._engine = engine
        self._state = engine.new_state()

    def verify(self, signature: bytes, modulus: bytes, expected: bytes) -> bool:
        """See ISignatureVerifier.verify.

        Raises:
            ValueError: If a value does not fit the engine width or the modulus is zero
        """
        limbs = self._engine.get_limbs()
        N = BigIntConverter.from_bytes(modulus, limbs)
        if not any(N):
            raise ValueError("Modulus must be non-zero")
        return self.verify_limbs(
            BigIntConverter.from_bytes(signature, limbs),
            N,
            BigIntConverter.from_bytes(expected, limbs),
        )

    def verify_limbs(self, signature: LimbView, modulus: LimbView, expected: LimbView) -> bool:
        limbs = self._engine.get_limbs()
        result = self._engine.public_op(self._state, signature, modulus)
        accepted = all(result[i] == expected[i] for i in range(limbs))
        if accepted:
            logger.debug("Signature accepted")
        else:
            logger.info("Signature rejected")
        return accepted

    @staticmethod
    def verify_many(
        requests: List[Tuple[bytes, bytes, bytes]], bit_length: int
    ) -> List[bool]:
        num_workers = SystemSpecs.get_num_parallel_processes()
        jobs = [(bit_length, *request) for request in requests]
        with Pool(num_workers) as pool:
            return pool.map(SignatureVerifier._verify_single, jobs)

    # Private Methods
    # --------------

    @staticmethod
    def _verify_single(args: Tuple[int, bytes, bytes, bytes]) -> bool:
        """Helper method to verify one signature inside a worker process."""
        bit_length, signature, modulus, expected = args
        engine = (
            RsaEngineBuilder()
            .set_bit_length(bit_length)
            .set_private_op_variant(PrivateOpVariant.DISABLED)
            .build()
        )
        return SignatureVerifier(engine).verify(signature, modulus, expected)
