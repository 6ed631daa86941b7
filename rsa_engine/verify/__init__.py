"""Signature verification on top of the public op."""

from .SignatureVerifier import SignatureVerifier
from .abstract.ISignatureVerifier import ISignatureVerifier

__all__ = ["SignatureVerifier", "ISignatureVerifier"]
