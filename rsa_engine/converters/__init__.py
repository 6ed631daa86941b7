"""Converters between limb buffers and external representations."""

from .bigint_converter import BigIntConverter

__all__ = ["BigIntConverter"]
