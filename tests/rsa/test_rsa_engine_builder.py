import os
from unittest.mock import patch

import pytest

from rsa_engine.errors import RsaConfigurationError
from rsa_engine.rsa import PrivateOpVariant, RsaEngine, RsaEngineBuilder


def test_build_from_bit_length():
    engine = RsaEngineBuilder().set_bit_length(2048).build()
    assert isinstance(engine, RsaEngine)
    assert engine.get_limbs() == 64
    assert engine.get_variant() is PrivateOpVariant.LOW_RAM


def test_build_from_limbs_with_variant_name():
    engine = RsaEngineBuilder().set_limbs(4).set_private_op_variant("BigRam").build()
    assert engine.get_bit_length() == 128
    assert engine.get_variant() is PrivateOpVariant.BIG_RAM


def test_build_without_width_raises():
    """Test that the builder refuses to build before a width is set."""
    with pytest.raises(RsaConfigurationError, match="width must be set"):
        RsaEngineBuilder().build()


@pytest.mark.parametrize("bit_length", [0, -32, 100, 2047])
def test_bit_length_must_be_positive_multiple_of_limb(bit_length):
    with pytest.raises(ValueError):
        RsaEngineBuilder().set_bit_length(bit_length)


def test_zero_limbs_rejected():
    with pytest.raises(RsaConfigurationError):
        RsaEngineBuilder().set_limbs(0)
    with pytest.raises(RsaConfigurationError):
        RsaEngine(0)


def test_unknown_variant_rejected():
    with pytest.raises(RsaConfigurationError, match="lowram, bigram, none"):
        RsaEngineBuilder().set_private_op_variant("hugeram")


def test_from_environment_defaults():
    with patch.dict(os.environ, {}, clear=True):
        engine = RsaEngineBuilder.from_environment().build()
    assert engine.get_bit_length() == 2048
    assert engine.get_variant() is PrivateOpVariant.LOW_RAM


def test_from_environment_overrides():
    with patch.dict(os.environ, {"RSA_LEN": "1024", "RSA_PRIV_OP": "none"}):
        engine = RsaEngineBuilder.from_environment().build()
    assert engine.get_limbs() == 32
    assert engine.get_variant() is PrivateOpVariant.DISABLED


def test_from_environment_bad_length():
    with patch.dict(os.environ, {"RSA_LEN": "1000"}):
        with pytest.raises(RsaConfigurationError):
            RsaEngineBuilder.from_environment()
