import importlib
import os
from unittest.mock import patch

from rsa_engine.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs


def test_defaults_when_unset():
    with patch.dict(os.environ, {}, clear=True):
        assert EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN) == 2048
        assert EnvironmentManager.get_string(EnvironmentVariables.RSA_PRIV_OP) == "lowram"
        assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "WARNING"


def test_override_default():
    with patch.dict(os.environ, {}, clear=True):
        assert EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN, 4096) == 4096


def test_int_from_environment():
    with patch.dict(os.environ, {"RSA_LEN": "512"}):
        assert EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN) == 512


def test_bad_int_falls_back_to_default(caplog):
    with patch.dict(os.environ, {"RSA_LEN": "lots"}):
        assert EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN) == 2048
    assert "RSA_LEN" in caplog.text


def test_parallel_processes_divides_cpu_count():
    with patch.dict(os.environ, {"PARALLELISM_DIVISOR": "4"}), \
         patch("multiprocessing.cpu_count", return_value=16):
        assert SystemSpecs.get_num_parallel_processes() == 4


def test_parallel_processes_at_least_one():
    with patch.dict(os.environ, {"PARALLELISM_DIVISOR": "0"}), \
         patch("multiprocessing.cpu_count", return_value=1):
        assert SystemSpecs.get_num_parallel_processes() == 1


def test_protocol_constants_read_rsa_len():
    from rsa_engine import protocol_constants

    try:
        with patch.dict(os.environ, {"RSA_LEN": "1024"}):
            importlib.reload(protocol_constants)
            assert protocol_constants.RSA_LEN == 1024
            assert not hasattr(protocol_constants, "RSA_LIMBS")
    finally:
        importlib.reload(protocol_constants)
