# protocol_constants.py

from .utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables


RSA_LEN = EnvironmentManager.get_int(EnvironmentVariables.RSA_LEN)  # Default modulus bit width
