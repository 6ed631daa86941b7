"""Typed access to the environment variables that configure the engine."""

import logging
import os
from enum import Enum
from typing import Any, cast

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Environment variables read by the engine and its scripts.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    RSA_LEN = ("RSA_LEN", 2048, EnvVarType.INT)
    RSA_PRIV_OP = ("RSA_PRIV_OP", "lowram", EnvVarType.STRING)
    PARALLELISM_DIVISOR = ("PARALLELISM_DIVISOR", 2, EnvVarType.INT)
    LOG_LEVEL = ("LOG_LEVEL", "WARNING", EnvVarType.STRING)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Read an environment variable, converted to its declared type.

        An INT variable holding something that does not parse falls back to
        the default with a warning rather than failing.

        Args:
            env_var: The environment variable to retrieve
            override_default: Used instead of the enum's default when not None

        Returns:
            The converted value, or the default when the variable is unset
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring non-integer %s=%r, using %r", env_var.env_name, value, default
                )
                return default
        return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default = None) -> int:
        """Read an INT variable, see get_value."""
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default = None) -> str:
        """Read a STRING variable, see get_value."""
        return cast(str, EnvironmentManager.get_value(env_var, default))
