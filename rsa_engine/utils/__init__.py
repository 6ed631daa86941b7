"""Configuration and system utilities."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables, EnvVarType

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "EnvVarType"]
