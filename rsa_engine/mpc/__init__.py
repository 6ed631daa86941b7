"""gmpy2 backed reference arithmetic."""

from .MPC import MPC
from .abstract.IMPC import IMPC

__all__ = ["MPC", "IMPC"]
