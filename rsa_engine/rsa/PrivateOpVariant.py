from enum import Enum

from ..errors import RsaConfigurationError


class PrivateOpVariant(Enum):
    """How (and whether) the private op reuses its scratch buffers."""

    LOW_RAM = "lowram"
    BIG_RAM = "bigram"
    DISABLED = "none"

    @classmethod
    def from_name(cls, name: str) -> "PrivateOpVariant":
        """Look up a variant by its configuration name, case insensitive.

        Raises:
            RsaConfigurationError: If the name matches no variant
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(variant.value for variant in cls)
            raise RsaConfigurationError(
                f"Unknown private op variant {name!r}, expected one of: {choices}"
            ) from None
