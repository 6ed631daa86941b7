"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate how many verification workers to run side by side.

        Returns the number of CPU cores divided by the parallelization divisor,
        with a minimum of 1. Every worker owns its own scratch state, so this is
        also the number of scratch states alive at once.

        The parallelization divisor can be configured via the PARALLELISM_DIVISOR
        environment variable. Default is 2.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor < 1:
            parallelism_divisor = 1
        return multiprocessing.cpu_count() // parallelism_divisor or 1
