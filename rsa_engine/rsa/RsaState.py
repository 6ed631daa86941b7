from ..bigint.Limbs import Limbs


class RsaState:
    """Scratch buffers for one in-flight exponentiation.

    ``tmp_a`` is the 2N-limb accumulator and holds the result, ``tmp_b`` is the
    (N+1)-limb shift register / save slot and ``tmp_c`` holds the running power
    of the base for the private op (N+1 or 2N limbs depending on the variant).

    A state belongs to exactly one caller at a time. Two operations running
    concurrently on the same state corrupt each other; nothing here guards
    against it.
    """

    def __init__(self, limbs: int, power_limbs: int) -> None:
        self._limbs = limbs
        self.tmp_a = Limbs.allocate(limbs * 2)
        self.tmp_b = Limbs.allocate(limbs + 1)
        self.tmp_c = Limbs.allocate(power_limbs)

    def result(self) -> memoryview:
        """View of the low N limbs of the accumulator.

        Valid until the next operation run against this state.
        """
        return memoryview(self.tmp_a)[: self._limbs]
