"""Deterministic linear congruential generator used for game randomness."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


class Rand:
    """32-bit LCG (multiplier 69069, increment 1), as used in Super-Duper."""

    A = 69069
    B = 1
    SEED_MULTIPLIER = 2654435761

    def __init__(self, seed: int | None = None) -> None:
        self.cur_seed = 0
        if seed is not None:
            self.seed(seed)

    def seed(self, new_seed: int) -> None:
        """Reset the generator state from ``new_seed``."""
        self.cur_seed = ((new_seed & _MASK32) * self.SEED_MULTIPLIER) & _MASK32

    def next(self) -> int:
        """Advance the state and return it as an unsigned 32-bit value."""
        self.cur_seed = (self.A * self.cur_seed + self.B) & _MASK32
        return self.cur_seed

    def below(self, maximum: int) -> int:
        """Return a value in ``[0, maximum)`` (0 when ``maximum`` is 0)."""
        return (self.next() * (maximum & _MASK32)) >> 32

    def between(self, minimum: int, maximum: int) -> int:
        """Return a value in ``[minimum, maximum)``."""
        return (self.below((maximum - minimum) & _MASK32) + minimum) & _MASK32

    def __call__(self, *args: int) -> int:
        if not args:
            return self.next()
        if len(args) == 1:
            return self.below(args[0])
        if len(args) == 2:
            return self.between(args[0], args[1])
        raise TypeError(f"Rand() takes at most 2 arguments ({len(args)} given)")