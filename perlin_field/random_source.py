# perlin_field/random_source.py

"""
================================================================================
SEEDED RANDOM SOURCE
================================================================================
A deterministic linear congruential generator (LCG). It is the only source of
randomness in the engine and is consulted solely when the permutation table is
shuffled, never during noise evaluation.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int): Any integer. Only its value modulo 2**32 matters.
- Public Methods:
    - next(): Advances the state and returns a float in [0, 1).
- Side Effects: Mutates the internal 32-bit state.
- Invariants: The sequence is fully determined by the seed:
      state <- (a * state + c) mod m,  returned value = state / m
  with a = 1664525, c = 1013904223, m = 2**32.
================================================================================
"""

import numbers

from . import config as DEFAULTS


class LCGRandom:
    """Reproducible float stream driven by an integer seed."""

    def __init__(self, seed: int = DEFAULTS.DEFAULT_SEED):
        if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}: {seed!r}")
        self.seed = int(seed)
        self.state = self.seed % DEFAULTS.LCG_MODULUS

    def next(self) -> float:
        self.state = (DEFAULTS.LCG_MULTIPLIER * self.state + DEFAULTS.LCG_INCREMENT) % DEFAULTS.LCG_MODULUS
        return self.state / DEFAULTS.LCG_MODULUS

    def __repr__(self):
        return f"LCGRandom(seed={self.seed}, state={self.state})"
