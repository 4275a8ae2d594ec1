# perlin_field/generator.py

"""
================================================================================
CORE NOISE GENERATOR
================================================================================
This module contains the PerlinNoise class, which owns a seed, the permutation
table derived from it and the smoothstep order, and exposes gradient noise and
fractal noise in 1 to 4 dimensions.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int): Drives the permutation table. Defaults to 1335.
    - smoothstep_order: A SmoothstepOrder, its integer value or its name.
    - logger: An optional configured Python logging object.
- Outputs (from methods):
    - Floats (scalar calls) or NumPy arrays (field calls), nominally in [-1, 1].
- Side Effects: Logs configuration changes using the provided logger.
- Invariants: Given the same seed and the same number of shuffle_perm() calls,
  the table and every output are identical.

Concurrency:
---------------
Evaluation only reads the table, so concurrent evaluation is safe. Reseeding
replaces the table and is NOT synchronised: callers must serialise set_seed()
and shuffle_perm() against evaluation themselves.
================================================================================
"""

import logging

import numpy as np

from . import config as DEFAULTS
from . import fractal
from . import noise
from .fractal import FractalOptions
from .gradients import gradient_table
from .permutation import shuffle_permutation
from .random_source import LCGRandom
from .smoothing import SmoothstepOrder


class PerlinNoise:
    """
    Seedable gradient noise generator with fractal (FBM) layering.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, seed: int = DEFAULTS.DEFAULT_SEED,
                 smoothstep_order=DEFAULTS.DEFAULT_SMOOTHSTEP_ORDER,
                 logger: logging.Logger = None):
        """
        Initializes the generator and performs the initial shuffle.

        Args:
            seed (int): The seed for the permutation table.
            smoothstep_order: The easing polynomial used for interpolation.
            logger (logging.Logger, optional): The logger instance for all output.
        """
        self.logger = logger or logging.getLogger(__name__)
        self._smoothstep_order = SmoothstepOrder.parse(smoothstep_order)
        self._random = LCGRandom(seed)
        self._seed = self._random.seed
        self._p = None
        self.shuffle_perm()

        self.logger.info(
            f"PerlinNoise initialized with seed: {self._seed}, "
            f"smoothstep order: {self._smoothstep_order.name.lower()}"
        )

    @classmethod
    def from_config(cls, config: dict, logger: logging.Logger = None) -> "PerlinNoise":
        """Creates a generator from a user dictionary, overriding the defaults."""
        return cls(
            seed=config.get('seed', DEFAULTS.DEFAULT_SEED),
            smoothstep_order=config.get('smoothstep_order', DEFAULTS.DEFAULT_SMOOTHSTEP_ORDER),
            logger=logger,
        )

    # --- Seed & Permutation Table ---

    @property
    def seed(self) -> int:
        return self._seed

    def get_seed(self) -> int:
        return self._seed

    def set_seed(self, value: int):
        """
        Replaces the random source and re-shuffles the table.
        Setting the current seed again is a no-op and leaves the table untouched.
        """
        if value == self._seed:
            self.logger.debug(f"Seed unchanged ({value}), keeping the current permutation table.")
            return
        self._random = LCGRandom(value)
        self._seed = self._random.seed
        self.shuffle_perm()
        self.logger.info(f"Seed changed to {self._seed}.")

    def shuffle_perm(self):
        """
        Re-shuffles the permutation table using the current random source.

        The source is not reset, so every call advances the LCG by another 255
        draws: shuffling twice gives a different table than shuffling once
        from a fresh seed.
        """
        table = shuffle_permutation(self._random)
        table.setflags(write=False)
        self._p = table
        self.logger.debug(f"Permutation table shuffled (LCG state: {self._random.state}).")

    @property
    def permutation_table(self) -> np.ndarray:
        """The current 512-entry permutation table (read-only)."""
        return self._p

    @property
    def random_source(self) -> LCGRandom:
        return self._random

    # --- Smoothing ---

    @property
    def smoothstep_order(self) -> SmoothstepOrder:
        return self._smoothstep_order

    @smoothstep_order.setter
    def smoothstep_order(self, value):
        order = SmoothstepOrder.parse(value)
        if order != self._smoothstep_order:
            self.logger.info(f"Smoothstep order changed to {order.name.lower()}.")
        self._smoothstep_order = order

    # --- Noise ---

    def _noise(self, *coords) -> float:
        point = np.array(coords, dtype=np.float64)
        return float(noise.lattice_noise(
            self._p, gradient_table(len(coords)), point, int(self._smoothstep_order)
        ))

    def noise1d(self, x: float) -> float:
        return self._noise(x)

    def noise2d(self, x: float, y: float) -> float:
        return self._noise(x, y)

    def noise3d(self, x: float, y: float, z: float) -> float:
        return self._noise(x, y, z)

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        return self._noise(x, y, z, w)

    # --- Fractal Noise ---

    def _fractal(self, coords, options) -> float:
        dims = len(coords)
        settings = FractalOptions.coerce(options).resolve(dims)
        point = np.array(coords, dtype=np.float64)
        return float(fractal.fractal_noise(
            self._p, gradient_table(dims), point, int(self._smoothstep_order), *settings
        ))

    def fractal_noise1d(self, x: float, options=None) -> float:
        """
        One-dimensional fractal noise.

        Args:
            x (float): The coordinate.
            options: FractalOptions, a dict of overrides, or None for the
                defaults (which reproduce noise1d exactly).

        Raises:
            ValueError: If options.octaves is below 1.
        """
        return self._fractal((x,), options)

    def fractal_noise2d(self, x: float, y: float, options=None) -> float:
        return self._fractal((x, y), options)

    def fractal_noise3d(self, x: float, y: float, z: float, options=None) -> float:
        return self._fractal((x, y, z), options)

    def fractal_noise4d(self, x: float, y: float, z: float, w: float, options=None) -> float:
        return self._fractal((x, y, z, w), options)

    # --- Batch Evaluation ---

    @staticmethod
    def _as_points(coords):
        """
        Broadcasts per-axis coordinate arrays together and packs them into a
        contiguous (n, dims) array, returning it with the broadcast shape.
        """
        if not 1 <= len(coords) <= DEFAULTS.MAX_DIMENSIONS:
            raise ValueError(
                f"Noise fields take 1 to {DEFAULTS.MAX_DIMENSIONS} coordinate arrays, got {len(coords)}"
            )
        try:
            arrays = np.broadcast_arrays(*[np.asarray(c, dtype=np.float64) for c in coords])
        except ValueError as e:
            raise ValueError(f"Coordinate arrays cannot be broadcast together: {e}") from e
        shape = arrays[0].shape
        points = np.ascontiguousarray(np.stack([a.ravel() for a in arrays], axis=-1))
        return points, shape

    def noise_field(self, *coords) -> np.ndarray:
        """
        Evaluates noise over NumPy coordinate arrays (e.g. from np.meshgrid).
        The number of arrays selects the dimension; every element equals the
        matching scalar noise call.
        """
        points, shape = self._as_points(coords)
        values = noise.noise_field(
            self._p, gradient_table(len(coords)), points, int(self._smoothstep_order)
        )
        return values.reshape(shape)

    def fractal_field(self, *coords, options=None) -> np.ndarray:
        """Fractal counterpart of noise_field()."""
        dims = len(coords)
        points, shape = self._as_points(coords)
        settings = FractalOptions.coerce(options).resolve(dims)
        values = fractal.fractal_field(
            self._p, gradient_table(dims), points, int(self._smoothstep_order), *settings
        )
        return values.reshape(shape)

    def __repr__(self):
        return f"PerlinNoise(seed={self._seed}, smoothstep_order={self._smoothstep_order.name})"
