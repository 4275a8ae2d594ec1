# perlin_field/fractal.py

"""
================================================================================
FRACTAL NOISE (FBM)
================================================================================
Layers several octaves of gradient noise, growing the frequency of every axis
by its lacunarity and shrinking the amplitude by the persistence after each
octave. The sum is normalised by the total amplitude, so the result stays in
the nominal range of the base noise.

Data Contract:
---------------
- Inputs:
    - FractalOptions: octaves (>= 1), amplitude, persistence and per-axis
      frequency, lacunarity and offset vectors.
- Outputs:
    - A float (or float array for the field kernel).
- Side Effects: None.
- Invariants: With the default options (one octave, unit amplitude and
  frequency, zero offset) the result equals the plain noise value exactly.
================================================================================
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .noise import lattice_noise

AxisValue = Union[float, tuple, list, Mapping]


@dataclass
class FractalOptions:
    """
    Configuration of fractal noise.

    Per-axis fields (frequency, lacunarity, offset) accept a scalar shared by
    all axes, a sequence with one entry per axis, or a mapping keyed by axis
    name ('x', 'y', 'z', 'w'). They are resolved against the dimension of the
    call in axis_vector().

    Typical settings:
        - Terrain: many octaves, low persistence.
        - Clouds: few octaves, high lacunarity.
        - Organic tissue: moderate persistence plus an offset.
    """
    octaves: int = DEFAULTS.FRACTAL_OCTAVES
    amplitude: float = DEFAULTS.FRACTAL_AMPLITUDE
    persistence: float = DEFAULTS.FRACTAL_PERSISTENCE
    frequency: AxisValue = DEFAULTS.FRACTAL_FREQUENCY
    lacunarity: AxisValue = DEFAULTS.FRACTAL_LACUNARITY
    offset: AxisValue = DEFAULTS.FRACTAL_OFFSET

    @classmethod
    def from_config(cls, config: dict) -> "FractalOptions":
        """Builds options from a user dictionary, falling back to the defaults."""
        return cls(
            octaves=config.get('octaves', DEFAULTS.FRACTAL_OCTAVES),
            amplitude=config.get('amplitude', DEFAULTS.FRACTAL_AMPLITUDE),
            persistence=config.get('persistence', DEFAULTS.FRACTAL_PERSISTENCE),
            frequency=config.get('frequency', DEFAULTS.FRACTAL_FREQUENCY),
            lacunarity=config.get('lacunarity', DEFAULTS.FRACTAL_LACUNARITY),
            offset=config.get('offset', DEFAULTS.FRACTAL_OFFSET),
        )

    @classmethod
    def coerce(cls, options) -> "FractalOptions":
        """Accepts None, a FractalOptions instance or a plain dict."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_config(options)
        raise TypeError(f"Expected FractalOptions, dict or None, got {type(options).__name__}")

    def octave_count(self) -> int:
        """
        Number of octaves the summation runs for.

        Raises:
            ValueError: If octaves is below 1.
        """
        if self.octaves < 1:
            raise ValueError(f"Fractal noise needs at least 1 octave, got {self.octaves}")
        # The summation runs while i < octaves, so a fractional count rounds up.
        return int(math.ceil(self.octaves))

    def axis_vector(self, name: str, dims: int) -> np.ndarray:
        """Resolves one per-axis field to a float64 array of length dims."""
        value = getattr(self, name)
        default = getattr(DEFAULTS, f"FRACTAL_{name.upper()}")

        if isinstance(value, Mapping):
            axes = DEFAULTS.AXIS_NAMES[:dims]
            unknown = set(value) - set(axes)
            if unknown:
                raise ValueError(
                    f"Unknown axis names for {name} in {dims}D noise: {sorted(unknown)}"
                )
            return np.array([value.get(axis, default) for axis in axes], dtype=np.float64)

        if isinstance(value, (list, tuple, np.ndarray)):
            if len(value) != dims:
                raise ValueError(f"{name} needs {dims} components, got {len(value)}")
            return np.array(value, dtype=np.float64)

        return np.full(dims, float(value), dtype=np.float64)

    def resolve(self, dims: int):
        """
        Validates the options and returns the plain values the kernel expects:
        (octaves, amplitude, persistence, frequency, lacunarity, offset).
        """
        octaves = self.octave_count()
        return (
            octaves,
            float(self.amplitude),
            float(self.persistence),
            self.axis_vector('frequency', dims),
            self.axis_vector('lacunarity', dims),
            self.axis_vector('offset', dims),
        )


@njit
def fractal_noise(p, gradients, coords, order, octaves, amplitude, persistence,
                  frequency, lacunarity, offset):
    """Sums octaves of lattice noise at a single point and normalises the total."""
    dims = coords.shape[0]
    sample = np.empty(dims)
    current_frequency = frequency.copy()
    current_amplitude = amplitude
    total = 0.0
    max_value = 0.0

    for i in range(octaves):
        for k in range(dims):
            sample[k] = (coords[k] + i * offset[k]) * current_frequency[k]

        total += lattice_noise(p, gradients, sample, order) * current_amplitude
        max_value += current_amplitude

        for k in range(dims):
            current_frequency[k] *= lacunarity[k]
        current_amplitude *= persistence

    return total / max_value


@njit
def fractal_field(p, gradients, points, order, octaves, amplitude, persistence,
                  frequency, lacunarity, offset):
    """Fractal noise for every row of an (n, dims) array of points."""
    n = points.shape[0]
    out = np.empty(n)
    for i in range(n):
        out[i] = fractal_noise(p, gradients, points[i], order, octaves, amplitude,
                               persistence, frequency, lacunarity, offset)
    return out
