# perlin_field/__init__.py

# This file makes the 'perlin_field' directory a Python package.
# We also use it to define the public API of the package.

from .fractal import FractalOptions
from .generator import PerlinNoise
from .gradients import GRADIENTS_1D, GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D, gradient_table
from .permutation import BASE_PERMUTATION, shuffle_permutation
from .random_source import LCGRandom
from .sampling import sample_grid
from .smoothing import SmoothstepOrder, smoothstep

__all__ = [
    "PerlinNoise",
    "FractalOptions",
    "SmoothstepOrder",
    "smoothstep",
    "LCGRandom",
    "BASE_PERMUTATION",
    "shuffle_permutation",
    "GRADIENTS_1D",
    "GRADIENTS_2D",
    "GRADIENTS_3D",
    "GRADIENTS_4D",
    "gradient_table",
    "sample_grid",
]
