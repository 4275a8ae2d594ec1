# perlin_field/noise.py

"""
================================================================================
NOISE GENERATION KERNELS
================================================================================
This module provides the compiled gradient noise kernel shared by every
dimension from 1D to 4D. It is designed to be a pure, stateless utility.

Data Contract:
---------------
- Inputs:
    - p: A shuffled, doubled NumPy permutation table (512 ints).
    - gradients: The gradient set for the dimension, shape (count, dims).
    - coords: A float64 array holding one coordinate per axis, or an
      (n, dims) array of points for the field kernel.
    - order: The integer value of a SmoothstepOrder.
- Outputs:
    - Noise values, nominally in [-1, 1] (not clamped).
- Side Effects: None.
- Invariants:
    - A point whose coordinates are all integers evaluates to exactly 0.
    - Corner hashes chain axis 0 innermost: p[p[p[x] + y] + z] ...
    - Interpolation folds axis 0 first, so the last axis is the outermost
      lerp: lerp(uw, lerp(uz, lerp(uy, lerp(ux, ...)))).
================================================================================
"""

import numpy as np
from numba import njit

from .smoothing import _smoothstep


@njit
def _lerp(u, a, b):
    "Linear interpolation."
    return a + u * (b - a)


@njit
def _gradient(gradients, h, offsets):
    """Calculates the dot product between a gradient vector and the corner offset."""
    g = gradients[h % gradients.shape[0]]
    total = 0.0
    for k in range(offsets.shape[0]):
        total += g[k] * offsets[k]
    return total


@njit
def lattice_noise(p, gradients, coords, order):
    """
    Evaluates gradient noise at a single point of any dimension.

    Corner index bit k selects the +1 branch on axis k, so corner 0 is the
    cell origin and corner 2**dims - 1 is the opposite corner.
    """
    dims = coords.shape[0]
    cells = np.empty(dims, dtype=np.int64)
    fracs = np.empty(dims)
    weights = np.empty(dims)

    for k in range(dims):
        cell = np.floor(coords[k])
        fracs[k] = coords[k] - cell
        weights[k] = _smoothstep(fracs[k], order)
        # Floor modulo keeps negative cells in 0..255.
        cells[k] = int(cell) % 256

    corners = 1 << dims
    values = np.empty(corners)
    offsets = np.empty(dims)

    for corner in range(corners):
        h = 0
        for k in range(dims):
            bit = (corner >> k) & 1
            h = p[h + cells[k] + bit] if k > 0 else p[cells[k] + bit]
            offsets[k] = fracs[k] - bit
        values[corner] = _gradient(gradients, h, offsets)

    # Fold pairs that differ in the lowest remaining axis bit.
    size = corners
    for k in range(dims):
        size >>= 1
        for j in range(size):
            values[j] = _lerp(weights[k], values[2 * j], values[2 * j + 1])

    return values[0]


@njit
def noise_field(p, gradients, points, order):
    """
    Evaluates gradient noise for every row of an (n, dims) array of points.
    It uses explicit loops, which Numba compiles to efficient machine code.
    """
    n = points.shape[0]
    out = np.empty(n)
    for i in range(n):
        out[i] = lattice_noise(p, gradients, points[i], order)
    return out
