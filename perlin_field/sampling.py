# perlin_field/sampling.py

"""
Helpers for building coordinate grids to feed PerlinNoise.noise_field() and
PerlinNoise.fractal_field().
"""

import numpy as np


def _per_axis(value, dims: int, name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0:
        return np.full(dims, float(arr))
    if arr.shape != (dims,):
        raise ValueError(f"{name} needs {dims} components, got shape {arr.shape}")
    return arr


def sample_grid(shape, scale=1.0, origin=0.0):
    """
    Builds per-axis coordinate arrays for a regular grid.

    Point (i, j, ...) lies at origin + index * scale on every axis, so a scale
    of 1.0 with an integer origin lands on lattice points only.

    Args:
        shape (int | tuple[int, ...]): Points per axis; its length (1 to 4)
            is the dimension of the grid.
        scale (float | sequence): Spacing between neighbouring points.
        origin (float | sequence): Coordinate of the first point.

    Returns:
        A tuple of arrays (one per axis), each of the given shape, indexed
        'ij' so axis 0 of every array follows the first coordinate.
    """
    if isinstance(shape, int):
        shape = (shape,)
    shape = tuple(int(n) for n in shape)
    dims = len(shape)
    if not 1 <= dims <= 4:
        raise ValueError(f"Grids are defined for 1 to 4 dimensions, got {dims}")
    if any(n < 0 for n in shape):
        raise ValueError(f"Grid shape must not be negative, got {shape}")

    scale = _per_axis(scale, dims, 'scale')
    origin = _per_axis(origin, dims, 'origin')

    axes = [origin[k] + np.arange(shape[k]) * scale[k] for k in range(dims)]
    return tuple(np.meshgrid(*axes, indexing='ij'))
