# perlin_field/gradients.py

"""
================================================================================
GRADIENT TABLES
================================================================================
Fixed gradient sets for 1D through 4D noise. A hashed lattice corner selects
one entry with `hash % count`; its contribution is the dot product of that
entry with the offset from the corner to the query point.

These are published constants. Every table is stored as a read-only float64
array of shape (count, dims) so one compiled kernel can serve all dimensions.
================================================================================
"""

import numpy as np

# 17 scalars: 1/4 .. 8/4, then 0, then -1/4 .. -8/4.
GRADIENTS_1D = np.array(
    [[k / 4.0] for k in range(1, 9)] + [[0.0]] + [[-k / 4.0] for k in range(1, 9)],
    dtype=np.float64,
)

GRADIENTS_2D = np.array([
    [-1.0, -1.0],
    [1.0, -1.0],
    [-1.0, 1.0],
    [1.0, 1.0],
    [0.0, -1.0],
    [-1.0, 0.0],
    [0.0, 1.0],
    [1.0, 0.0],
], dtype=np.float64)

# Midpoints of the cube edges: the xy, xz and yz planes.
GRADIENTS_3D = np.array([
    [1.0, 1.0, 0.0],
    [-1.0, 1.0, 0.0],
    [1.0, -1.0, 0.0],
    [-1.0, -1.0, 0.0],
    [1.0, 0.0, 1.0],
    [-1.0, 0.0, 1.0],
    [1.0, 0.0, -1.0],
    [-1.0, 0.0, -1.0],
    [0.0, 1.0, 1.0],
    [0.0, -1.0, 1.0],
    [0.0, 1.0, -1.0],
    [0.0, -1.0, -1.0],
], dtype=np.float64)

GRADIENTS_4D = np.array([
    # The (0,1) axis pair
    [1.0, 1.0, 0.0, 0.0],
    [1.0, -1.0, 0.0, 0.0],
    [-1.0, 1.0, 0.0, 0.0],
    [-1.0, -1.0, 0.0, 0.0],
    # The (0,2) axis pair
    [1.0, 0.0, 1.0, 0.0],
    [1.0, 0.0, -1.0, 0.0],
    [-1.0, 0.0, 1.0, 0.0],
    [-1.0, 0.0, -1.0, 0.0],
    # The (0,3) axis pair
    [1.0, 0.0, 0.0, 1.0],
    [1.0, 0.0, 0.0, -1.0],
    [-1.0, 0.0, 0.0, 1.0],
    [-1.0, 0.0, 0.0, -1.0],
    # The (1,2) axis pair
    [0.0, 1.0, 1.0, 0.0],
    [0.0, 1.0, -1.0, 0.0],
    [0.0, -1.0, 1.0, 0.0],
    [0.0, -1.0, -1.0, 0.0],
    # The (1,3) axis pair
    [0.0, 1.0, 0.0, 1.0],
    [0.0, 1.0, 0.0, -1.0],
    [0.0, -1.0, 0.0, 1.0],
    [0.0, -1.0, 0.0, -1.0],
    # The (2,3) axis pair
    [0.0, 0.0, 1.0, 1.0],
    [0.0, 0.0, 1.0, -1.0],
    [0.0, 0.0, -1.0, 1.0],
    [0.0, 0.0, -1.0, -1.0],
], dtype=np.float64)

_TABLES = {
    1: GRADIENTS_1D,
    2: GRADIENTS_2D,
    3: GRADIENTS_3D,
    4: GRADIENTS_4D,
}

for _table in _TABLES.values():
    _table.setflags(write=False)


def gradient_table(dims: int) -> np.ndarray:
    """Returns the gradient set for a dimension in 1..4."""
    try:
        return _TABLES[dims]
    except KeyError:
        raise ValueError(f"Noise is defined for 1 to 4 dimensions, got {dims}") from None
