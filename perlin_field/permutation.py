# perlin_field/permutation.py

"""
================================================================================
PERMUTATION TABLE
================================================================================
The hash lookup used to pick a gradient for every lattice corner. A fixed base
permutation of 0..255 is Fisher-Yates shuffled with the seeded LCG and then
concatenated with itself, giving a 512-entry table that can be indexed with
(cell + 1) without wrapping a second time.

Data Contract:
---------------
- Inputs:
    - rng: An LCGRandom (or any object with a next() -> float in [0, 1)).
- Outputs:
    - A NumPy int64 array of length 512 with entries in [0, 255].
- Side Effects: Advances the random source by exactly 255 draws.
- Invariants:
    - table[:256] is a permutation of 0..255.
    - table[256:] == table[:256].
    - The same random source state always yields the same table.
================================================================================
"""

import numpy as np

from . import config as DEFAULTS

# Ken Perlin's reference permutation. Seed compatibility depends on these
# exact values in this exact order.
BASE_PERMUTATION = np.array([
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
], dtype=np.int64)
BASE_PERMUTATION.setflags(write=False)


def shuffle_permutation(rng) -> np.ndarray:
    """
    Builds a fresh working table from the base permutation.

    The shuffle always starts from BASE_PERMUTATION, never from a previous
    table, so only the random source state decides the result.
    """
    p = BASE_PERMUTATION.copy()

    # Fisher-Yates, descending: one draw per position from 255 down to 1.
    for i in range(DEFAULTS.PERMUTATION_SIZE - 1, 0, -1):
        n = int(rng.next() * (i + 1))
        p[i], p[n] = p[n], p[i]

    return np.stack([p, p]).flatten()


def is_valid_table(table: np.ndarray) -> bool:
    """Checks the permutation and doubling invariants of a working table."""
    size = DEFAULTS.PERMUTATION_SIZE
    if table.shape != (DEFAULTS.PERMUTATION_TABLE_SIZE,):
        return False
    first, second = table[:size], table[size:]
    return bool(np.array_equal(np.sort(first), np.arange(size)) and np.array_equal(first, second))
