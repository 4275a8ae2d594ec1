# ==============================================================================
# File: tests/test_noise.py
# Purpose: Unit tests for the lattice noise kernel in 1D to 4D.
# ==============================================================================
import itertools
import math
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from perlin_field.generator import PerlinNoise
from perlin_field.gradients import GRADIENTS_1D, GRADIENTS_2D, GRADIENTS_3D
from perlin_field.smoothing import SmoothstepOrder

BOUND = 1.1


def _quintic(t):
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(u, a, b):
    return a + u * (b - a)


def reference_noise1d(p, x):
    """Straight-line 1D evaluation with quintic smoothing."""
    xi = math.floor(x)
    xf = x - xi
    u = _quintic(xf)
    a = p[xi % 256]
    b = p[(xi + 1) % 256]
    va = GRADIENTS_1D[a % 17][0] * xf
    vb = GRADIENTS_1D[b % 17][0] * (xf - 1)
    return _lerp(u, va, vb)


def reference_noise2d(p, x, y):
    """Hand-expanded 2D evaluation: x hashed innermost, y interpolated outermost."""
    xi, yi = math.floor(x), math.floor(y)
    xf, yf = x - xi, y - yi
    ux, uy = _quintic(xf), _quintic(yf)
    xi, yi = xi % 256, yi % 256

    def grad(h, dx, dy):
        g = GRADIENTS_2D[h % 8]
        return g[0] * dx + g[1] * dy

    aa = p[p[xi] + yi]
    ab = p[p[xi] + yi + 1]
    ba = p[p[xi + 1] + yi]
    bb = p[p[xi + 1] + yi + 1]
    return _lerp(
        uy,
        _lerp(ux, grad(aa, xf, yf), grad(ba, xf - 1, yf)),
        _lerp(ux, grad(ab, xf, yf - 1), grad(bb, xf - 1, yf - 1)),
    )


def reference_noise3d(p, x, y, z):
    """Hand-expanded 3D evaluation: trilinear interpolation z -> y -> x."""
    xi, yi, zi = math.floor(x), math.floor(y), math.floor(z)
    xf, yf, zf = x - xi, y - yi, z - zi
    ux, uy, uz = _quintic(xf), _quintic(yf), _quintic(zf)
    xi, yi, zi = xi % 256, yi % 256, zi % 256

    def grad(h, dx, dy, dz):
        g = GRADIENTS_3D[h % 12]
        return g[0] * dx + g[1] * dy + g[2] * dz

    n = {}
    for a, b, c in itertools.product((0, 1), repeat=3):
        h = p[p[p[xi + a] + yi + b] + zi + c]
        n[a, b, c] = grad(h, xf - a, yf - b, zf - c)
    return _lerp(
        uz,
        _lerp(uy, _lerp(ux, n[0, 0, 0], n[1, 0, 0]), _lerp(ux, n[0, 1, 0], n[1, 1, 0])),
        _lerp(uy, _lerp(ux, n[0, 0, 1], n[1, 0, 1]), _lerp(ux, n[0, 1, 1], n[1, 1, 1])),
    )


class TestZeroAtLattice(unittest.TestCase):
    """Every integer point evaluates to exactly zero, in every dimension."""

    def setUp(self):
        self.perlin = PerlinNoise()

    def test_default_generator_scenario(self):
        self.assertEqual(self.perlin.noise1d(0), 0)
        self.assertEqual(self.perlin.noise2d(0, 0), 0)

    def test_integer_points(self):
        values = range(-3, 4)
        for x in values:
            self.assertEqual(self.perlin.noise1d(x), 0.0)
        for x, y in itertools.product(values, repeat=2):
            self.assertEqual(self.perlin.noise2d(x, y), 0.0)
        for x, y, z in itertools.product((-2, 0, 5), repeat=3):
            self.assertEqual(self.perlin.noise3d(x, y, z), 0.0)
        for x, y, z, w in itertools.product((-1, 0, 300), repeat=4):
            self.assertEqual(self.perlin.noise4d(x, y, z, w), 0.0)

    def test_large_integer_points_for_every_order(self):
        for order in SmoothstepOrder:
            self.perlin.smoothstep_order = order
            self.assertEqual(self.perlin.noise4d(1000, -257, 256, 65536), 0.0)
            self.assertEqual(self.perlin.noise3d(-1024.0, 7.0, 12345.0), 0.0)


class TestBoundedOutput(unittest.TestCase):

    def test_grid_values_are_bounded(self):
        perlin = PerlinNoise(seed=4242)
        steps = np.arange(-3.0, 3.0, 0.173)
        for x in np.arange(-20.0, 20.0, 0.0371):
            self.assertLessEqual(abs(perlin.noise1d(x)), BOUND)
        for x, y in itertools.product(steps, repeat=2):
            self.assertLessEqual(abs(perlin.noise2d(x, y)), BOUND)
        coarse = np.arange(-2.0, 2.0, 0.29)
        for x, y, z in itertools.product(coarse, repeat=3):
            self.assertLessEqual(abs(perlin.noise3d(x, y, z)), BOUND)
        coarser = np.arange(-1.0, 1.0, 0.31)
        for x, y, z, w in itertools.product(coarser, repeat=4):
            self.assertLessEqual(abs(perlin.noise4d(x, y, z, w)), BOUND)

    def test_noise_is_not_constant(self):
        perlin = PerlinNoise()
        values = {perlin.noise2d(x * 0.37, 0.5) for x in range(20)}
        self.assertGreater(len(values), 10)


class TestReferenceEvaluation(unittest.TestCase):
    """The generic kernel matches the hand-expanded evaluation order."""

    def setUp(self):
        self.perlin = PerlinNoise(seed=31337)
        self.p = [int(v) for v in self.perlin.permutation_table]

    def test_1d_matches_reference(self):
        for x in (0.5, 1.25, 17.9, 254.7, 255.5, 300.01):
            self.assertAlmostEqual(self.perlin.noise1d(x), reference_noise1d(self.p, x), places=12)

    def test_2d_matches_reference(self):
        for x, y in ((0.5, 0.5), (1.3, 2.7), (10.25, 3.75), (255.5, 255.5), (100.1, 0.9)):
            self.assertAlmostEqual(self.perlin.noise2d(x, y), reference_noise2d(self.p, x, y), places=12)

    def test_3d_matches_reference(self):
        for x, y, z in ((0.5, 0.5, 0.5), (1.3, 2.7, 3.1), (255.9, 0.1, 128.4)):
            self.assertAlmostEqual(self.perlin.noise3d(x, y, z), reference_noise3d(self.p, x, y, z), places=12)

    def test_negative_coordinates_wrap_with_period_256(self):
        for x, y in ((-0.5, -0.25), (-3.3, 1.7), (-100.6, -200.2)):
            self.assertAlmostEqual(self.perlin.noise2d(x, y), self.perlin.noise2d(x + 256, y + 256), places=9)
            self.assertAlmostEqual(self.perlin.noise2d(x, y), reference_noise2d(self.p, x, y), places=12)


class TestDeterminismAndContinuity(unittest.TestCase):

    def test_same_seed_same_values(self):
        a, b = PerlinNoise(seed=99), PerlinNoise(seed=99)
        for x, y, z, w in ((0.1, 0.2, 0.3, 0.4), (5.5, -1.25, 3.75, 9.1)):
            self.assertEqual(a.noise1d(x), b.noise1d(x))
            self.assertEqual(a.noise2d(x, y), b.noise2d(x, y))
            self.assertEqual(a.noise3d(x, y, z), b.noise3d(x, y, z))
            self.assertEqual(a.noise4d(x, y, z, w), b.noise4d(x, y, z, w))

    def test_different_seeds_give_different_fields(self):
        a, b = PerlinNoise(seed=1), PerlinNoise(seed=2)
        points = [(x * 0.37 + 0.1, x * 0.59 + 0.2) for x in range(32)]
        self.assertTrue(any(a.noise2d(*pt) != b.noise2d(*pt) for pt in points))

    def test_small_steps_give_small_changes(self):
        perlin = PerlinNoise()
        eps = 1e-6
        for x, y, z, w in ((0.3, 0.7, 1.1, 2.9), (4.999999, 2.000001, 0.5, 0.5)):
            self.assertAlmostEqual(perlin.noise4d(x, y, z, w), perlin.noise4d(x + eps, y, z, w), places=4)
            self.assertAlmostEqual(perlin.noise3d(x, y, z), perlin.noise3d(x, y + eps, z), places=4)

    def test_linear_order_changes_interior_values(self):
        perlin = PerlinNoise()
        quintic = perlin.noise2d(0.3, 0.6)
        perlin.smoothstep_order = SmoothstepOrder.LINEAR
        self.assertNotEqual(perlin.noise2d(0.3, 0.6), quintic)


if __name__ == '__main__':
    unittest.main()
