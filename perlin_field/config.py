# perlin_field/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
engine. These values are used if they are not explicitly provided by the
caller's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC PROJECT.
Instead, pass a configuration dictionary to PerlinNoise.from_config() or
FractalOptions.from_config().
================================================================================
"""

# --- Seeding ---
DEFAULT_SEED = 1335

# --- Linear Congruential Generator (Numerical Recipes constants) ---
# Changing any of these breaks seed compatibility with existing content.
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32

# --- Permutation Table ---
# The base permutation holds 0..255; the working table is twice as long so
# that a +1 corner offset never needs a second wrap.
PERMUTATION_SIZE = 256
PERMUTATION_TABLE_SIZE = PERMUTATION_SIZE * 2

# --- Smoothing ---
# One of "linear", "cubic" or "quintic". Quintic is C2 continuous.
DEFAULT_SMOOTHSTEP_ORDER = "quintic"

# --- Fractal (FBM) Defaults ---
# With these values a fractal call is identical to a plain noise call.
FRACTAL_OCTAVES = 1
FRACTAL_AMPLITUDE = 1.0
FRACTAL_PERSISTENCE = 1.0
FRACTAL_FREQUENCY = 1.0
FRACTAL_LACUNARITY = 1.0
FRACTAL_OFFSET = 0.0

# Axis names used by mapping-style per-axis options, in coordinate order.
AXIS_NAMES = ("x", "y", "z", "w")
MAX_DIMENSIONS = len(AXIS_NAMES)

# --- Probe (noise_probe.py) ---
# Points per axis for each dimension; kept small for the 3D and 4D grids.
PROBE_GRID_SIZES = {1: 4096, 2: 256, 3: 40, 4: 16}
# Sample spacing in lattice units. An irrational-looking step avoids landing
# on integer coordinates, where every value is exactly zero.
PROBE_SCALE = 0.137
# Tolerance added to the nominal [-1, 1] range when checking bounds. Off-centre
# peaks of 3D and 4D noise reach slightly past 1 (about 1.04 in 3D).
PROBE_BOUND_SLACK = 0.1
# Number of integer lattice points checked per dimension.
PROBE_LATTICE_POINTS = 64
