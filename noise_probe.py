# noise_probe.py

"""
================================================================================
NOISE PROBE SCRIPT
================================================================================
A command-line tool that samples the noise engine over a grid in every
dimension from 1D to 4D and checks the field's basic guarantees:

    - Every value lies within [-1, 1] (plus a small floating-point slack).
    - Every integer lattice point evaluates to exactly 0.

Statistics for each dimension are logged; the exit status is non-zero if any
check fails.

Usage:
    python noise_probe.py
    python noise_probe.py --config path/to/your/config.json

The optional JSON config may contain 'seed', 'smoothstep_order', 'scale',
'grid_sizes' (mapping of dimension to points per axis) and 'fractal' (a dict
of fractal options; when present the fractal field is probed instead).
================================================================================
"""
import os
import sys
import json
import logging
import argparse

import numpy as np
from tqdm import tqdm

# Add project root to Python path to allow importing from perlin_field
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from perlin_field.generator import PerlinNoise
from perlin_field.sampling import sample_grid
from perlin_field import config as DEFAULTS


def probe_dimension(generator: PerlinNoise, dims: int, grid_size: int, scale: float,
                    fractal_options: dict, logger: logging.Logger) -> dict:
    """Samples one dimension and returns its statistics and check results."""
    # Shift the grid by half a step so no sample sits on the origin lattice point.
    coords = sample_grid((grid_size,) * dims, scale=scale, origin=scale / 2.0)
    if fractal_options is not None:
        values = generator.fractal_field(*coords, options=fractal_options)
    else:
        values = generator.noise_field(*coords)

    bound = 1.0 + DEFAULTS.PROBE_BOUND_SLACK
    in_bounds = bool(np.all(np.abs(values) <= bound))

    # Integer lattice points drawn deterministically from the generator's seed.
    rng = np.random.default_rng(generator.seed)
    lattice = rng.integers(-512, 512, size=(DEFAULTS.PROBE_LATTICE_POINTS, dims))
    lattice_values = generator.noise_field(*[lattice[:, k] for k in range(dims)])
    zero_at_lattice = bool(np.all(lattice_values == 0.0))

    stats = {
        'dims': dims,
        'samples': int(values.size),
        'min': float(values.min()),
        'max': float(values.max()),
        'mean': float(values.mean()),
        'in_bounds': in_bounds,
        'zero_at_lattice': zero_at_lattice,
    }
    logger.info(
        f"  - {dims}D: {stats['samples']} samples, min={stats['min']:.4f}, "
        f"max={stats['max']:.4f}, mean={stats['mean']:.4f} -> "
        f"bounds {'PASS' if in_bounds else 'FAIL'}, lattice {'PASS' if zero_at_lattice else 'FAIL'}"
    )
    return stats


def run_probe(config: dict, logger: logging.Logger) -> bool:
    """Runs the probe for dimensions 1 to 4. Returns True if every check passed."""
    generator = PerlinNoise.from_config(config, logger=logger)
    scale = config.get('scale', DEFAULTS.PROBE_SCALE)
    grid_sizes = dict(DEFAULTS.PROBE_GRID_SIZES)
    grid_sizes.update({int(k): int(v) for k, v in config.get('grid_sizes', {}).items()})
    fractal_options = config.get('fractal')

    logger.info(f"Probing {'fractal' if fractal_options is not None else 'plain'} noise...")
    results = []
    for dims in tqdm(range(1, DEFAULTS.MAX_DIMENSIONS + 1), desc="Probing dimensions"):
        results.append(probe_dimension(generator, dims, grid_sizes[dims], scale, fractal_options, logger))

    all_passed = all(r['in_bounds'] and r['zero_at_lattice'] for r in results)
    logger.info("--- Probe Complete ---")
    if all_passed:
        logger.info("SUCCESS: All dimensions are bounded and vanish on the lattice.")
    else:
        logger.error("FAILURE: One or more checks failed.")
    return all_passed


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sanity probe for the perlin_field noise engine.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to an optional JSON configuration file."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logger = logging.getLogger("NoiseProbe")

    config = {}
    if args.config:
        logger.info(f"Loading probe config from '{args.config}'...")
        try:
            with open(args.config, 'r') as f:
                config = json.load(f)
        except FileNotFoundError:
            logger.critical(f"Config file not found: '{args.config}'.")
            return 2

    return 0 if run_probe(config, logger) else 1


if __name__ == '__main__':
    sys.exit(main())
