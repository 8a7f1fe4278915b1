# grid_generator/noise.py

"""
================================================================================
NOISE SEEDING
================================================================================
Fills a grid with binary white noise, the usual starting point before the
smoothing passes turn it into a height field.

Data Contract:
---------------
- Inputs:
    - grid: A 2-D float array, modified in place.
    - seed: An int, a numpy.random.Generator, or None for fresh entropy.
- Outputs: None.
- Side Effects: Every cell is overwritten with 0.0 or 1.0.
- Invariants: The same integer seed and grid shape give the same grid.
================================================================================
"""

import logging

import numpy as np

from . import config as DEFAULTS
from .grid import require_grid

logger = logging.getLogger(__name__)


def seed_noise(grid: np.ndarray, seed=None) -> None:
    """Assigns every cell 0.0 or 1.0 independently, each with probability 0.5."""
    require_grid(grid)
    rng = np.random.default_rng(seed)
    coin = rng.integers(0, 2, size=grid.shape)
    grid[...] = np.where(coin == 1, DEFAULTS.NOISE_HIGH_VALUE, DEFAULTS.NOISE_LOW_VALUE)
    logger.debug(f"Seeded {grid.shape[1]}x{grid.shape[0]} grid with binary noise.")
