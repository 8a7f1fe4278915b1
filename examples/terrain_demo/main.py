# examples/terrain_demo/main.py

"""
Builds a small island-like height field from binary noise and prints the
diagnostic rendering of every stage.
"""

import logging
import os
import sys

# 'examples' is not part of the package, so add the project root to the path.
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from grid_generator import (
    Axis,
    GridConfig,
    SmoothingKind,
    apply_configured_smoothing,
    mirror,
    pull_to_peaks,
    seed_noise,
    smooth_rectangle,
)

# --- Demo Constants ---
DEMO_SEED = 1337
DEMO_WIDTH = 32
DEMO_HEIGHT = 16
TERRACE_LEVELS = [0.25, 0.5, 0.75]
TERRACE_RANGE = 0.1
TERRACE_STRENGTH = 0.6


def run_demo():
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
    logger = logging.getLogger("TerrainDemo")

    grid_config = GridConfig(DEMO_WIDTH, DEMO_HEIGHT, radius=2, strength=1.0,
                             kind=SmoothingKind.CIRCLE, logger=logger)

    seed_noise(grid_config.grid, seed=DEMO_SEED)
    logger.info(f"Noise:\n{grid_config}")

    apply_configured_smoothing(grid_config)
    smooth_rectangle(grid_config.grid, 3, 3)
    logger.info(f"Smoothed:\n{grid_config}")

    pull_to_peaks(grid_config.grid, TERRACE_LEVELS, TERRACE_RANGE, TERRACE_STRENGTH)
    mirror(grid_config.grid, Axis.VERTICAL)
    logger.info(f"Terraced and mirrored:\n{grid_config}")


if __name__ == '__main__':
    run_demo()
