# grid_generator/smoothing.py

"""
================================================================================
LOCAL AVERAGING (SMOOTHING)
================================================================================
This module provides the circular and rectangular local-average filters. The
per-cell loops are JIT-compiled with Numba, in the same way as the Perlin
noise kernel of the world generator.

Data Contract:
---------------
- Inputs:
    - grid: A 2-D float array laid out as grid[y, x].
    - x, y: Integer cell coordinates of the window centre.
    - radius / width, height: Integer window sizes.
- Outputs:
    - average_*: The mean of the in-bounds cells of the window, as a float.
    - smooth_*: None. The grid is replaced with the averaged grid.
- Boundary Policy: Out-of-bounds cells are skipped (clipped), never treated
  as zero. A window with no in-bounds cells averages to 0.0.
- Invariants: A smoothing pass only reads the grid as it was before the
  pass; the result is written back in a single assignment.
================================================================================
"""

import logging

import numpy as np
from numba import njit

from .grid import require_grid, require_integer

logger = logging.getLogger(__name__)


@njit
def _average_circle(grid, x, y, radius):
    """Mean over the filled disk i*i + j*j <= radius*radius around (x, y)."""
    rows, cols = grid.shape
    radius_sq = radius * radius
    total = 0.0
    count = 0

    for j in range(-radius, radius + 1):
        cy = y + j
        if cy < 0 or cy >= rows:
            continue
        for i in range(-radius, radius + 1):
            if i * i + j * j > radius_sq:
                continue
            cx = x + i
            if cx >= 0 and cx < cols:
                total += grid[cy, cx]
                count += 1

    if count > 0:
        return total / count
    return 0.0


@njit
def _window_bounds(center, size):
    # Odd sizes put the extra cell on the high side.
    half = size // 2
    return center - half, center + half + size % 2


@njit
def _average_rectangle(grid, x, y, width, height):
    """Mean over the width x height window centred on (x, y)."""
    rows, cols = grid.shape
    start_x, end_x = _window_bounds(x, width)
    start_y, end_y = _window_bounds(y, height)

    # Clip the window to the grid; an inverted range simply yields no cells.
    start_x = max(start_x, 0)
    start_y = max(start_y, 0)
    end_x = min(end_x, cols)
    end_y = min(end_y, rows)

    total = 0.0
    count = 0
    for cy in range(start_y, end_y):
        for cx in range(start_x, end_x):
            total += grid[cy, cx]
            count += 1

    if count > 0:
        return total / count
    return 0.0


@njit
def _smooth_circle_pass(grid, radius):
    rows, cols = grid.shape
    smoothed = np.empty_like(grid)
    for y in range(rows):
        for x in range(cols):
            smoothed[y, x] = _average_circle(grid, x, y, radius)
    return smoothed


@njit
def _smooth_rectangle_pass(grid, width, height):
    rows, cols = grid.shape
    smoothed = np.empty_like(grid)
    for y in range(rows):
        for x in range(cols):
            smoothed[y, x] = _average_rectangle(grid, x, y, width, height)
    return smoothed


def average_circle(grid: np.ndarray, x: int, y: int, radius: int) -> float:
    """
    Averages the cells of a filled disk centred on (x, y).

    Args:
        grid (np.ndarray): The grid to read, laid out as grid[y, x].
        x (int): Column of the disk centre.
        y (int): Row of the disk centre.
        radius (int): Disk radius in cells. A negative radius gives an empty disk.

    Returns:
        float: The mean of the in-bounds disk cells, or 0.0 if there are none.
    """
    require_grid(grid)
    x = require_integer("x", x)
    y = require_integer("y", y)
    radius = require_integer("radius", radius)
    return float(_average_circle(grid, x, y, radius))


def average_rectangle(grid: np.ndarray, x: int, y: int, width: int, height: int) -> float:
    """
    Averages the cells of a width x height window centred on (x, y).

    For an even size the window covers size // 2 cells on each side of the
    centre with an exclusive end; an odd size adds one cell on the high side.
    """
    require_grid(grid)
    x = require_integer("x", x)
    y = require_integer("y", y)
    width = require_integer("width", width)
    height = require_integer("height", height)
    return float(_average_rectangle(grid, x, y, width, height))


def smooth_circle(grid: np.ndarray, radius: int) -> None:
    """Replaces every cell with the circular average of the unsmoothed grid around it."""
    require_grid(grid)
    radius = require_integer("radius", radius)
    logger.debug(f"Circle smoothing {grid.shape[1]}x{grid.shape[0]} grid with radius {radius}.")
    grid[...] = _smooth_circle_pass(grid, radius)


def smooth_rectangle(grid: np.ndarray, width: int, height: int) -> None:
    """Replaces every cell with the rectangular average of the unsmoothed grid around it."""
    require_grid(grid)
    width = require_integer("width", width)
    height = require_integer("height", height)
    logger.debug(
        f"Rectangle smoothing {grid.shape[1]}x{grid.shape[0]} grid "
        f"with a {width}x{height} window."
    )
    grid[...] = _smooth_rectangle_pass(grid, width, height)
