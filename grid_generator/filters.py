# grid_generator/filters.py

"""
================================================================================
VALUE AND GEOMETRY FILTERS
================================================================================
Peak attraction pulls cell values toward a set of target levels (terraces,
plateaus). Mirroring reflects the grid along one or both axes.

Data Contract:
---------------
- Inputs: A 2-D float array laid out as grid[y, x], modified in place.
- Outputs: None.
- Side Effects: Cells are overwritten. Arguments are validated before the
  first cell is touched, so a rejected call leaves the grid unchanged.
================================================================================
"""

import enum
import logging

import numpy as np
from numba import njit

from .errors import InvalidArgumentError
from .grid import require_grid, require_integer, require_real, require_strength

logger = logging.getLogger(__name__)


class Axis(enum.IntEnum):
    """Reflection axis for mirror()."""
    HORIZONTAL = 0 # rows reversed: cell(x, y) <- cell(x, height - 1 - y)
    VERTICAL = 1   # columns reversed: cell(x, y) <- cell(width - 1 - x, y)
    BOTH = 2       # point reflection through the centre


# Array axes to reverse for each reflection, given the grid[y, x] layout.
_FLIP_AXES = {
    Axis.HORIZONTAL: (0,),
    Axis.VERTICAL: (1,),
    Axis.BOTH: (0, 1),
}


@njit
def _pull_to_peaks(grid, points, value_range, strength):
    rows, cols = grid.shape
    for y in range(rows):
        for x in range(cols):
            # Each point sees the value left by the previous nudge.
            for k in range(points.shape[0]):
                point = points[k]
                if abs(grid[y, x] - point) <= value_range:
                    grid[y, x] += (point - grid[y, x]) * strength


def pull_to_peaks(grid: np.ndarray, points, value_range: float, strength: float) -> None:
    """
    Nudges cell values toward the target levels in `points`.

    For every cell and every point, in the order the points are given, a cell
    within `value_range` of the point moves toward it:
    f(v) = v + (point - v) * strength. Results are not clamped.

    Args:
        grid (np.ndarray): The grid to modify.
        points (sequence of float): Target levels to pull values towards.
        value_range (float): Maximum distance between a cell and a point for the pull to apply.
        strength (float): Fraction of the distance covered by one pull. Must be in [0, 1].

    Raises:
        InvalidArgumentError: If strength is not a number in [0, 1] or value_range is not a number.
    """
    require_grid(grid)
    strength = require_strength(strength)
    value_range = require_real("value_range", value_range)

    try:
        points = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"points must be numbers, got {points!r}.") from None
    if points.ndim != 1:
        raise InvalidArgumentError("points must be a flat sequence of target values.")

    logger.debug(
        f"Pulling {grid.shape[1]}x{grid.shape[0]} grid toward {points.size} "
        f"peak(s) with range {value_range} and strength {strength}."
    )
    if points.size == 0:
        return
    _pull_to_peaks(grid, points, value_range, strength)


def mirror(grid: np.ndarray, axis) -> None:
    """
    Reflects the grid in place.

    Args:
        grid (np.ndarray): The grid to modify.
        axis (Axis | int): 0 for horizontal, 1 for vertical, 2 for both.

    Raises:
        InvalidArgumentError: If axis is not 0, 1 or 2.
    """
    require_grid(grid)
    try:
        axis = Axis(require_integer("axis", axis))
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid axis {axis!r}. Use 0 for horizontal, 1 for vertical, or 2 for both."
        ) from None

    logger.debug(f"Mirroring {grid.shape[1]}x{grid.shape[0]} grid along {axis.name.lower()} axis.")
    grid[...] = np.flip(grid, axis=_FLIP_AXES[axis]).copy()
