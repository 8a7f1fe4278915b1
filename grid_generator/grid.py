# grid_generator/grid.py

"""
================================================================================
GRID DATA MODEL
================================================================================
A grid is a plain 2-D NumPy array of single-precision floats. This module
creates grids and holds the argument checks shared by every transform.

Data Contract:
---------------
- Layout: grid[y, x]. The first index is the row (y), the second is the
  column (x), so a grid of `width` x `height` cells has shape (height, width).
- Transforms always take their bounds from grid.shape and never assume a
  square grid.
- Cell values are not clamped by any transform.
================================================================================
"""

import numbers

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidArgumentError


def require_integer(name: str, value) -> int:
    """Returns `value` as an int, rejecting bools and non-integral numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}.")
    return int(value)


def require_real(name: str, value) -> float:
    """Returns `value` as a float, rejecting bools, strings and other non-real values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}.")
    return float(value)


def require_strength(value) -> float:
    """Returns `value` as a float in [0, 1]; NaN and anything outside the range is rejected."""
    strength = require_real("strength", value)
    if not 0.0 <= strength <= 1.0:
        raise InvalidArgumentError(f"Strength must be between 0 and 1, got {strength}.")
    return strength


def require_dimension(name: str, value) -> int:
    """Returns `value` as an int, rejecting anything that is not a positive integer."""
    value = require_integer(name, value)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be greater than 0, got {value}.")
    return value


def require_grid(grid) -> np.ndarray:
    """Checks that `grid` is a non-empty 2-D NumPy array and returns it unchanged."""
    if not isinstance(grid, np.ndarray) or grid.ndim != 2:
        raise InvalidArgumentError("grid must be a 2-D NumPy array.")
    if grid.size == 0:
        raise InvalidArgumentError("grid must contain at least one cell.")
    return grid


def allocate(width: int, height: int) -> np.ndarray:
    """
    Creates a zero-filled grid.

    Args:
        width (int): Number of columns (x extent), must be > 0.
        height (int): Number of rows (y extent), must be > 0.

    Returns:
        np.ndarray: A float32 array of shape (height, width).
    """
    width = require_dimension("width", width)
    height = require_dimension("height", height)
    return np.zeros((height, width), dtype=DEFAULTS.GRID_DTYPE)
