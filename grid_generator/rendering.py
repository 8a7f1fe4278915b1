# grid_generator/rendering.py

"""
================================================================================
DIAGNOSTIC TEXT RENDERING
================================================================================
Converts grid values into a small glyph picture for debugging and golden
output tests. Like the colour maps of the world generator it is a pure,
stateless utility.

Data Contract:
---------------
- Inputs: A 2-D float array laid out as grid[y, x], or a GridConfig.
- Outputs: A string with one line per row. Every cell is written as its glyph
  followed by one separator, and every row ends with a newline.
- Glyphs: > 1.0 '#', > 0.75 '*', > 0.5 '+', > 0.25 '-', otherwise blank.
================================================================================
"""

import numpy as np

from . import config as DEFAULTS
from .grid import require_grid


def glyph_array(grid: np.ndarray) -> np.ndarray:
    """Maps every cell to its glyph, returning a string array of the grid's shape."""
    levels = DEFAULTS.RENDER_GLYPH_LEVELS
    return np.select(
        [grid > threshold for threshold, _ in levels],
        [glyph for _, glyph in levels],
        default=DEFAULTS.RENDER_BLANK_GLYPH,
    )


def render_grid(grid: np.ndarray) -> str:
    """Renders a grid row by row."""
    require_grid(grid)
    separator = DEFAULTS.RENDER_CELL_SEPARATOR
    lines = []
    for row in glyph_array(grid):
        lines.append("".join(glyph + separator for glyph in row) + "\n")
    return "".join(lines)


def render(grid_config) -> str:
    """Renders the grid held by a GridConfig."""
    return render_grid(grid_config.grid)
