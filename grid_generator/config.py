# grid_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the grid
generator. These values are used if they are not explicitly provided by the
caller.

DO NOT MODIFY THIS FILE FOR A SPECIFIC GRID.
Instead, pass the values to GridConfig or a dictionary to GridConfig.from_dict.
================================================================================
"""

# --- Grid Storage ---
# Cells are single-precision floats, stored as grid[y, x] (row, column).
GRID_DTYPE = 'float32'

# Size of the grid created by the argument-less GridConfig().
DEFAULT_GRID_WIDTH = 100
DEFAULT_GRID_HEIGHT = 100

# --- Smoothing ---
# Used by GridConfig(width, height) and for any smoothing value left out of
# the fully parameterized form.
DEFAULT_SMOOTHING_RADIUS = 4
DEFAULT_SMOOTHING_STRENGTH = 0.5
DEFAULT_SMOOTHING_KIND = 0 # 0 = circle, 1 = rectangle

# The argument-less GridConfig() stores a zero smoothing, which disables
# apply_configured_smoothing.
DISABLED_SMOOTHING_RADIUS = 0
DISABLED_SMOOTHING_STRENGTH = 0.0

# --- Noise ---
# Cells seeded by seed_noise take one of these values with equal probability.
NOISE_LOW_VALUE = 0.0
NOISE_HIGH_VALUE = 1.0

# --- Diagnostic Rendering ---
# Checked top to bottom; the first threshold a cell strictly exceeds wins.
RENDER_GLYPH_LEVELS = (
    (1.0, '#'),
    (0.75, '*'),
    (0.5, '+'),
    (0.25, '-'),
)
RENDER_BLANK_GLYPH = ' '
RENDER_CELL_SEPARATOR = ' '
RENDER_HEADER = "Grid Properties:\n"
