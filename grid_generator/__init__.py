# grid_generator/__init__.py

# This file makes the 'grid_generator' directory a Python package.
# It also defines the public API of the package.

from .errors import InvalidArgumentError
from .grid import allocate
from .noise import seed_noise
from .smoothing import average_circle, average_rectangle, smooth_circle, smooth_rectangle
from .filters import Axis, mirror, pull_to_peaks
from .grid_config import (
    GridConfig,
    GridSize,
    SmoothingConfig,
    SmoothingKind,
    apply_configured_smoothing,
)
from .rendering import render, render_grid

__all__ = [
    "InvalidArgumentError",
    "allocate",
    "seed_noise",
    "average_circle",
    "average_rectangle",
    "smooth_circle",
    "smooth_rectangle",
    "Axis",
    "mirror",
    "pull_to_peaks",
    "GridConfig",
    "GridSize",
    "SmoothingConfig",
    "SmoothingKind",
    "apply_configured_smoothing",
    "render",
    "render_grid",
]
