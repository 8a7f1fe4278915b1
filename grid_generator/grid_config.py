# grid_generator/grid_config.py

"""
================================================================================
GRID CONFIGURATION
================================================================================
This module contains the GridConfig value object, which bundles the grid
dimensions, the grid storage and a smoothing configuration, and the
apply_configured_smoothing() function that turns the stored smoothing
settings into an actual smoothing pass.

Data Contract:
---------------
- Inputs (on initialization):
    - width, height (int): Grid dimensions, both > 0.
    - radius, strength, kind: Optional smoothing settings.
    - logger: An optional Python logging object for runtime messages.
- Outputs:
    - size, smoothing (read-only, frozen dataclasses).
    - grid: A zero-filled float32 array of shape (height, width). Filling it
      is the caller's job.
- Side Effects: Logs messages using the provided logger.
- Invariants: width > 0, height > 0, strength in [0, 1], and radius > 0
  whenever smoothing settings are given explicitly.
================================================================================
"""

import enum
import logging
from dataclasses import dataclass

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidArgumentError
from .grid import allocate, require_dimension, require_integer, require_strength
from .rendering import render
from .smoothing import smooth_circle, smooth_rectangle


class SmoothingKind(enum.IntEnum):
    """Window shape used by the configured smoothing pass."""
    CIRCLE = 0
    RECTANGLE = 1


@dataclass(frozen=True)
class GridSize:
    width: int
    height: int


@dataclass(frozen=True)
class SmoothingConfig:
    """Smoothing settings. Purely descriptive; see apply_configured_smoothing()."""
    radius: int
    width: int
    height: int
    strength: float
    kind: SmoothingKind


def _require_kind(kind) -> SmoothingKind:
    if isinstance(kind, str):
        try:
            return SmoothingKind[kind.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown smoothing kind {kind!r}.") from None
    try:
        return SmoothingKind(require_integer("kind", kind))
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown smoothing kind {kind!r}. Use 0 for circle or 1 for rectangle."
        ) from None


class GridConfig:
    """
    Grid dimensions, grid storage and smoothing settings.

    Three forms are supported:
        GridConfig()                    100x100 grid, smoothing disabled.
        GridConfig(width, height)       default smoothing (radius 4, strength 0.5, circle).
        GridConfig(width, height, radius, strength, kind)
                                        explicit smoothing; omitted values use the defaults.

    The smoothing window width and height follow the grid width and height.
    """

    _DICT_KEYS = ('width', 'height', 'radius', 'strength', 'kind')

    def __init__(self, width: int = None, height: int = None, radius: int = None,
                 strength: float = None, kind=None, logger: logging.Logger = None):
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        smoothing_given = any(value is not None for value in (radius, strength, kind))

        if width is None and height is None:
            if smoothing_given:
                raise InvalidArgumentError("Smoothing settings require a width and height.")
            width = DEFAULTS.DEFAULT_GRID_WIDTH
            height = DEFAULTS.DEFAULT_GRID_HEIGHT
            smoothing = SmoothingConfig(
                radius=DEFAULTS.DISABLED_SMOOTHING_RADIUS,
                width=0,
                height=0,
                strength=DEFAULTS.DISABLED_SMOOTHING_STRENGTH,
                kind=SmoothingKind(DEFAULTS.DEFAULT_SMOOTHING_KIND),
            )
        else:
            if width is None or height is None:
                raise InvalidArgumentError("Width and height must be given together.")
            width = require_dimension("width", width)
            height = require_dimension("height", height)

            if smoothing_given:
                radius = require_dimension(
                    "radius", DEFAULTS.DEFAULT_SMOOTHING_RADIUS if radius is None else radius
                )
                strength = require_strength(
                    DEFAULTS.DEFAULT_SMOOTHING_STRENGTH if strength is None else strength
                )
                kind = _require_kind(DEFAULTS.DEFAULT_SMOOTHING_KIND if kind is None else kind)
            else:
                radius = DEFAULTS.DEFAULT_SMOOTHING_RADIUS
                strength = DEFAULTS.DEFAULT_SMOOTHING_STRENGTH
                kind = SmoothingKind(DEFAULTS.DEFAULT_SMOOTHING_KIND)

            smoothing = SmoothingConfig(
                radius=radius, width=width, height=height, strength=strength, kind=kind
            )

        self._size = GridSize(width, height)
        self._grid = allocate(width, height)
        self._smoothing = smoothing

        self.logger.info(
            f"GridConfig created: {width}x{height} grid, {smoothing.kind.name.lower()} "
            f"smoothing (radius {smoothing.radius}, strength {smoothing.strength})."
        )

    @classmethod
    def from_dict(cls, config: dict, logger: logging.Logger = None) -> "GridConfig":
        """
        Builds a GridConfig from a dictionary of overrides.

        Recognised keys are 'width', 'height', 'radius', 'strength' and 'kind'.
        Missing keys fall back to the internal defaults; 'kind' may be given as
        0/1 or as 'circle'/'rectangle'.

        The result is always the fully parameterized form, so even an empty
        dictionary gives a 100x100 grid with the default smoothing (radius 4,
        strength 0.5, circle). Use GridConfig() for the disabled-smoothing form.
        """
        unknown = sorted(set(config) - set(cls._DICT_KEYS))
        if unknown:
            raise InvalidArgumentError(f"Unknown grid configuration keys: {', '.join(unknown)}.")

        return cls(
            width=config.get('width', DEFAULTS.DEFAULT_GRID_WIDTH),
            height=config.get('height', DEFAULTS.DEFAULT_GRID_HEIGHT),
            radius=config.get('radius', DEFAULTS.DEFAULT_SMOOTHING_RADIUS),
            strength=config.get('strength', DEFAULTS.DEFAULT_SMOOTHING_STRENGTH),
            kind=config.get('kind', DEFAULTS.DEFAULT_SMOOTHING_KIND),
            logger=logger,
        )

    @property
    def size(self) -> GridSize:
        return self._size

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    @property
    def smoothing(self) -> SmoothingConfig:
        return self._smoothing

    def __repr__(self) -> str:
        return f"GridConfig(size={self._size!r}, smoothing={self._smoothing!r})"

    def __str__(self) -> str:
        return DEFAULTS.RENDER_HEADER + render(self)


def apply_configured_smoothing(config: GridConfig) -> None:
    """
    Runs the smoothing pass described by `config.smoothing` on `config.grid`.

    The kind selects the pass (circle uses the radius, rectangle uses the
    width and height). The smoothed values are blended in by strength:
    cell = cell * (1 - strength) + smoothed * strength. A strength of 0 leaves
    the grid untouched and a strength of 1 gives the plain smoothing pass.
    """
    smoothing = config.smoothing
    if smoothing.strength == 0.0:
        config.logger.debug("Smoothing strength is 0, skipping configured smoothing.")
        return

    grid = config.grid
    smoothed = grid.copy()
    if smoothing.kind == SmoothingKind.CIRCLE:
        config.logger.debug(f"Applying configured circle smoothing, radius {smoothing.radius}.")
        smooth_circle(smoothed, smoothing.radius)
    else:
        config.logger.debug(
            f"Applying configured rectangle smoothing, {smoothing.width}x{smoothing.height} window."
        )
        smooth_rectangle(smoothed, smoothing.width, smoothing.height)

    # Exact at both ends: strength 1 yields the smoothed grid unchanged.
    strength = smoothing.strength
    grid[...] = grid * (1.0 - strength) + smoothed * strength
