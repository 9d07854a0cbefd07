"""
Configuration & Constants
=========================
This module serves as the central registry for the global constants of the
stress domain plot.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (margins, axis extents, tick
   positions) scattered throughout the drawing code.
2. Consistency: The model layer (scaling, regime bands) and the view layer
   (painting) read the same domain bounds.

Exports:
    R_MAX (float): Upper bound of the radial coordinate.
    THETA_MAX (float): Upper bound of the angular coordinate in degrees.
    MARGINS (Margins): Fixed plot margins in logical pixels.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Margins:
    """Plot margins in logical pixels."""
    top: float
    right: float
    bottom: float
    left: float


# Domain bounds
R_MAX: float = 3.0
THETA_MAX: float = 180.0

# Plot margins (logical pixels)
MARGINS: Margins = Margins(top=20, right=20, bottom=50, left=40)

# Default sample grid (divisions, samples are divisions + 1 per axis)
DEFAULT_R_DIVISIONS: int = 50
DEFAULT_THETA_DIVISIONS: int = 50

DEFAULT_COLOR_TABLE: str = "viridis"

# Axis ticks
R_TICKS: tuple[int, ...] = (0, 1, 2, 3)
THETA_TICKS: tuple[int, ...] = (0, 45, 90, 135, 180)
TICK_LENGTH_PX: float = 5.0

# Annotated points
MARKER_RADIUS_PX: float = 5.0
MARKER_FILL: str = "red"
MARKER_OUTLINE: str = "black"
LABEL_OFFSET_PX: tuple[float, float] = (-30.0, -10.0)

# Text
FONT_FAMILY: str = "Arial"
LABEL_FONT_PX: int = 12
TITLE_FONT_PX: int = 14
TEXT_COLOR: str = "black"
