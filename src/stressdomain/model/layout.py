"""
Plot Layout
===========
Pure geometry for the stress domain plot: where the graph area sits inside
the surface and how (R, theta) map onto logical pixels.

No Qt here, so the mapping can be used and tested without a display.
"""
from __future__ import annotations

from dataclasses import dataclass

from stressdomain.config import MARGINS, R_MAX, THETA_MAX, Margins


@dataclass(frozen=True)
class Layout:
    """
    Derived drawing rectangle for a surface of width x height logical pixels.
    """
    width: float
    height: float
    margins: Margins = MARGINS

    @property
    def graph_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def graph_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom

    @property
    def graph_bottom(self) -> float:
        """y of the R axis."""
        return self.height - self.margins.bottom

    @property
    def graph_right(self) -> float:
        return self.width - self.margins.right

    def scale_x(self, r: float) -> float:
        """R -> x. Increasing R moves right."""
        return (r / R_MAX) * self.graph_width + self.margins.left

    def scale_y(self, theta: float) -> float:
        """theta -> y. The axis is inverted: larger theta is drawn higher."""
        return self.graph_height - (theta / THETA_MAX) * self.graph_height + self.margins.top

    def cell_size(self, r_divisions: int, theta_divisions: int) -> tuple[float, float]:
        """Pixel width and height of one grid cell."""
        return self.graph_width / r_divisions, self.graph_height / theta_divisions
