"""
Stress Domain Widget
Heatmap of the (R, theta) stress domain with annotated fault-regime points.

Every mutator repaints the whole frame into a backing QImage before
returning; paintEvent only blits that image.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
import logging
import math
from pathlib import Path
from typing import Iterable, Mapping, Optional

import numpy as np
from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QImage, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from stressdomain.config import (
    DEFAULT_COLOR_TABLE,
    FONT_FAMILY,
    LABEL_FONT_PX,
    LABEL_OFFSET_PX,
    MARKER_FILL,
    MARKER_OUTLINE,
    MARKER_RADIUS_PX,
    R_TICKS,
    TEXT_COLOR,
    THETA_TICKS,
    TICK_LENGTH_PX,
    TITLE_FONT_PX,
)
from stressdomain.model.colors import COLOR_SCHEMES, ColorScheme, get_scheme
from stressdomain.model.layout import Layout
from stressdomain.model.regimes import FaultRegime, RegimeOutOfRangeError, classify_regime, phi_prime
from stressdomain.model.samples import AnnotatedPoint, Sample, StressGrid

logger = logging.getLogger(__name__)


def _to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with exact halves rounded away from zero (0.25 -> '0.3')."""
    if not math.isfinite(value) or abs(value) >= 1e21:
        return f"{value:.{digits}f}"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_point_label(r: float, theta: float) -> str:
    """Marker caption, e.g. '(R=0.5, θ=60°)'."""
    return f"(R={_to_fixed(r, 1)}, θ={_to_fixed(theta, 0)}°)"


@dataclass(frozen=True)
class RenderedMarker:
    """A point that made it onto the last frame, in logical pixels."""
    point: AnnotatedPoint
    regime: FaultRegime
    phi_prime: float
    x: float
    y: float
    label: str


class StressDomainWidget(QWidget):
    """
    Fixed-size plot of the stress domain.

    Usage:
        w = StressDomainWidget("visualization", 500, 500)
        w.add_point(0.5, 60)   # Normal fault regime
        w.add_point(1.5, 120)  # Strike-slip fault regime
        w.add_point(2.5, 30)   # Reverse fault regime
    """

    def __init__(
        self,
        surface_id: str,
        width: int,
        height: int,
        resolution_scale: Optional[float] = None,
        color_schemes: Mapping[str, ColorScheme] = COLOR_SCHEMES,
        color_table: str = DEFAULT_COLOR_TABLE,
        rng: Optional[np.random.Generator] = None,
        parent: QWidget | None = None,
    ) -> None:
        """
        Args:
            surface_id: Object name hosts use to find the widget.
            width: Logical width in pixels.
            height: Logical height in pixels.
            resolution_scale: Physical pixels per logical pixel. Falls back to
                the widget's device pixel ratio.
            color_schemes: Palette registry to resolve color_table against.
            color_table: Initial palette name.
            rng: Generator for the default random grid.
            parent: Optional parent widget.
        """
        super().__init__(parent)
        self.setObjectName(surface_id)
        self.setFixedSize(int(width), int(height))

        if resolution_scale is None:
            resolution_scale = self.devicePixelRatioF()
        self._resolution_scale = float(resolution_scale)

        self._plot_layout = Layout(width=float(width), height=float(height))

        # Physical-resolution backing store, painted in logical coordinates
        self._image = QImage(
            max(1, round(width * self._resolution_scale)),
            max(1, round(height * self._resolution_scale)),
            QImage.Format_ARGB32_Premultiplied,
        )
        self._image.setDevicePixelRatio(self._resolution_scale)

        self._color_schemes = color_schemes
        self._color_table = color_table
        self._grid = StressGrid.random(rng=rng)
        self._points: list[AnnotatedPoint] = []
        self.rendered_markers: list[RenderedMarker] = []

        self.draw_visualization()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def surface_id(self) -> str:
        return self.objectName()

    @property
    def resolution_scale(self) -> float:
        return self._resolution_scale

    @property
    def plot_layout(self) -> Layout:
        return self._plot_layout

    @property
    def color_table(self) -> str:
        return self._color_table

    @property
    def grid(self) -> StressGrid:
        return self._grid

    @property
    def points(self) -> tuple[AnnotatedPoint, ...]:
        return tuple(self._points)

    def set_color_table(self, name: str) -> None:
        """
        Switch the active palette and redraw.

        The name is not checked here; an unknown name raises
        UnknownColorSchemeError from the redraw.
        """
        self._color_table = name
        self.draw_visualization()

    def add_point(self, r: float, theta: float) -> None:
        """Append an annotated point and redraw. R is validated when drawn."""
        self._points.append(AnnotatedPoint(r=r, theta=theta))
        self.draw_visualization()

    def set_data(
        self,
        data: Iterable[Sample | tuple[float, float, float]],
        n_r: int,
        n_theta: int,
    ) -> None:
        """
        Replace the whole grid and redraw.

        data should hold (n_r + 1) * (n_theta + 1) samples; this is not
        checked.
        """
        self._grid = StressGrid.from_samples(data, n_r, n_theta)
        if len(self._grid) != self._grid.expected_size:
            logger.debug(
                f"Grid has {len(self._grid)} samples for {n_r}x{n_theta} divisions "
                f"(expected {self._grid.expected_size})."
            )
        self.draw_visualization()

    def image(self) -> QImage:
        """Copy of the last rendered frame at physical resolution."""
        return self._image.copy()

    def save_image(self, path: str | Path) -> None:
        """Write the last rendered frame; format follows the file suffix."""
        if not self._image.save(str(path)):
            raise OSError(f"Could not write image to '{path}'")
        logger.info(f"Stress domain image saved to: {path}")

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def draw_visualization(self) -> None:
        """Repaint the full frame from the current state."""
        self._image.fill(Qt.transparent)

        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            self._draw_grid(painter)

            markers: list[RenderedMarker] = []
            for point in self._points:
                marker = self.draw_point(painter, point.r, point.theta)
                if marker is not None:
                    markers.append(marker)

            self._draw_axes(painter)
            self._draw_ticks(painter)
            self._draw_titles(painter)
        finally:
            painter.end()

        self.rendered_markers = markers
        logger.debug(
            f"Redrew '{self.surface_id}': {len(self._grid)} cells, "
            f"{len(markers)}/{len(self._points)} points."
        )
        self.update()

    def draw_point(self, painter: QPainter, r: float, theta: float) -> Optional[RenderedMarker]:
        """
        Draw one marker with its caption.

        Returns None (and logs an error) when R lies outside [0, 3]; the rest
        of the frame is unaffected.
        """
        try:
            regime = classify_regime(r)
        except RegimeOutOfRangeError as e:
            logger.error(str(e))
            return None
        phi = phi_prime(r)

        layout = self._plot_layout
        x = layout.scale_x(r)
        y = layout.scale_y(theta)

        painter.setPen(QPen(QColor(MARKER_OUTLINE), 1))
        painter.setBrush(QColor(MARKER_FILL))
        painter.drawEllipse(QPointF(x, y), MARKER_RADIUS_PX, MARKER_RADIUS_PX)

        label = format_point_label(r, theta)
        painter.setPen(QColor(TEXT_COLOR))
        painter.setFont(self._font(LABEL_FONT_PX))
        dx, dy = LABEL_OFFSET_PX
        self._draw_text(painter, x + dx, y + dy, label, Qt.AlignLeft | Qt.AlignBottom)

        return RenderedMarker(
            point=AnnotatedPoint(r=r, theta=theta),
            regime=regime,
            phi_prime=phi,
            x=x,
            y=y,
            label=label,
        )

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        p = QPainter(self)
        p.drawImage(QPointF(0.0, 0.0), self._image)
        p.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _draw_grid(self, painter: QPainter) -> None:
        scheme = get_scheme(self._color_table, self._color_schemes)
        grid = self._grid
        if not grid.samples:
            return
        if grid.r_divisions < 1 or grid.theta_divisions < 1:
            logger.debug(
                f"Skipping grid cells: {grid.r_divisions}x{grid.theta_divisions} divisions leave no cell size."
            )
            return

        layout = self._plot_layout
        cell_w, cell_h = layout.cell_size(grid.r_divisions, grid.theta_divisions)
        rs, thetas, values = grid.as_arrays()
        colors = scheme.interpolate_rgb(values)

        painter.setPen(Qt.NoPen)
        for r, theta, (red, green, blue) in zip(rs, thetas, colors):
            x = layout.scale_x(r) - cell_w / 2
            y = layout.scale_y(theta) - cell_h / 2
            # One pixel of overlap hides seams between neighbouring cells
            painter.fillRect(QRectF(x, y, cell_w + 1, cell_h + 1), QColor(int(red), int(green), int(blue)))

    def _draw_axes(self, painter: QPainter) -> None:
        layout = self._plot_layout
        m = layout.margins
        bottom = layout.graph_bottom

        painter.setPen(QPen(QColor(TEXT_COLOR), 1))
        painter.setBrush(Qt.NoBrush)

        # Regime dividers
        for r in (1.0, 2.0):
            x = layout.scale_x(r)
            painter.drawLine(QPointF(x, m.top), QPointF(x, bottom))

        painter.drawLine(QPointF(m.left, bottom), QPointF(layout.graph_right, bottom))
        painter.drawLine(QPointF(m.left, m.top), QPointF(m.left, bottom))

    def _draw_ticks(self, painter: QPainter) -> None:
        layout = self._plot_layout
        m = layout.margins
        bottom = layout.graph_bottom

        painter.setPen(QPen(QColor(TEXT_COLOR), 1))
        painter.setFont(self._font(LABEL_FONT_PX))

        for r in R_TICKS:
            x = layout.scale_x(r)
            painter.drawLine(QPointF(x, bottom), QPointF(x, bottom + TICK_LENGTH_PX))
            self._draw_text(painter, x, bottom + 10, str(r), Qt.AlignHCenter | Qt.AlignTop)

        for theta in THETA_TICKS:
            y = layout.scale_y(theta)
            painter.drawLine(QPointF(m.left - TICK_LENGTH_PX, y), QPointF(m.left, y))
            self._draw_text(painter, m.left - 10, y, str(theta), Qt.AlignRight | Qt.AlignVCenter)

    def _draw_titles(self, painter: QPainter) -> None:
        layout = self._plot_layout
        painter.setPen(QColor(TEXT_COLOR))
        painter.setFont(self._font(TITLE_FONT_PX))

        self._draw_text(painter, layout.width / 2, layout.height - 10, "R", Qt.AlignCenter)

        painter.save()
        painter.translate(layout.margins.left - 30, layout.height / 2)
        painter.rotate(-90)
        self._draw_text(painter, 0.0, 0.0, "θ°", Qt.AlignCenter)
        painter.restore()

        for regime in FaultRegime:
            self._draw_text(
                painter,
                layout.scale_x(regime.midpoint),
                layout.height - 25,
                regime.value,
                Qt.AlignHCenter | Qt.AlignBottom,
            )

    @staticmethod
    def _font(pixel_size: int) -> QFont:
        font = QFont(FONT_FAMILY)
        font.setPixelSize(pixel_size)
        return font

    @staticmethod
    def _draw_text(painter: QPainter, x: float, y: float, text: str, align: Qt.AlignmentFlag) -> QRectF:
        """
        Draw text anchored at (x, y).

        The horizontal flag picks which edge (or the centre) of the text sits
        on x; the vertical flag does the same for y.
        """
        fm = QFontMetricsF(painter.font())
        w = fm.horizontalAdvance(text)
        h = fm.height()

        if align & Qt.AlignHCenter:
            left = x - w / 2
        elif align & Qt.AlignRight:
            left = x - w
        else:
            left = x

        if align & Qt.AlignVCenter:
            top = y - h / 2
        elif align & Qt.AlignBottom:
            top = y - h
        else:
            top = y

        rect = QRectF(left, top, w, h)
        painter.drawText(rect, Qt.AlignCenter, text)
        return rect
