"""Tests for the logical coordinate mapping."""
import numpy as np
import pytest

from stressdomain.config import Margins
from stressdomain.model.layout import Layout


def test_graph_area_is_size_minus_margins():
    layout = Layout(500, 500)
    assert layout.graph_width == 440
    assert layout.graph_height == 430
    assert layout.graph_bottom == 450
    assert layout.graph_right == 480


def test_scale_x_spans_graph_width():
    layout = Layout(500, 500)
    assert layout.scale_x(0) == 40
    assert layout.scale_x(3) == pytest.approx(480)
    assert layout.scale_x(1.5) == pytest.approx(260)


def test_scale_y_is_inverted():
    layout = Layout(500, 500)
    assert layout.scale_y(0) == pytest.approx(450)
    assert layout.scale_y(180) == pytest.approx(20)
    assert layout.scale_y(90) == pytest.approx(235)


def test_scales_are_monotonic():
    layout = Layout(640, 360)
    xs = [layout.scale_x(r) for r in np.linspace(0.0, 3.0, 50)]
    ys = [layout.scale_y(t) for t in np.linspace(0.0, 180.0, 50)]
    assert all(a < b for a, b in zip(xs, xs[1:]))
    assert all(a > b for a, b in zip(ys, ys[1:]))


def test_cell_size():
    layout = Layout(500, 500)
    assert layout.cell_size(50, 50) == pytest.approx((8.8, 8.6))


def test_custom_margins():
    layout = Layout(200, 100, margins=Margins(top=0, right=0, bottom=0, left=0))
    assert layout.scale_x(3) == pytest.approx(200)
    assert layout.scale_y(0) == pytest.approx(100)
