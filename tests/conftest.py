"""Shared fixtures for the stressdomain test suite."""
import os

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PySide6.QtWidgets import QApplication

from stressdomain.view.widgets import StressDomainWidget


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_widget(qapp):
    """Factory for widgets at a fixed 1:1 resolution with a seeded grid."""
    created = []

    def _make(width=500, height=500, **kwargs):
        kwargs.setdefault("resolution_scale", 1.0)
        kwargs.setdefault("rng", np.random.default_rng(1234))
        widget = StressDomainWidget("visualization", width, height, **kwargs)
        created.append(widget)
        return widget

    yield _make

    for widget in created:
        widget.deleteLater()


@pytest.fixture
def widget(make_widget):
    return make_widget()
