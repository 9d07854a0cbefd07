"""
Application Initialization
==========================
Demo launcher: opens a window with the stress domain plot and the three
example points, one per fault regime.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication, QMainWindow

from stressdomain.logging_config import setup_logging
from stressdomain.view.widgets import StressDomainWidget


def build_demo_window() -> QMainWindow:
    window = QMainWindow()
    window.setWindowTitle("Stress Domain")

    plot = StressDomainWidget("visualization", 500, 500)
    plot.add_point(0.5, 60)   # Normal fault regime
    plot.add_point(1.5, 120)  # Strike-slip fault regime
    plot.add_point(2.5, 30)   # Reverse fault regime

    window.setCentralWidget(plot)
    return window


def main() -> None:
    # 1. Setup Logging
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Stress Domain")

    # 3. Show the plot
    window = build_demo_window()
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
