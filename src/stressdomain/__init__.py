"""Stress domain heatmap widget: R vs theta with fault-regime annotations."""

__version__ = "0.1.0"
