"""Escape-time fractal iteration, view geometry, colour palettes and small text utilities."""

__version__ = "0.1.0"