"""Escape-time fractal explorer: fractal kernels, palettes, rendering, XPM reading and a Tk viewer."""

__version__ = "1.0.0"