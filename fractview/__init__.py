"""Escape-time fractal viewer for the Mandelbrot, Julia and Burning Ship sets."""

__version__ = "0.1.0"