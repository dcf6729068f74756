"""Wireframe viewer for height maps: map reading, projection, rasterising and a pygame window."""

__version__ = "0.1.0"