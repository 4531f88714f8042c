"""Collect Stable Diffusion seeds from image metadata."""

__version__ = "1.0.0"
