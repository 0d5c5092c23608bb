"""Procedural noise, fBm, heightmap storage, cameras and torus terrain meshes."""

__version__ = "0.1.0"
__all__ = ["value_noise", "perlin", "simplex", "fbm", "storage", "camera", "torus"]