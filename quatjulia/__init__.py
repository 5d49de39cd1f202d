"""Interactive quaternion Julia fractal explorer."""

__version__ = "0.1.0"
