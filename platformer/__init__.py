"""A tile-based 2D platformer on pygame with a scrolling camera box."""

__version__ = "0.1.0"