"""Blueprints: authored collections of 2-D points with read-time filters."""

__version__ = "0.1.0"
