"""Search and location-based discovery of Wikipedia articles."""

__version__ = "0.1.0"
