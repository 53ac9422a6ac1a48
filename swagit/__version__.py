"""Version information for swagit."""

__version__ = "1.0.0"
