"""Interactive terminal personal homepage: topic list, quotes, links and helpers."""

__version__ = "1.0.0"
__all__ = ["__version__"]