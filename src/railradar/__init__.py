"""Rail Radar station directory and fuzzy station search."""

__version__ = "0.1.0"
