"""duraspan: duration expression extraction."""

__version__ = "0.1.0"
