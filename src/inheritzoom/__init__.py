"""Java inheritance graph extraction and visualization."""

__version__ = "0.1.0"
