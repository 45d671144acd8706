"""Style-DNA pipeline: path grammar, arc-safe rounding, style analysis and enforcement."""

__version__ = "0.1.0"
