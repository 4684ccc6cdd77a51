"""Logo isolation and brand asset generation."""

__version__ = "1.0.0"
