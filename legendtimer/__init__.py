"""LegendTimer — neon workout clock with a repeating interval countdown."""

__version__ = "1.0.0"
