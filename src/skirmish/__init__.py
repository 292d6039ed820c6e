"""Turn-based duel resolution core."""

__version__ = "0.1.0"
