"""Post-Trade Therapy - a psychology-first trading journal."""

__version__ = "0.1.0"
