"""Data-file readers, palette-indexed drawing, settings and level handling for the Liero worm game."""

__version__ = "0.1.0"