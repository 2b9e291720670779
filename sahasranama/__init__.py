"""Verse annotation and name-corpus extraction for the Lalita Sahasranama."""

__version__ = "1.0.0"
