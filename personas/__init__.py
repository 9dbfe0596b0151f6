"""Personality domain model and alias registry."""

__version__ = "1.0.0"
