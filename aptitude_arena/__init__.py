"""Aptitude Arena: procedural aptitude questions with level and streak tracking."""

__version__ = "1.0.0"
