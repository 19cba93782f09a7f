"""Typed decoding of FDS namelist input decks."""

__version__ = "0.1.0"
