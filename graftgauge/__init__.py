"""Semicircle gauge geometry and zone classification for graft flow metrics."""

__version__ = "1.0.0"
