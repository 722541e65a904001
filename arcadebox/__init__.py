"""Frame-stepped mini games, a tile menu and a fade effect drawing to a recording canvas."""

__version__ = "0.1.0"