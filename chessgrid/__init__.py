"""A two-player chess board played by dragging pieces with the mouse."""

__version__ = "0.1.0"