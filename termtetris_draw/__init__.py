"""Curses window layout and drawing routines for a terminal falling-block puzzle game."""

__version__ = "0.1.0"
__all__ = ["render", "screens", "windows"]