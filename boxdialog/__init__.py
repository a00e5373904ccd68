"""Curses dialog boxes for shell scripts and Python programs, with icon and gettext helpers."""

__version__ = "1.0.1"