"""Curses drawing primitives shared by all dialog boxes."""

from __future__ import annotations

import curses
from contextlib import contextmanager, suppress
from typing import Iterator

from .colors import Attribute, Theme, mono_theme
from .text import title_span, wrap_prompt


def _acs(name: str, fallback: str) -> int:
    """Return a line-drawing character, or a plain fallback before curses starts."""
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


class Screen:
    """A curses screen with a theme and an optional background title."""

    def __init__(self, stdscr, theme: Theme | None = None, backtitle: str | None = None):
        self.stdscr = stdscr
        self.theme = theme if theme is not None else mono_theme()
        self.backtitle = backtitle

    def clear(self) -> None:
        """Paint the background and the background title, if any."""
        rows, cols = self.stdscr.getmaxyx()
        screen_attr = self.theme.attr(Attribute.SCREEN)
        self.attr_clear(self.stdscr, rows, cols, screen_attr)
        if self.backtitle is not None:
            self.stdscr.attrset(screen_attr)
            with suppress(curses.error):
                self.stdscr.addstr(0, 1, self.backtitle)
            self.stdscr.move(1, 1)
            hline = _acs("ACS_HLINE", "-")
            for _ in range(1, cols - 1):
                with suppress(curses.error):
                    self.stdscr.addch(hline)
        self.stdscr.noutrefresh()

    def attr_clear(self, win, height: int, width: int, attr: int) -> None:
        """Fill a ``height`` by ``width`` area of ``win`` with blanks in ``attr``."""
        win.attrset(attr)
        for row in range(height):
            with suppress(curses.error):
                win.addstr(row, 0, " " * width)
        win.touchwin()

    def draw_box(self, win, y: int, x: int, height: int, width: int, box: int, border: int) -> None:
        """Draw a box; top and left edges use ``border``, the rest ``box``."""
        ul = _acs("ACS_ULCORNER", "+")
        ll = _acs("ACS_LLCORNER", "+")
        ur = _acs("ACS_URCORNER", "+")
        lr = _acs("ACS_LRCORNER", "+")
        hline = _acs("ACS_HLINE", "-")
        vline = _acs("ACS_VLINE", "|")
        last_row, last_col = height - 1, width - 1

        win.attrset(0)
        for i in range(height):
            for j in range(width):
                if i == 0 and j == 0:
                    ch = border | ul
                elif i == last_row and j == 0:
                    ch = border | ll
                elif i == 0 and j == last_col:
                    ch = box | ur
                elif i == last_row and j == last_col:
                    ch = box | lr
                elif i == 0:
                    ch = border | hline
                elif i == last_row:
                    ch = box | hline
                elif j == 0:
                    ch = border | vline
                elif j == last_col:
                    ch = box | vline
                else:
                    ch = box | ord(" ")
                with suppress(curses.error):
                    win.addch(y + i, x + j, ch)

    def draw_shadow(self, win, y: int, x: int, height: int, width: int) -> None:
        """Shade the cells along the right and bottom edge of a box."""
        if not curses.has_colors():
            return
        win.attrset(self.theme.attr(Attribute.SHADOW))
        win.move(y + height, x + 2)
        for _ in range(width):
            with suppress(curses.error):
                win.addch(win.inch() & curses.A_CHARTEXT)
        for row in range(y + 1, y + height + 1):
            win.move(row, x + width)
            for _ in range(2):
                with suppress(curses.error):
                    win.addch(win.inch() & curses.A_CHARTEXT)
        win.noutrefresh()

    def print_title(self, win, title: str | None, width: int) -> None:
        """Print ``title`` centred on the top border, padded by a space each side."""
        span = title_span(title, width)
        if span is None:
            return
        start, text = span
        win.attrset(self.theme.attr(Attribute.TITLE))
        with suppress(curses.error):
            win.addch(0, start - 1, ord(" "))
            win.addstr(0, start, text)
            win.addch(ord(" "))

    def print_autowrap(self, win, prompt: str, width: int, y: int, x: int) -> None:
        """Print ``prompt`` word-wrapped within ``width`` columns."""
        for row, col, word in wrap_prompt(prompt, width, y, x):
            with suppress(curses.error):
                win.addstr(row, col, word)

    def print_button(self, win, label: str, y: int, x: int, selected: bool) -> None:
        """Draw ``<label>`` with its first non-blank letter as the hotkey."""
        attr = self.theme.attr
        if selected:
            frame, text_attr, key_attr = (
                attr(Attribute.BUTTON_ACTIVE),
                attr(Attribute.BUTTON_LABEL_ACTIVE),
                attr(Attribute.BUTTON_KEY_ACTIVE),
            )
        else:
            frame, text_attr, key_attr = (
                attr(Attribute.BUTTON_INACTIVE),
                attr(Attribute.BUTTON_LABEL_INACTIVE),
                attr(Attribute.BUTTON_KEY_INACTIVE),
            )
        stripped = label.lstrip(" ")
        indent = len(label) - len(stripped)

        win.move(y, x)
        with suppress(curses.error):
            win.attrset(frame)
            win.addstr("<")
            win.attrset(text_attr)
            win.addstr(" " * indent)
            if stripped:
                win.attrset(key_attr)
                win.addch(ord(stripped[0]))
                win.attrset(text_attr)
                win.addstr(stripped[1:])
            win.attrset(frame)
            win.addstr(">")
        win.move(y, x + indent + 1)


@contextmanager
def open_screen(theme: Theme | None = None, backtitle: str | None = None) -> Iterator[Screen]:
    """Start curses, yield a cleared Screen and restore the terminal on exit.

    Without a theme the monochrome defaults are used and switched to the
    colour scheme when the terminal supports colour.
    """
    stdscr = curses.initscr()
    try:
        stdscr.keypad(True)
        curses.cbreak()
        curses.noecho()
        if theme is None:
            theme = mono_theme()
            theme.apply_colors()
        screen = Screen(stdscr, theme, backtitle)
        screen.clear()
        yield screen
    finally:
        curses.endwin()