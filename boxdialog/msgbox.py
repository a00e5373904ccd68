"""Message box and info box."""

from __future__ import annotations

import curses
from contextlib import suppress

from .colors import Attribute
from .text import ESC

_DISMISS_KEYS = {ESC, ord("\n"), ord(" "), ord("O"), ord("o"), ord("X"), ord("x")}


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


def is_dismiss_key(key: int | str) -> bool:
    """Return True for a key that closes a paused message box."""
    code = ord(key) if isinstance(key, str) else key
    return code in _DISMISS_KEYS


def run_msgbox(screen, title, prompt, height, width, pause=True) -> int:
    """Show a message; with ``pause`` wait for an OK key.

    Returns -1 when closed with escape, otherwise 0.
    """
    attr = screen.theme.attr
    lines, cols = screen.stdscr.getmaxyx()
    x = (cols - width) // 2
    y = (lines - height) // 2

    screen.draw_shadow(screen.stdscr, y, x, height, width)
    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    screen.draw_box(dialog, 0, 0, height, width, attr(Attribute.DIALOG), attr(Attribute.BORDER))
    screen.print_title(dialog, title, width)
    dialog.attrset(attr(Attribute.DIALOG))
    screen.print_autowrap(dialog, prompt, width - 2, 1, 2)

    if not pause:
        dialog.refresh()
        return 0

    dialog.attrset(attr(Attribute.BORDER))
    hline = _line_char("ACS_HLINE", "-")
    with suppress(curses.error):
        dialog.addch(height - 3, 0, _line_char("ACS_LTEE", "+"))
        for col in range(1, width - 1):
            dialog.addch(height - 3, col, hline)
    dialog.attrset(attr(Attribute.DIALOG))
    with suppress(curses.error):
        dialog.addch(height - 3, width - 1, _line_char("ACS_RTEE", "+"))
    screen.print_button(dialog, "  Ok  ", height - 2, width // 2 - 4, True)
    dialog.refresh()

    key = dialog.getch()
    while not is_dismiss_key(key):
        key = dialog.getch()
    return -1 if key == ESC else 0