"""Yes/No question box."""

from __future__ import annotations

import curses
from contextlib import suppress
from dataclasses import dataclass

from .colors import Attribute
from .text import ESC, TAB, cycle_button

_YES_KEYS = {ord("Y"), ord("y")}
_NO_KEYS = {ord("N"), ord("n")}
_BUTTON_KEYS = {TAB, curses.KEY_LEFT, curses.KEY_RIGHT}
_CONFIRM_KEYS = {ord(" "), ord("\n")}


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


@dataclass
class YesNo:
    """Button state of a yes/no box: 0 is Yes, 1 is No."""

    button: int = 0

    def handle_key(self, key: int | str) -> int | None:
        """Apply one key press.

        Returns None while the box stays open, 0 for Yes, 1 for No and
        -1 for escape.
        """
        key = ord(key) if isinstance(key, str) else key
        if key in _YES_KEYS:
            return 0
        if key in _NO_KEYS:
            return 1
        if key in _BUTTON_KEYS:
            self.button = cycle_button(self.button, key, 2)
            return None
        if key in _CONFIRM_KEYS:
            return self.button
        if key == ESC:
            return -1
        return None


def _print_buttons(screen, dialog, height, width, selected) -> None:
    x = width // 2 - 10
    y = height - 2
    screen.print_button(dialog, " Yes ", y, x, selected == 0)
    screen.print_button(dialog, "  No  ", y, x + 13, selected == 1)
    with suppress(curses.error):
        dialog.move(y, x + 1 + 13 * selected)
    dialog.refresh()


def run_yesno(screen, title, prompt, height, width) -> int:
    """Ask a yes/no question; return 0 for Yes, 1 for No, -1 for escape."""
    attr = screen.theme.attr
    lines, cols = screen.stdscr.getmaxyx()
    x = (cols - width) // 2
    y = (lines - height) // 2

    screen.draw_shadow(screen.stdscr, y, x, height, width)
    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)

    screen.draw_box(dialog, 0, 0, height, width, attr(Attribute.DIALOG), attr(Attribute.BORDER))
    dialog.attrset(attr(Attribute.BORDER))
    hline = _line_char("ACS_HLINE", "-")
    with suppress(curses.error):
        dialog.addch(height - 3, 0, _line_char("ACS_LTEE", "+"))
        for col in range(1, width - 1):
            dialog.addch(height - 3, col, hline)
    dialog.attrset(attr(Attribute.DIALOG))
    with suppress(curses.error):
        dialog.addch(height - 3, width - 1, _line_char("ACS_RTEE", "+"))
    screen.print_title(dialog, title, width)
    dialog.attrset(attr(Attribute.DIALOG))
    screen.print_autowrap(dialog, prompt, width - 2, 1, 3)

    state = YesNo()
    while True:
        _print_buttons(screen, dialog, height, width, state.button)
        code = state.handle_key(dialog.getch())
        if code is not None:
            return code