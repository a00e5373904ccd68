"""Input box: edit one line of text inside a scrolling field."""

from __future__ import annotations

import curses
from contextlib import suppress

from .colors import Attribute
from .text import ESC, MAX_LEN, TAB

_BACKSPACE_KEYS = {curses.KEY_BACKSPACE, 127}
_BACK_KEYS = {curses.KEY_UP, curses.KEY_LEFT}
_FORWARD_KEYS = {TAB, curses.KEY_DOWN, curses.KEY_RIGHT}
_PASS_KEYS = {TAB, curses.KEY_UP, curses.KEY_DOWN}
_IGNORED_KEYS = {curses.KEY_LEFT, curses.KEY_RIGHT}
_OK_KEYS = {ord("O"), ord("o")}
_HELP_KEYS = {ord("H"), ord("h")}
_CONFIRM_KEYS = {ord(" "), ord("\n")}
_EXIT_KEYS = {ord("X"), ord("x"), ESC}

_NEXT_BUTTON = {-1: 0, 0: 1, 1: -1}
_PREVIOUS_BUTTON = {-1: 1, 0: -1, 1: 0}


def _code(key: int | str) -> int:
    return ord(key) if isinstance(key, str) else key


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


class InputField:
    """Editing state of an input box.

    ``button`` is -1 while the text field has the focus, 0 for OK and 1
    for Help. The cursor always sits at the end of ``value``; ``scroll``
    is the number of characters hidden to the left of the field and
    ``input_x`` the cursor column inside it.
    """

    def __init__(self, box_width: int, init: str | None = None):
        if box_width < 1:
            raise ValueError("the input field must be at least one column wide")
        self.box_width = box_width
        self.value = (init or "")[:MAX_LEN]
        self.scroll = 0
        self.input_x = len(self.value)
        if self.input_x >= box_width:
            self.scroll = self.input_x - box_width + 1
            self.input_x = box_width - 1
        self.button = -1
        self.overflow = False

    @property
    def visible(self) -> str:
        """The part of the value shown in the field."""
        return self.value[self.scroll:self.scroll + self.box_width]

    def _backspace(self) -> None:
        if not (self.input_x or self.scroll):
            return
        if not self.input_x:
            step = self.box_width - 1
            self.scroll = 0 if self.scroll < step else self.scroll - step
            self.input_x = len(self.value) - self.scroll
        else:
            self.input_x -= 1
            self.value = self.value[:self.scroll + self.input_x]

    def _insert(self, char: str) -> None:
        position = self.scroll + self.input_x
        if position >= MAX_LEN:
            self.overflow = True
            return
        self.value = self.value[:position] + char
        if self.input_x == self.box_width - 1:
            self.scroll += 1
        else:
            self.input_x += 1

    def handle_key(self, key: int | str) -> int | None:
        """Apply one key press.

        Returns None while the box stays open, otherwise the exit code:
        0 for OK, 1 for Help and -1 for escape. ``overflow`` is set when a
        character was refused because the value is full.
        """
        key = _code(key)
        self.overflow = False

        if self.button == -1 and key not in _PASS_KEYS:
            if key in _IGNORED_KEYS:
                return None
            if key in _BACKSPACE_KEYS:
                self._backspace()
                return None
            if 32 <= key < 127:
                self._insert(chr(key))
                return None

        if key in _OK_KEYS:
            return 0
        if key in _HELP_KEYS:
            return 1
        if key in _BACK_KEYS:
            self.button = _PREVIOUS_BUTTON[self.button]
            return None
        if key in _FORWARD_KEYS:
            self.button = _NEXT_BUTTON[self.button]
            return None
        if key in _CONFIRM_KEYS:
            return 0 if self.button == -1 else self.button
        if key in _EXIT_KEYS:
            return -1
        return None


def _print_buttons(screen, dialog, height, width, selected) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(dialog, "  Ok  ", y, x, selected == 0)
    screen.print_button(dialog, " Help ", y, x + 14, selected == 1)
    with suppress(curses.error):
        dialog.move(y, x + 1 + 14 * selected)


def run_inputbox(screen, title, prompt, height, width, init=None) -> tuple[int, str]:
    """Show an input box and return ``(exit code, entered text)``."""
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

    box_width = width - 6
    cur_y, _ = dialog.getyx()
    box_y = cur_y + 2
    box_x = (width - box_width) // 2
    screen.draw_box(
        dialog, cur_y + 1, box_x - 1, 3, box_width + 2,
        attr(Attribute.BORDER), attr(Attribute.DIALOG),
    )

    field = InputField(box_width, init)
    while True:
        dialog.attrset(attr(Attribute.INPUTBOX))
        with suppress(curses.error):
            dialog.addstr(box_y, box_x, field.visible.ljust(box_width))
        _print_buttons(screen, dialog, height, width, max(field.button, 0))
        if field.button == -1:
            with suppress(curses.error):
                dialog.move(box_y, box_x + field.input_x)
        dialog.refresh()
        code = field.handle_key(dialog.getch())
        if field.overflow:
            with suppress(curses.error):
                curses.flash()
        if code is not None:
            return code, field.value