"""Radio-style check list: choose one item from a scrolling list."""

from __future__ import annotations

import curses
from contextlib import suppress
from typing import Sequence

from .colors import Attribute
from .text import ESC, TAB, cycle_button

_UP_KEYS = {curses.KEY_UP, ord("-")}
_DOWN_KEYS = {curses.KEY_DOWN, ord("+")}
_HELP_KEYS = {ord("H"), ord("h"), ord("?")}
_BUTTON_KEYS = {TAB, curses.KEY_LEFT, curses.KEY_RIGHT}
_SELECT_KEYS = {ord("S"), ord("s"), ord(" "), ord("\n")}
_EXIT_KEYS = {ord("X"), ord("x"), ESC}


def _code(key: int | str) -> int:
    return ord(key) if isinstance(key, str) else key


def _upper(code: int) -> int:
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def _cdiv(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    return int(a / b)


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


class Checklist:
    """Selection state of a radio list.

    ``items`` holds ``(tag, text, status)`` triples; a status of ``on``
    marks an item as chosen and ``selected`` puts the cursor on it.
    """

    def __init__(self, items: Sequence[tuple[str, str, str]], list_height: int):
        self.items = [(str(tag), str(text), str(state)) for tag, text, state in items]
        if not self.items:
            raise ValueError("a check list needs at least one item")
        self.status = [state.lower() == "on" for _, _, state in self.items]

        choice = 0
        for index, (_, _, state) in enumerate(self.items):
            if (not choice and self.status[index]) or state.lower() == "selected":
                choice = index + 1
        if choice:
            choice -= 1

        self.list_height = list_height
        self.max_choice = min(list_height, len(self.items))
        self.scroll = 0
        if choice >= list_height:
            self.scroll = choice - list_height + 1
            choice -= self.scroll
        self.choice = choice
        self.button = 0
        self.output = ""

    @property
    def _current(self) -> int:
        return self.scroll + self.choice

    def _hotkey(self, key: int) -> int | None:
        visible = self.items[self.scroll:self.scroll + self.max_choice]
        for index, (_, text, _) in enumerate(visible):
            if text and _upper(key) == _upper(ord(text[0])):
                return index
        return None

    def handle_key(self, key: int | str) -> int | None:
        """Apply one key press.

        Returns None while the dialog stays open, otherwise the exit code:
        0 for Select, 1 for Help and -1 for escape. ``output`` then holds
        the chosen tags (Select) or the tag under the cursor (Help).
        """
        key = _code(key)
        count = len(self.items)
        hit = self._hotkey(key)

        if hit is not None or key in _UP_KEYS or key in _DOWN_KEYS:
            target = hit
            if key in _UP_KEYS:
                if self.choice == 0:
                    if self.scroll:
                        self.scroll -= 1
                    return None
                target = self.choice - 1
            elif key in _DOWN_KEYS:
                if self.choice == self.max_choice - 1:
                    if self.scroll + self.choice < count - 1:
                        self.scroll += 1
                    return None
                target = self.choice + 1
            self.choice = target
            return None

        if key in _HELP_KEYS:
            self.output = self.items[self._current][0]
            return 1
        if key in _BUTTON_KEYS:
            self.button = cycle_button(self.button, key, 2)
            return None
        if key in _SELECT_KEYS:
            if not self.button:
                if not self.status[self._current]:
                    self.status = [False] * count
                    self.status[self._current] = True
                self.output = "".join(
                    tag for (tag, _, _), on in zip(self.items, self.status) if on
                )
            else:
                self.output = self.items[self._current][0]
            return self.button
        if key in _EXIT_KEYS:
            return -1
        return None


def _draw_frame(screen, dialog, title, prompt, height, width) -> None:
    attr = screen.theme.attr
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


def _print_item(screen, win, list_width, check_x, item_x, text, on, row, selected) -> None:
    attr = screen.theme.attr
    win.attrset(attr(Attribute.MENUBOX))
    with suppress(curses.error):
        win.addstr(row, 0, " " * list_width)
    win.attrset(attr(Attribute.CHECK_SELECTED if selected else Attribute.CHECK))
    with suppress(curses.error):
        win.addstr(row, check_x, "(X)" if on else "( )")
    win.attrset(attr(Attribute.TAG_SELECTED if selected else Attribute.TAG))
    with suppress(curses.error):
        win.addstr(row, item_x, text[:1])
    win.attrset(attr(Attribute.ITEM_SELECTED if selected else Attribute.ITEM))
    with suppress(curses.error):
        win.addstr(text[1:])
    if selected:
        with suppress(curses.error):
            win.move(row, check_x + 1)


def _print_arrows(screen, win, up, down, y, x, height) -> None:
    attr = screen.theme.attr
    hline = _line_char("ACS_HLINE", "-")
    with suppress(curses.error):
        win.move(y, x)
        if up:
            win.attrset(attr(Attribute.UARROW))
            win.addch(_line_char("ACS_UARROW", "^"))
            win.addstr("(-)")
        else:
            win.attrset(attr(Attribute.MENUBOX))
            for _ in range(4):
                win.addch(hline)
        win.move(y + height + 1, x)
        if down:
            win.attrset(attr(Attribute.DARROW))
            win.addch(_line_char("ACS_DARROW", "v"))
            win.addstr("(+)")
        else:
            win.attrset(attr(Attribute.MENUBOX_BORDER))
            for _ in range(4):
                win.addch(hline)


def _print_buttons(screen, dialog, height, width, selected) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(dialog, "Select", y, x, selected == 0)
    screen.print_button(dialog, " Help ", y, x + 14, selected == 1)
    with suppress(curses.error):
        dialog.move(y, x + 1 + 14 * selected)
    dialog.refresh()


def run_checklist(screen, title, prompt, height, width, list_height, items) -> tuple[int, str]:
    """Show a radio list and return ``(exit code, output text)``."""
    state = Checklist(items, list_height)
    attr = screen.theme.attr
    lines, cols = screen.stdscr.getmaxyx()
    x = (cols - width) // 2
    y = (lines - height) // 2

    screen.draw_shadow(screen.stdscr, y, x, height, width)
    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    _draw_frame(screen, dialog, title, prompt, height, width)

    list_width = width - 6
    box_y = height - list_height - 5
    box_x = (width - list_width) // 2 - 1
    listwin = dialog.subwin(list_height, list_width, y + box_y + 1, x + box_x + 1)
    listwin.keypad(True)
    screen.draw_box(
        dialog, box_y, box_x, list_height + 2, list_width + 2,
        attr(Attribute.MENUBOX_BORDER), attr(Attribute.MENUBOX),
    )

    widest = max([0] + [len(text) + 4 for _, text, _ in state.items])
    check_x = max(0, _cdiv(list_width - widest, 2))
    item_x = check_x + 4
    count = len(state.items)

    while True:
        for row in range(state.max_choice):
            index = state.scroll + row
            _print_item(
                screen, listwin, list_width, check_x, item_x,
                state.items[index][1], state.status[index], row, row == state.choice,
            )
        _print_arrows(
            screen, dialog,
            state.scroll > 0,
            list_height < count and state.scroll + state.choice < count - 1,
            box_y, box_x + check_x + 5, list_height,
        )
        _print_buttons(screen, dialog, height, width, state.button)
        with suppress(curses.error):
            listwin.move(state.choice, check_x + 1)
        listwin.refresh()
        code = state.handle_key(dialog.getch())
        if code is not None:
            return code, state.output