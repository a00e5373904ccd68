"""Scrolling menu with hotkeys and a remembered scroll position."""

from __future__ import annotations

import curses
import os
import re
from contextlib import suppress
from typing import Sequence

from .colors import Attribute
from .text import ESC, TAB, cycle_button, first_alpha

_HOTKEY_EXEMPT = "YyNnMmHh"
_RESERVED = {ord(c) for c in "ynmh"}
_UP_KEYS = {curses.KEY_UP, ord("-")}
_DOWN_KEYS = {curses.KEY_DOWN, ord("+")}
_MOVE_KEYS = _UP_KEYS | _DOWN_KEYS | {curses.KEY_PPAGE, curses.KEY_NPAGE}
_BUTTON_KEYS = {curses.KEY_LEFT, TAB, curses.KEY_RIGHT}
_ACTION_CODES = {
    ord("s"): 3,
    ord("y"): 3,
    ord("n"): 4,
    ord("m"): 5,
    ord(" "): 6,
    ord("/"): 7,
}
_EXIT_KEYS = {ord("e"), ord("x"), ESC}

DEFAULT_SCROLL_FILE = "lxdialog.scrltmp"


def _code(key: int | str) -> int:
    return ord(key) if isinstance(key, str) else key


def _lower(code: int) -> int:
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def _cdiv(a: int, b: int) -> int:
    return int(a / b)


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


def _remove(path) -> None:
    with suppress(OSError):
        os.remove(path)


def read_scroll_file(path) -> int | None:
    """Return the scroll position saved in ``path``.

    Returns None when the file is missing; a file that holds no number is
    removed and None returned.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return None
    match = re.match(r"\s*([+-]?\d+)", text)
    if match is None:
        _remove(path)
        return None
    return int(match.group(1))


def write_scroll_file(path, scroll: int) -> None:
    """Save ``scroll`` to ``path``; failure to write is ignored."""
    with suppress(OSError):
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{scroll}\n")


class Menu:
    """Cursor and scroll state of a menu of ``(tag, text)`` items."""

    def __init__(self, items: Sequence[tuple[str, str]], menu_height: int,
                 current: str | None = None, saved_scroll: int | None = None):
        self.items = [(str(tag), str(text)) for tag, text in items]
        if not self.items:
            raise ValueError("a menu needs at least one item")
        count = len(self.items)
        self.menu_height = menu_height
        self.max_choice = min(menu_height, count)
        self.button = 0
        self.output = ""
        self.persist_scroll = False
        self.scroll_rejected = False

        choice = 0
        for index, (tag, _) in enumerate(self.items):
            if tag == current:
                choice = index

        scroll = 0
        restored = False
        if saved_scroll is not None:
            if (0 <= saved_scroll <= choice
                    and saved_scroll + self.max_choice > choice
                    and saved_scroll + self.max_choice <= count):
                scroll = saved_scroll
                choice -= scroll
                restored = True
            else:
                self.scroll_rejected = True

        half = self.max_choice // 2
        if choice >= self.max_choice or (not restored and choice >= half):
            if choice >= count - half:
                scroll = count - self.max_choice
            else:
                scroll = choice - half
            choice -= scroll

        self.scroll = scroll
        self.choice = choice

    @property
    def _current(self) -> int:
        return self.scroll + self.choice

    def _hotkey(self, key: int) -> int | None:
        if key in _RESERVED:
            return None
        order = list(range(self.choice + 1, self.max_choice)) + list(range(self.max_choice))
        for row in order:
            text = self.items[self.scroll + row][1]
            if not text:
                continue
            if key == _lower(ord(text[first_alpha(text, _HOTKEY_EXEMPT)])):
                return row
        return None

    def handle_key(self, key: int | str) -> int | None:
        """Apply one key press.

        Returns None while the menu stays open, otherwise the exit code:
        the selected button (0 Select, 1 Exit, 2 Help), 3 to 7 for the
        action keys ``s``/``y``, ``n``, ``m``, space and ``/``, or -1 for
        escape. ``output`` then holds what the caller should report.
        """
        key = _code(key)
        key = _lower(key)
        count = len(self.items)
        hit = self._hotkey(key)

        if hit is not None or key in _MOVE_KEYS:
            if key in _UP_KEYS:
                if self.choice < 2 and self.scroll:
                    self.scroll -= 1
                else:
                    self.choice = max(self.choice - 1, 0)
            elif key in _DOWN_KEYS:
                if self.choice > self.max_choice - 3 and self.scroll + self.max_choice < count:
                    self.scroll += 1
                else:
                    self.choice = min(self.choice + 1, self.max_choice - 1)
            elif key == curses.KEY_PPAGE:
                for _ in range(self.max_choice):
                    if self.scroll > 0:
                        self.scroll -= 1
                    elif self.choice > 0:
                        self.choice -= 1
            elif key == curses.KEY_NPAGE:
                for _ in range(self.max_choice):
                    if self.scroll + self.max_choice < count:
                        self.scroll += 1
                    elif self.choice + 1 < self.max_choice:
                        self.choice += 1
            else:
                self.choice = hit
            return None

        if key in _BUTTON_KEYS:
            self.button = cycle_button(self.button, key, 3)
            return None
        if key in _ACTION_CODES:
            self.persist_scroll = True
            self.output = self.items[self._current][0] + "\n"
            return _ACTION_CODES[key]
        if key in (ord("h"), ord("?")):
            self.button = 2
        if key in (ord("h"), ord("?"), ord("\n")):
            tag, text = self.items[self._current]
            if self.button == 2:
                self.output = f'{tag} "{text[first_alpha(text, ""):]}"\n'
            else:
                self.output = tag + "\n"
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


def _print_item(screen, win, menu_width, item_x, tag, text, row, selected) -> None:
    attr = screen.theme.attr
    shown = text[:max(0, menu_width - item_x)][:menu_width]
    hot = first_alpha(shown, _HOTKEY_EXEMPT)
    win.attrset(attr(Attribute.MENUBOX))
    with suppress(curses.error):
        win.move(row, 0)
        win.clrtoeol()
    win.attrset(attr(Attribute.ITEM_SELECTED if selected else Attribute.ITEM))
    with suppress(curses.error):
        win.addstr(row, item_x, shown)
    if tag[:1] != ":" and shown:
        win.attrset(attr(Attribute.TAG_KEY_SELECTED if selected else Attribute.TAG_KEY))
        with suppress(curses.error):
            win.addstr(row, item_x + hot, shown[hot])
    if selected:
        with suppress(curses.error):
            win.move(row, item_x + 1)


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


def _print_buttons(screen, win, height, width, selected) -> None:
    x = width // 2 - 16
    y = height - 2
    screen.print_button(win, "Select", y, x, selected == 0)
    screen.print_button(win, " Exit ", y, x + 12, selected == 1)
    screen.print_button(win, " Help ", y, x + 24, selected == 2)
    with suppress(curses.error):
        win.move(y, x + 1 + 12 * selected)
    win.refresh()


def run_menu(screen, title, prompt, height, width, menu_height, current, items,
             scroll_file=DEFAULT_SCROLL_FILE) -> tuple[int, str]:
    """Show a menu and return ``(exit code, output text)``.

    The scroll position is kept in ``scroll_file`` across invocations when
    an action key closes the menu, and the file is removed otherwise.
    """
    state = Menu(items, menu_height, current, read_scroll_file(scroll_file))
    if state.scroll_rejected:
        _remove(scroll_file)

    attr = screen.theme.attr
    lines, cols = screen.stdscr.getmaxyx()
    x = (cols - width) // 2
    y = (lines - height) // 2

    screen.draw_shadow(screen.stdscr, y, x, height, width)
    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    _draw_frame(screen, dialog, title, prompt, height, width)

    menu_width = width - 6
    box_y = height - menu_height - 5
    box_x = (width - menu_width) // 2 - 1
    menu = dialog.subwin(menu_height, menu_width, y + box_y + 1, x + box_x + 1)
    menu.keypad(True)
    screen.draw_box(
        dialog, box_y, box_x, menu_height + 2, menu_width + 2,
        attr(Attribute.MENUBOX_BORDER), attr(Attribute.MENUBOX),
    )
    item_x = max(0, _cdiv(menu_width - 70, 2))
    count = len(state.items)

    while True:
        for row in range(state.max_choice):
            tag, text = state.items[state.scroll + row]
            _print_item(screen, menu, menu_width, item_x, tag, text, row, row == state.choice)
        menu.noutrefresh()
        _print_arrows(
            screen, dialog,
            state.scroll > 0,
            menu_height < count and state.scroll + menu_height < count,
            box_y, box_x + item_x + 1, menu_height,
        )
        _print_buttons(screen, dialog, height, width, state.button)
        with suppress(curses.error):
            menu.move(state.choice, item_x + 1)
        menu.refresh()
        code = state.handle_key(menu.getch())
        if code is not None:
            if state.persist_scroll:
                write_scroll_file(scroll_file, state.scroll)
            else:
                _remove(scroll_file)
            return code, state.output