"""Text box: a scrolling read-only view of a file."""

from __future__ import annotations

import curses
from contextlib import suppress

from .colors import Attribute
from .text import ESC, MAX_LEN

_EXIT_KEYS = {ord("E"), ord("e"), ord("X"), ord("x")}
_HOME_KEYS = {ord("g"), curses.KEY_HOME}
_END_KEYS = {ord("G"), curses.KEY_END}
_LINE_UP_KEYS = {ord("K"), ord("k"), curses.KEY_UP}
_PAGE_UP_KEYS = {ord("B"), ord("b"), curses.KEY_PPAGE}
_LINE_DOWN_KEYS = {ord("J"), ord("j"), curses.KEY_DOWN}
_PAGE_DOWN_KEYS = {curses.KEY_NPAGE, ord(" ")}
_LEFT_KEYS = {ord("0"), ord("H"), ord("h"), curses.KEY_LEFT}
_RIGHT_KEYS = {ord("L"), ord("l"), curses.KEY_RIGHT}
_CLOSE_KEYS = {ESC, ord("\n")}


def _byte_length(line: str) -> int:
    return len(line.encode("utf-8", "surrogateescape"))


class TextPager:
    """Paging state over a text, shown ``height`` rows by ``width`` columns.

    ``top`` is the first line shown and ``hscroll`` the number of columns
    scrolled off to the left. Lines longer than the maximum length are cut.
    """

    def __init__(self, text: str | bytes, height: int, width: int):
        if height < 1:
            raise ValueError("a text box needs at least one row")
        if isinstance(text, bytes):
            text = text.decode("utf-8", "surrogateescape")
        raw = text.split("\n")
        self._lines = [line[:MAX_LEN] for line in raw]
        self._starts: list[int] = []
        offset = 0
        for line in raw:
            self._starts.append(offset)
            offset += _byte_length(line) + 1
        self._size = offset - 1

        self.height = height
        self.width = width
        self.hscroll = 0
        self.begin_reached = True
        self.end_reached = False
        self.top = 0
        self.page_length = 0
        self._next = 0
        self._show(0)

    def _show(self, top: int) -> None:
        count = len(self._lines)
        self.top = top
        self.end_reached = top + self.height >= count
        self._next = min(top + self.height, count)
        self.page_length = min(self.height, count - top)

    def _back_lines(self, n: int) -> int:
        """Return the line ``n`` lines before the end of the current page."""
        self.begin_reached = False
        position = len(self._lines) if self.end_reached else self._next
        if n >= position:
            self.begin_reached = True
            return 0
        return position - n

    def handle_key(self, key: int | str) -> int | None:
        """Apply one key press.

        Returns None while the box stays open, 0 when closed with the exit
        keys and -1 when closed with escape or Enter.
        """
        key = ord(key) if isinstance(key, str) else key

        if key in _EXIT_KEYS:
            return 0
        if key in _CLOSE_KEYS:
            return -1
        if key in _HOME_KEYS:
            if not self.begin_reached:
                self.begin_reached = True
                self._show(0)
        elif key in _END_KEYS:
            self.end_reached = True
            self._show(self._back_lines(self.height))
        elif key in _LINE_UP_KEYS:
            if not self.begin_reached:
                self._show(self._back_lines(self.page_length + 1))
        elif key in _PAGE_UP_KEYS:
            if not self.begin_reached:
                self._show(self._back_lines(self.page_length + self.height))
        elif key in _LINE_DOWN_KEYS:
            if not self.end_reached:
                self.begin_reached = False
                self._show(self.top + 1)
        elif key in _PAGE_DOWN_KEYS:
            if not self.end_reached:
                self.begin_reached = False
                self._show(self._next)
        elif key in _LEFT_KEYS:
            if self.hscroll > 0:
                self.hscroll = 0 if key == ord("0") else self.hscroll - 1
                self._show(self._back_lines(self.page_length))
        elif key in _RIGHT_KEYS:
            if self.hscroll < MAX_LEN:
                self.hscroll += 1
                self._show(self._back_lines(self.page_length))
        return None

    def visible_lines(self) -> list[str]:
        """Return the rows as displayed, each led by one blank column."""
        rows = []
        for row in range(self.height):
            index = self.top + row
            line = self._lines[index] if index < len(self._lines) else ""
            line = line[self.hscroll:]
            rows.append(" " + line[:max(0, self.width - 2)])
        return rows

    def position_percent(self) -> int:
        """Return how far into the text the end of the page lies, in percent."""
        if not self._size:
            return 100
        if self._next >= len(self._lines):
            offset = self._size
        else:
            offset = self._starts[self._next]
        return offset * 100 // self._size


def _line_char(name: str, fallback: str) -> int:
    value = getattr(curses, name, None)
    return value if value is not None else ord(fallback)


def run_textbox(screen, title, path, height, width) -> int:
    """Show the file at ``path``; return 0 on exit and -1 on escape.

    Raises OSError when the file cannot be read.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    pager = TextPager(data, height - 4, width - 2)

    attr = screen.theme.attr
    lines, cols = screen.stdscr.getmaxyx()
    x = (cols - width) // 2
    y = (lines - height) // 2

    screen.draw_shadow(screen.stdscr, y, x, height, width)
    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    text_win = dialog.subwin(height - 4, width - 2, y + 1, x + 1)
    text_win.keypad(True)

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
    screen.print_button(dialog, " Exit ", height - 2, width // 2 - 4, True)
    dialog.noutrefresh()
    cur_y, cur_x = dialog.getyx()
    screen.attr_clear(text_win, height - 4, width - 2, attr(Attribute.DIALOG))

    while True:
        text_win.attrset(attr(Attribute.DIALOG))
        for row, line in enumerate(pager.visible_lines()):
            with suppress(curses.error):
                text_win.addstr(row, 0, line)
                text_win.clrtoeol()
        text_win.noutrefresh()
        dialog.attrset(attr(Attribute.POSITION_INDICATOR))
        with suppress(curses.error):
            dialog.addstr(height - 3, width - 9, f"({pager.position_percent():3d}%)")
            dialog.move(cur_y, cur_x)
        dialog.refresh()
        code = pager.handle_key(dialog.getch())
        if code is not None:
            return code