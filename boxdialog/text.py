"""Layout helpers for dialog text: hotkeys, word wrapping, titles and buttons."""

from __future__ import annotations

import curses

ESC = 27
TAB = 9
MAX_LEN = 2048


def first_alpha(string: str, exempt: str) -> int:
    """Return the index of the first letter outside brackets and not in ``exempt``.

    Text inside ``<>``, ``[]`` or ``()`` is skipped. Returns 0 when no such
    letter exists.
    """
    in_paren = 0
    for index, char in enumerate(string):
        c = char.lower()
        if c in "<[(":
            in_paren += 1
        if c in ">])" and in_paren > 0:
            in_paren -= 1
        if not in_paren and c.isalpha() and c not in exempt:
            return index
    return 0


def _next_word_wont_fit(text: str, rest_start: int, wlen: int, room: int) -> bool:
    rest = text[rest_start:]
    if wlen + 1 + len(rest) <= room:
        return False
    next_space = rest.find(" ")
    return next_space == -1 or wlen + 1 + next_space > room


def wrap_prompt(prompt: str, width: int, y: int, x: int) -> list[tuple[int, int, str]]:
    """Lay out ``prompt`` within ``width`` columns starting at row ``y``.

    Newlines become spaces. A short prompt is centred on one line; a long
    one is wrapped word by word starting at column ``x``. A new line is
    started when a word does not fit, or when a short word that opens a
    sentence (after a double space) would be left alone at the line end.
    Returns ``(row, column, word)`` placements in order.
    """
    text = prompt.replace("\n", " ")
    if len(text) <= width - x * 2:
        return [(y, (width - len(text)) // 2, text)]

    placements: list[tuple[int, int, str]] = []
    cur_y, cur_x = y, x
    newl = True
    pos: int | None = 0
    while pos is not None and pos < len(text):
        space = text.find(" ", pos)
        if space == -1:
            word, rest_start = text[pos:], None
        else:
            word, rest_start = text[pos:space], space + 1

        room = width - cur_x
        wlen = len(word)
        if wlen > room or (
            newl
            and wlen < 4
            and rest_start is not None
            and _next_word_wont_fit(text, rest_start, wlen, room)
        ):
            cur_y += 1
            cur_x = x

        placements.append((cur_y, cur_x, word))
        cur_x += wlen + 1

        if rest_start is not None and rest_start < len(text) and text[rest_start] == " ":
            cur_x += 1
            while rest_start < len(text) and text[rest_start] == " ":
                rest_start += 1
            newl = True
        else:
            newl = False
        pos = rest_start
    return placements


def title_span(title: str | None, width: int) -> tuple[int, str] | None:
    """Return the column and visible text of a title centred in ``width``.

    The title is cut to ``width - 2`` characters. Returns None for no title.
    """
    if title is None:
        return None
    tlen = min(width - 2, len(title))
    return (width - tlen) // 2, title[:tlen]


def cycle_button(button: int, key: int, count: int) -> int:
    """Move the selected button left (on KEY_LEFT) or right, wrapping round."""
    button = button - 1 if key == curses.KEY_LEFT else button + 1
    if button < 0:
        return count - 1
    if button > count - 1:
        return 0
    return button