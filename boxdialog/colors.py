"""Display attributes for dialog boxes: monochrome defaults and the colour scheme."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from enum import IntEnum


class Attribute(IntEnum):
    """Named display attributes used when drawing dialogs."""

    SCREEN = 0
    SHADOW = 1
    DIALOG = 2
    TITLE = 3
    BORDER = 4
    BUTTON_ACTIVE = 5
    BUTTON_INACTIVE = 6
    BUTTON_KEY_ACTIVE = 7
    BUTTON_KEY_INACTIVE = 8
    BUTTON_LABEL_ACTIVE = 9
    BUTTON_LABEL_INACTIVE = 10
    INPUTBOX = 11
    INPUTBOX_BORDER = 12
    SEARCHBOX = 13
    SEARCHBOX_TITLE = 14
    SEARCHBOX_BORDER = 15
    POSITION_INDICATOR = 16
    MENUBOX = 17
    MENUBOX_BORDER = 18
    ITEM = 19
    ITEM_SELECTED = 20
    TAG = 21
    TAG_SELECTED = 22
    TAG_KEY = 23
    TAG_KEY_SELECTED = 24
    CHECK = 25
    CHECK_SELECTED = 26
    UARROW = 27
    DARROW = 28


_MONO = {
    Attribute.SCREEN: curses.A_NORMAL,
    Attribute.SHADOW: curses.A_NORMAL,
    Attribute.DIALOG: curses.A_NORMAL,
    Attribute.TITLE: curses.A_BOLD,
    Attribute.BORDER: curses.A_NORMAL,
    Attribute.BUTTON_ACTIVE: curses.A_REVERSE,
    Attribute.BUTTON_INACTIVE: curses.A_DIM,
    Attribute.BUTTON_KEY_ACTIVE: curses.A_REVERSE,
    Attribute.BUTTON_KEY_INACTIVE: curses.A_BOLD,
    Attribute.BUTTON_LABEL_ACTIVE: curses.A_REVERSE,
    Attribute.BUTTON_LABEL_INACTIVE: curses.A_NORMAL,
    Attribute.INPUTBOX: curses.A_NORMAL,
    Attribute.INPUTBOX_BORDER: curses.A_NORMAL,
    Attribute.SEARCHBOX: curses.A_NORMAL,
    Attribute.SEARCHBOX_TITLE: curses.A_BOLD,
    Attribute.SEARCHBOX_BORDER: curses.A_NORMAL,
    Attribute.POSITION_INDICATOR: curses.A_BOLD,
    Attribute.MENUBOX: curses.A_NORMAL,
    Attribute.MENUBOX_BORDER: curses.A_NORMAL,
    Attribute.ITEM: curses.A_NORMAL,
    Attribute.ITEM_SELECTED: curses.A_REVERSE,
    Attribute.TAG: curses.A_BOLD,
    Attribute.TAG_SELECTED: curses.A_REVERSE,
    Attribute.TAG_KEY: curses.A_BOLD,
    Attribute.TAG_KEY_SELECTED: curses.A_REVERSE,
    Attribute.CHECK: curses.A_BOLD,
    Attribute.CHECK_SELECTED: curses.A_REVERSE,
    Attribute.UARROW: curses.A_BOLD,
    Attribute.DARROW: curses.A_BOLD,
}

_BLACK = curses.COLOR_BLACK
_RED = curses.COLOR_RED
_GREEN = curses.COLOR_GREEN
_YELLOW = curses.COLOR_YELLOW
_BLUE = curses.COLOR_BLUE
_CYAN = curses.COLOR_CYAN
_WHITE = curses.COLOR_WHITE

_COLORS = {
    Attribute.SCREEN: (_CYAN, _BLUE, True),
    Attribute.SHADOW: (_BLACK, _BLACK, True),
    Attribute.DIALOG: (_BLACK, _WHITE, False),
    Attribute.TITLE: (_YELLOW, _WHITE, True),
    Attribute.BORDER: (_WHITE, _WHITE, True),
    Attribute.BUTTON_ACTIVE: (_WHITE, _BLUE, True),
    Attribute.BUTTON_INACTIVE: (_BLACK, _WHITE, False),
    Attribute.BUTTON_KEY_ACTIVE: (_WHITE, _BLUE, True),
    Attribute.BUTTON_KEY_INACTIVE: (_RED, _WHITE, False),
    Attribute.BUTTON_LABEL_ACTIVE: (_YELLOW, _BLUE, True),
    Attribute.BUTTON_LABEL_INACTIVE: (_BLACK, _WHITE, True),
    Attribute.INPUTBOX: (_BLACK, _WHITE, False),
    Attribute.INPUTBOX_BORDER: (_BLACK, _WHITE, False),
    Attribute.SEARCHBOX: (_BLACK, _WHITE, False),
    Attribute.SEARCHBOX_TITLE: (_YELLOW, _WHITE, True),
    Attribute.SEARCHBOX_BORDER: (_WHITE, _WHITE, True),
    Attribute.POSITION_INDICATOR: (_YELLOW, _WHITE, True),
    Attribute.MENUBOX: (_BLACK, _WHITE, False),
    Attribute.MENUBOX_BORDER: (_WHITE, _WHITE, True),
    Attribute.ITEM: (_BLACK, _WHITE, False),
    Attribute.ITEM_SELECTED: (_WHITE, _BLUE, True),
    Attribute.TAG: (_YELLOW, _WHITE, True),
    Attribute.TAG_SELECTED: (_YELLOW, _BLUE, True),
    Attribute.TAG_KEY: (_YELLOW, _WHITE, True),
    Attribute.TAG_KEY_SELECTED: (_YELLOW, _BLUE, True),
    Attribute.CHECK: (_BLACK, _WHITE, False),
    Attribute.CHECK_SELECTED: (_WHITE, _BLUE, True),
    Attribute.UARROW: (_GREEN, _WHITE, True),
    Attribute.DARROW: (_GREEN, _WHITE, True),
}


def color_table() -> dict[Attribute, tuple[int, int, bool]]:
    """Return the default (foreground, background, highlight) for every attribute."""
    return dict(_COLORS)


@dataclass
class Theme:
    """Curses attribute values for each named attribute."""

    styles: dict[Attribute, int]
    pairs: dict[Attribute, int] = field(default_factory=dict)

    def attr(self, attribute: Attribute | int) -> int:
        """Return the curses attribute value for ``attribute``."""
        attribute = Attribute(attribute)
        value = self.styles[attribute]
        pair = self.pairs.get(attribute)
        if pair is not None:
            value |= curses.color_pair(pair)
        return value

    def apply_colors(self) -> bool:
        """Switch to the colour scheme if the terminal supports colour.

        Returns True when colours were set up, False when the terminal
        has none and the theme is left unchanged.
        """
        if not curses.has_colors():
            return False
        curses.start_color()
        for attribute, (fg, bg, highlight) in color_table().items():
            pair = int(attribute) + 1
            curses.init_pair(pair, fg, bg)
            self.styles[attribute] = curses.A_BOLD if highlight else curses.A_NORMAL
            self.pairs[attribute] = pair
        return True


def mono_theme() -> Theme:
    """Return a fresh theme with the monochrome defaults."""
    return Theme(styles=dict(_MONO))