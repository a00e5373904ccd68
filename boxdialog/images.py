"""Small icons in XPM form, and a parser for them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_COLOR_KEYS = {"c", "m", "g", "g4", "s"}
_RUN = re.compile(r"(\d*)(\D)")


@dataclass(frozen=True)
class Xpm:
    """A parsed XPM image: a colour for every pixel key, and pixel rows."""

    width: int
    height: int
    chars_per_pixel: int
    colors: dict[str, str]
    pixels: tuple[str, ...]


def _parse_color(line: str, cpp: int) -> tuple[str, str]:
    if len(line) < cpp:
        raise ValueError(f"colour line too short: {line!r}")
    key, words = line[:cpp], line[cpp:].split()
    entries: dict[str, list[str]] = {}
    current: str | None = None
    for word in words:
        if word in _COLOR_KEYS:
            current = word
            entries[current] = []
        elif current is None:
            raise ValueError(f"colour line without a key: {line!r}")
        else:
            entries[current].append(word)
    for name in ("c", "m", "g", "g4", "s"):
        if entries.get(name):
            return key, " ".join(entries[name])
    raise ValueError(f"colour line without a value: {line!r}")


def parse_xpm(lines: Iterable[str]) -> Xpm:
    """Parse the strings of an XPM image; raise ValueError when malformed."""
    lines = list(lines)
    if not lines:
        raise ValueError("empty image")
    header = lines[0].split()
    if len(header) < 4:
        raise ValueError(f"bad header: {lines[0]!r}")
    try:
        width, height, ncolors, cpp = (int(word) for word in header[:4])
    except ValueError as exc:
        raise ValueError(f"bad header: {lines[0]!r}") from exc
    if min(width, height, ncolors, cpp) < 1:
        raise ValueError(f"bad header: {lines[0]!r}")
    if len(lines) != 1 + ncolors + height:
        raise ValueError("line count does not match the header")

    colors: dict[str, str] = {}
    for line in lines[1:1 + ncolors]:
        key, value = _parse_color(line, cpp)
        if key in colors:
            raise ValueError(f"pixel key {key!r} defined twice")
        colors[key] = value

    pixels = tuple(lines[1 + ncolors:])
    for row in pixels:
        if len(row) != width * cpp:
            raise ValueError(f"row has the wrong length: {row!r}")
        for start in range(0, len(row), cpp):
            if row[start:start + cpp] not in colors:
                raise ValueError(f"unknown pixel key in row: {row!r}")
    return Xpm(width, height, cpp, colors, pixels)


def _expand(spec: str) -> str:
    """Expand a run-length row such as '3#2.' into '###..'."""
    return "".join(char * int(count or 1) for count, char in _RUN.findall(spec))


def _image(width: int, colors: dict[str, str], specs: Iterable[str]) -> tuple[str, ...]:
    rows = tuple(_expand(spec) for spec in specs)
    for row in rows:
        if len(row) != width:
            raise ValueError(f"row has the wrong length: {row!r}")
    header = f"{width} {len(rows)} {len(colors)} 1"
    return (header, *(f"{key} c {value}" for key, value in colors.items()), *rows)


_LARGE = 22
_SMALL = 12
_SMALL_COLORS = {" ": "white", ".": "black"}

LOAD = _image(
    _LARGE,
    {".": "None", "#": "#000000", "c": "#838100", "a": "#ffff00", "b": "#ffffff"},
    (
        *["22."] * 3,
        "12.4#4.#.",
        "11.#4.2#.2#.",
        "18.3#.",
        "17.4#.",
        ".4#11.5#.",
        "#abab10#7.",
        "#" + "ba" * 6 + "b#7.",
        "#" + "ab" * 6 + "a#7.",
        "#" + "ba" * 6 + "b#7.",
        "#ababab15#",
        "#babab2#12c2#",
        "#abab2#12c2#.",
        "#bab2#12c2#2.",
        "#ab2#12c2#3.",
        "#b2#12c2#4.",
        "3#12c2#5.",
        "2#12c2#6.",
        "15#7.",
        "22.",
    ),
)

SAVE = _image(
    _LARGE,
    {".": "None", "#": "#000000", "a": "#838100", "b": "#c5c2c5", "c": "#cdb6d5"},
    (
        "22.",
        ".20#.",
        *[".#2a#12b#2b#."] * 2,
        ".#2a#9bc2b4#.",
        *[".#2a#3b2c7b#2a#."] * 2,
        *[".#2a#12b#2a#."] * 4,
        ".#3a12#3a#.",
        *[".#18a#."] * 2,
        ".#3a13#2a#.",
        *[".#3a9#3b#2a#."] * 5,
        "2.18#2.",
        "22.",
    ),
)

BACK = _image(
    _LARGE,
    {".": "None", "#": "#000083", "a": "#838183"},
    (
        *["22."] * 5,
        "11.6#a4.",
        "2.#6.10#3.",
        "2.2#3.4#6.2#a2.",
        "2.3#.3#9.2#2.",
        "2.6#10.2#2.",
        "2.5#11.2#2.",
        "2.6#10.2#2.",
        "2.7#9.2#2.",
        "2.8#7.2#a2.",
        "15.a3#3.",
        "15.3#4.",
        *["22."] * 6,
    ),
)

_BLACK_ON_CLEAR = {".": "None", "#": "#000000"}
_TREE_ROWS = ["6.#15."] * 5

TREE_VIEW = _image(
    _LARGE,
    _BLACK_ON_CLEAR,
    (
        *["22."] * 2,
        *_TREE_ROWS, "6.8#8.",
        *_TREE_ROWS, "6.8#8.",
        *_TREE_ROWS, "6.8#8.",
        *["22."] * 2,
    ),
)

SINGLE_VIEW = _image(
    _LARGE, _BLACK_ON_CLEAR, (*["22."] * 2, *["10.#11."] * 18, *["22."] * 2)
)

SPLIT_VIEW = _image(
    _LARGE, _BLACK_ON_CLEAR, (*["22."] * 2, *["6.#6.#8."] * 18, *["22."] * 2)
)

_BLANK = "12 "
_FRAME_TOP = " 10. "
_FRAME_SIDE = " .8 . "
_DOT_SMALL = " .3 2.3 . "
_DOT_WIDE = " .2 4.2 . "

SYMBOL_NO = _image(
    _SMALL, _SMALL_COLORS, (_BLANK, _FRAME_TOP, *[_FRAME_SIDE] * 8, _FRAME_TOP, _BLANK)
)

SYMBOL_MOD = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, _FRAME_TOP, _FRAME_SIDE, _FRAME_SIDE,
        _DOT_SMALL, _DOT_WIDE, _DOT_WIDE, _DOT_SMALL,
        _FRAME_SIDE, _FRAME_SIDE, _FRAME_TOP, _BLANK,
    ),
)

SYMBOL_YES = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, _FRAME_TOP, _FRAME_SIDE, _FRAME_SIDE,
        " .6 . . ", " .5 2. . ", " . .2 2.2 . ", " . 4.3 . ", " .2 2.4 . ",
        _FRAME_SIDE, _FRAME_TOP, _BLANK,
    ),
)

_RING_TOP = ("4 4.4 ", "2 2.4 2.2 ", "2 .6 .2 ")

CHOICE_NO = _image(
    _SMALL,
    _SMALL_COLORS,
    (_BLANK, *_RING_TOP, *[_FRAME_SIDE] * 4, *reversed(_RING_TOP), _BLANK),
)

CHOICE_YES = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, *_RING_TOP,
        _DOT_SMALL, _DOT_WIDE, _DOT_WIDE, _DOT_SMALL,
        *reversed(_RING_TOP), _BLANK,
    ),
)

MENU = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, _FRAME_TOP, _FRAME_SIDE,
        " . 2.5 . ", " . 4.3 . ", " . 6. . ", " . 6. . ", " . 4.3 . ", " . 2.5 . ",
        _FRAME_SIDE, _FRAME_TOP, _BLANK,
    ),
)

MENU_INV = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, _FRAME_TOP, _FRAME_TOP,
        " 2.2 6. ", " 2.4 4. ", " 2.6 2. ", " 2.6 2. ", " 2.4 4. ", " 2.2 6. ",
        _FRAME_TOP, _FRAME_TOP, _BLANK,
    ),
)

MENUBACK = _image(
    _SMALL,
    _SMALL_COLORS,
    (
        _BLANK, _FRAME_TOP, _FRAME_SIDE,
        " .5 2. . ", " .3 4. . ", " . 6. . ", " . 6. . ", " .3 4. . ", " .5 2. . ",
        _FRAME_SIDE, _FRAME_TOP, _BLANK,
    ),
)

VOID = _image(_SMALL, _SMALL_COLORS, [_BLANK] * 12)

IMAGES = {
    "load": LOAD,
    "save": SAVE,
    "back": BACK,
    "tree_view": TREE_VIEW,
    "single_view": SINGLE_VIEW,
    "split_view": SPLIT_VIEW,
    "symbol_no": SYMBOL_NO,
    "symbol_mod": SYMBOL_MOD,
    "symbol_yes": SYMBOL_YES,
    "choice_no": CHOICE_NO,
    "choice_yes": CHOICE_YES,
    "menu": MENU,
    "menu_inv": MENU_INV,
    "menuback": MENUBACK,
    "void": VOID,
}