"""Command line front end: show one dialog box chosen by options."""

from __future__ import annotations

import locale
import re
import sys
from dataclasses import dataclass
from typing import Sequence

from .checklist import run_checklist
from .colors import Attribute
from .inputbox import run_inputbox
from .menubox import run_menu
from .msgbox import run_msgbox
from .screen import open_screen
from .textbox import run_textbox
from .yesno import run_yesno

_PROG = "boxdialog"


class UsageError(ValueError):
    """The command line does not describe a valid dialog."""


@dataclass(frozen=True)
class _Mode:
    argmin: int
    argmax: int


# argmin/argmax count the mode option, its arguments and one leading slot.
_MODES = {
    "menu": _Mode(9, 0),
    "radiolist": _Mode(9, 0),
    "yesno": _Mode(5, 5),
    "textbox": _Mode(5, 5),
    "inputbox": _Mode(5, 6),
    "msgbox": _Mode(5, 5),
    "infobox": _Mode(5, 5),
}


@dataclass(frozen=True)
class Invocation:
    """A parsed command line.

    ``mode`` is the box name without its leading dashes, or None when the
    only request is to clear the screen. ``arguments`` are the words that
    follow the mode option.
    """

    mode: str | None
    arguments: tuple[str, ...] = ()
    title: str | None = None
    backtitle: str | None = None
    clear: bool = False


def _usage_text(prog: str) -> str:
    return (
        "\nDisplay dialog boxes from shell scripts\n"
        f"\nUsage: {prog} --clear\n"
        f"       {prog} [--title <title>] [--backtitle <backtitle>] --clear <Box options>\n"
        "\nBox options:\n\n"
        "  --menu      <text> <height> <width> <menu height> <tag1> <item1>...\n"
        "  --radiolist <text> <height> <width> <list height> <tag1> <item1> <status1>...\n"
        "  --textbox   <file> <height> <width>\n"
        "  --inputbox  <text> <height> <width> [<init>]\n"
        "  --yesno     <text> <height> <width>\n"
        "  --msgbox    <text> <height> <width>\n"
        "  --infobox   <text> <height> <width>\n"
    )


def parse_args(argv: Sequence[str]) -> Invocation:
    """Parse the words after the program name; raise UsageError if invalid."""
    args = list(argv)
    if not args:
        raise UsageError("no options given")

    title: str | None = None
    backtitle: str | None = None
    clear = False
    offset = 0
    while offset < len(args):
        word = args[offset]
        if word == "--title":
            if len(args) - offset < 2 or title is not None:
                raise UsageError("--title needs one value and may appear once")
            title = args[offset + 1]
            offset += 2
        elif word == "--backtitle":
            if len(args) - offset < 2 or backtitle is not None:
                raise UsageError("--backtitle needs one value and may appear once")
            backtitle = args[offset + 1]
            offset += 2
        elif word == "--clear":
            if clear:
                raise UsageError("--clear may appear once")
            if len(args) == 1:
                return Invocation(mode=None, clear=True)
            clear = True
            offset += 1
        else:
            break

    if offset == len(args):
        raise UsageError("no box option given")

    word = args[offset]
    name = word[2:] if word.startswith("--") else None
    mode = _MODES.get(name) if name is not None else None
    if mode is None:
        raise UsageError(f"unknown box option {word!r}")
    slots = len(args) - offset + 1
    if slots < mode.argmin:
        raise UsageError(f"too few arguments for {word}")
    if mode.argmax and slots > mode.argmax:
        raise UsageError(f"too many arguments for {word}")

    return Invocation(
        mode=name,
        arguments=tuple(args[offset + 1:]),
        title=title,
        backtitle=backtitle,
        clear=clear,
    )


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _groups(words: Sequence[str], size: int, count: int) -> list[tuple[str, ...]]:
    usable = min(count, len(words) // size)
    return [tuple(words[i * size:(i + 1) * size]) for i in range(usable)]


def _dispatch(screen, inv: Invocation) -> tuple[int, str]:
    a = inv.arguments
    title = inv.title
    if inv.mode == "menu":
        items = _groups(a[5:], 2, (len(a) - 4) // 2)
        return run_menu(screen, title, a[0], _atoi(a[1]), _atoi(a[2]), _atoi(a[3]), a[4], items)
    if inv.mode == "radiolist":
        items = _groups(a[4:], 3, (len(a) - 4) // 3)
        return run_checklist(screen, title, a[0], _atoi(a[1]), _atoi(a[2]), _atoi(a[3]), items)
    if inv.mode == "textbox":
        return run_textbox(screen, title, a[0], _atoi(a[1]), _atoi(a[2])), ""
    if inv.mode == "yesno":
        return run_yesno(screen, title, a[0], _atoi(a[1]), _atoi(a[2])), ""
    if inv.mode == "inputbox":
        init = a[3] if len(a) == 4 else None
        code, value = run_inputbox(screen, title, a[0], _atoi(a[1]), _atoi(a[2]), init)
        return code, value if code == 0 else ""
    if inv.mode == "msgbox":
        return run_msgbox(screen, title, a[0], _atoi(a[1]), _atoi(a[2]), True), ""
    return run_msgbox(screen, title, a[0], _atoi(a[1]), _atoi(a[2]), False), ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dialog described by ``argv``; the result goes to stderr.

    Returns the dialog's exit code, or -1 for a usage error.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        inv = parse_args(argv)
    except UsageError:
        sys.stderr.write(_usage_text(_PROG))
        return -1

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        with open_screen(backtitle=inv.backtitle) as screen:
            if inv.mode is None:
                screen.stdscr.refresh()
                return 0
            code, output = _dispatch(screen, inv)
            if inv.clear:
                rows, cols = screen.stdscr.getmaxyx()
                screen.attr_clear(screen.stdscr, rows, cols, screen.theme.attr(Attribute.SCREEN))
                screen.stdscr.refresh()
    except OSError:
        sys.stderr.write("\nCan't open input file in dialog_textbox().\n")
        return -1

    if output:
        sys.stderr.write(output)
    return code