"""Collect translatable messages and write them as a gettext template."""

from __future__ import annotations

from dataclasses import dataclass, field

_BUFFER_SIZE = 16384


def escape(text: str) -> str:
    """Quote ``text`` as a gettext string, one quoted piece per line.

    Quotes are escaped and newlines become ``\\n`` followed by a line
    break; multi-line text starts with an empty piece. Very long text is
    cut to fit the fixed output size.
    """
    budget = _BUFFER_SIZE - 1
    multiline = "\n" in text
    parts = ['"']
    if multiline:
        parts.append('"\n"')
        budget -= 3
    for ch in text:
        if budget <= 1:
            break
        if ch == '"':
            parts.append('\\"')
        elif ch == "\n":
            parts.append('\\n"\n"')
            budget -= 5
        else:
            parts.append(ch)
        budget -= 1
    out = "".join(parts)
    if multiline and text.endswith("\n"):
        out = out[:-3]
    return out + '"'


@dataclass
class _Message:
    msg: str
    option: str | None
    files: list[tuple[str, int]] = field(default_factory=list)


class MessageCatalog:
    """Messages with the places they come from, in gettext template form."""

    def __init__(self) -> None:
        self._messages: dict[str, _Message] = {}

    def add(self, msg: str, option: str | None, file: str, lineno: int) -> None:
        """Record ``msg`` as found at ``file``:``lineno``.

        A message seen before only gains the new location; its option is
        the one given when it was first added.
        """
        escaped = escape(msg)
        entry = self._messages.get(escaped)
        if entry is None:
            entry = _Message(escaped, option)
            self._messages[escaped] = entry
        entry.files.append((file, lineno))

    def render(self) -> str:
        """Return the template text, newest message and location first."""
        out: list[str] = []
        for entry in reversed(self._messages.values()):
            out.append("\n")
            if entry.option is not None:
                out.append(f"# {entry.option}:00000\n")
            locations = ", ".join(f"{name}:{line}" for name, line in reversed(entry.files))
            out.append(f"#: {locations}\n")
            out.append(f'msgid {entry.msg}\nmsgstr ""\n')
        return "".join(out)