import ast

import pytest

from boxdialog.pot import MessageCatalog, escape


def _decode(quoted):
    return ast.literal_eval("(" + quoted + ")")


def test_plain_text():
    assert escape("plain") == '"plain"'


def test_quotes_escaped():
    assert escape('say "hi"') == '"say \\"hi\\""'


@pytest.mark.parametrize(
    "text",
    ["", "one line", 'with "quotes"', "a\nb", "a\nb\n", "first\n\nthird", "\n"],
)
def test_round_trip(text):
    assert _decode(escape(text)) == text


def test_multiline_starts_with_empty_piece():
    result = escape("a\nb")
    assert result.startswith('""\n"')
    assert result.count("\n") == 2


def test_trailing_newline_has_no_empty_last_piece():
    result = escape("a\nb\n")
    assert result.endswith('\\n"')
    assert not result.endswith('\n""')


def test_empty_catalog_renders_nothing():
    assert MessageCatalog().render() == ""


def test_duplicate_messages_merge_locations():
    catalog = MessageCatalog()
    catalog.add("Prompt", None, "Kconfig", 1)
    catalog.add("Prompt", None, "Kconfig", 2)
    text = catalog.render()
    assert text.count("msgid") == 1
    assert "#: Kconfig:2, Kconfig:1\n" in text
    assert 'msgid "Prompt"\nmsgstr ""\n' in text


def test_newest_message_first():
    catalog = MessageCatalog()
    catalog.add("older", None, "a", 1)
    catalog.add("newer", None, "b", 2)
    text = catalog.render()
    assert text.index('"newer"') < text.index('"older"')
    assert text.startswith("\n#: b:2\n")


def test_option_line_kept_from_first_add():
    catalog = MessageCatalog()
    catalog.add("Help text\n", "FEATURE", "Config.in", 10)
    catalog.add("Help text\n", "OTHER", "Config.in", 20)
    text = catalog.render()
    assert "# FEATURE:00000\n" in text
    assert "OTHER" not in text
    msgid = text.split("msgid ", 1)[1].split("\nmsgstr", 1)[0]
    assert _decode(msgid) == "Help text\n"