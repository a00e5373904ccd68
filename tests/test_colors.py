import curses
from unittest import mock

import pytest

from boxdialog.colors import Attribute, Theme, color_table, mono_theme


def test_attribute_count_matches_table():
    assert len(Attribute) == 29
    assert set(color_table()) == set(Attribute)


def test_attr_by_position_matches_enum_for_every_attribute():
    theme = mono_theme()
    for index, attribute in enumerate(Attribute):
        assert theme.attr(index) == theme.attr(attribute)


def test_color_table_screen_entry():
    assert color_table()[Attribute.SCREEN] == (curses.COLOR_CYAN, curses.COLOR_BLUE, True)


def test_color_table_dialog_entry():
    assert color_table()[Attribute.DIALOG] == (curses.COLOR_BLACK, curses.COLOR_WHITE, False)


def test_mono_theme_values():
    theme = mono_theme()
    assert theme.attr(Attribute.TITLE) == curses.A_BOLD
    assert theme.attr(Attribute.BUTTON_ACTIVE) == curses.A_REVERSE
    assert theme.attr(Attribute.BUTTON_INACTIVE) == curses.A_DIM
    assert theme.attr(Attribute.DIALOG) == curses.A_NORMAL


def test_attr_accepts_int_index():
    theme = mono_theme()
    assert theme.attr(int(Attribute.TITLE)) == theme.attr(Attribute.TITLE)


def test_attr_rejects_unknown_index():
    with pytest.raises(ValueError):
        mono_theme().attr(len(Attribute))


def test_mono_themes_are_independent():
    first = mono_theme()
    second = mono_theme()
    first.styles[Attribute.TITLE] = curses.A_REVERSE
    assert second.attr(Attribute.TITLE) == curses.A_BOLD


def test_apply_colors_without_colour_support_keeps_theme():
    theme = mono_theme()
    with mock.patch("curses.has_colors", return_value=False), mock.patch(
        "curses.start_color"
    ) as start:
        assert theme.apply_colors() is False
    start.assert_not_called()
    assert theme.attr(Attribute.BUTTON_ACTIVE) == curses.A_REVERSE
    assert theme.pairs == {}


def test_apply_colors_sets_pairs_and_highlight():
    theme = mono_theme()
    with mock.patch("curses.has_colors", return_value=True), mock.patch(
        "curses.start_color"
    ) as start, mock.patch("curses.init_pair") as init_pair, mock.patch(
        "curses.color_pair", side_effect=lambda n: n << 8
    ):
        assert theme.apply_colors() is True
        start.assert_called_once_with()
        assert init_pair.call_count == len(Attribute)
        assert init_pair.call_args_list[0] == mock.call(
            1, curses.COLOR_CYAN, curses.COLOR_BLUE
        )
        title_pair = int(Attribute.TITLE) + 1
        assert theme.attr(Attribute.TITLE) == curses.A_BOLD | (title_pair << 8)
        dialog_pair = int(Attribute.DIALOG) + 1
        assert theme.attr(Attribute.DIALOG) == curses.A_NORMAL | (dialog_pair << 8)
    assert theme.pairs[Attribute.DARROW] == int(Attribute.DARROW) + 1


def test_theme_with_custom_styles():
    theme = Theme(styles={a: curses.A_NORMAL for a in Attribute})
    assert all(theme.attr(a) == curses.A_NORMAL for a in Attribute)