import curses
from unittest import mock

import pytest

from boxdialog.checklist import Checklist, run_checklist
from boxdialog.colors import mono_theme
from boxdialog.screen import Screen

ITEMS = [("a", "Apple", "off"), ("b", "Banana", "on"), ("c", "Cherry", "on")]


def test_first_item_marked_on_gets_the_cursor():
    state = Checklist(ITEMS, 5)
    assert state.scroll + state.choice == 1
    assert state.status == [False, True, True]


def test_selected_overrides_on():
    items = [("a", "Apple", "on"), ("b", "Banana", "selected"), ("c", "Cherry", "off")]
    state = Checklist(items, 5)
    assert state.scroll + state.choice == 1


def test_initial_scroll_keeps_cursor_on_last_visible_row():
    items = [(str(i), f"Item {i}", "selected" if i == 3 else "off") for i in range(5)]
    state = Checklist(items, 2)
    assert state.scroll + state.choice == 3
    assert state.choice == state.list_height - 1


def test_empty_items_rejected():
    with pytest.raises(ValueError):
        Checklist([], 3)


def test_down_scrolls_and_stops_at_last_item():
    items = [("a", "Apple", "off"), ("b", "Banana", "off"), ("c", "Cherry", "off")]
    state = Checklist(items, 2)
    for _ in range(6):
        assert state.handle_key(curses.KEY_DOWN) is None
    assert state.scroll + state.choice == len(items) - 1
    assert 0 <= state.choice < state.max_choice


def test_up_at_top_does_nothing():
    state = Checklist([("a", "Apple", "off"), ("b", "Banana", "off")], 2)
    assert state.handle_key(curses.KEY_UP) is None
    assert (state.scroll, state.choice) == (0, 0)


def test_up_scrolls_back():
    items = [(str(i), f"Item {i}", "off") for i in range(4)]
    state = Checklist(items, 2)
    for _ in range(3):
        state.handle_key("+")
    for _ in range(5):
        state.handle_key("-")
    assert (state.scroll, state.choice) == (0, 0)


def test_hotkey_moves_cursor():
    state = Checklist(ITEMS, 5)
    state.handle_key("c")
    assert ITEMS[state.scroll + state.choice][1] == "Cherry"


def test_select_turns_on_only_current_item():
    items = [("a", "Apple", "on"), ("b", "Banana", "off"), ("c", "Cherry", "off")]
    state = Checklist(items, 5)
    state.handle_key(curses.KEY_DOWN)
    assert state.handle_key(" ") == 0
    assert state.output == "b"
    assert sum(state.status) == 1


def test_select_already_on_item_keeps_others():
    state = Checklist([("a", "Apple", "on"), ("b", "Banana", "on")], 5)
    assert state.handle_key("\n") == 0
    assert state.output == "ab"


def test_help_key_reports_current_tag():
    state = Checklist(ITEMS, 5)
    assert state.handle_key("?") == 1
    assert state.output == "b"


def test_help_button_then_select():
    state = Checklist(ITEMS, 5)
    state.handle_key(curses.KEY_LEFT)
    assert state.button == 1
    assert state.handle_key(" ") == 1
    assert state.output == "b"


@pytest.mark.parametrize("key", ["x", "X", 27])
def test_exit_keys(key):
    assert Checklist(ITEMS, 5).handle_key(key) == -1


def test_unknown_key_changes_nothing():
    state = Checklist(ITEMS, 5)
    before = (state.scroll, state.choice, list(state.status))
    assert state.handle_key("z") is None
    assert (state.scroll, state.choice, list(state.status)) == before


def test_run_checklist_returns_selection():
    stdscr = mock.MagicMock()
    stdscr.getmaxyx.return_value = (24, 80)
    screen = Screen(stdscr, mono_theme())
    window = mock.MagicMock()
    window.getch.side_effect = [curses.KEY_DOWN, ord(" ")]
    items = [("a", "Apple", "off"), ("b", "Banana", "off")]
    with mock.patch("curses.newwin", return_value=window), \
            mock.patch("curses.has_colors", return_value=False):
        result = run_checklist(screen, "Title", "Pick one", 15, 60, 4, items)
    assert result == (0, "b")