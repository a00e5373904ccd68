import curses
from unittest import mock

import pytest

from boxdialog.colors import mono_theme
from boxdialog.menubox import Menu, read_scroll_file, run_menu, write_scroll_file
from boxdialog.screen import Screen

TEN = [(f"t{i}", f"Item number {i}") for i in range(10)]
ABC = [("a", "Alpha"), ("b", "Beta"), ("c", "Gamma")]


def test_current_tag_is_selected():
    menu = Menu(ABC, 5, "b")
    assert ABC[menu.scroll + menu.choice][0] == "b"


def test_without_saved_scroll_current_is_centred():
    menu = Menu(TEN, 4, "t6")
    assert menu.scroll + menu.choice == 6
    assert menu.scroll > 0
    assert 0 <= menu.choice < menu.max_choice


def test_valid_saved_scroll_is_used():
    menu = Menu(TEN, 4, "t5", saved_scroll=3)
    assert menu.scroll == 3
    assert menu.scroll + menu.choice == 5
    assert menu.scroll_rejected is False


def test_invalid_saved_scroll_is_rejected():
    menu = Menu(TEN, 4, "t5", saved_scroll=9)
    assert menu.scroll_rejected is True
    assert menu.scroll + menu.choice == 5


def test_empty_menu_rejected():
    with pytest.raises(ValueError):
        Menu([], 4)


def test_hotkey_selects_matching_item():
    menu = Menu(ABC, 5, "a")
    assert menu.handle_key("g") is None
    assert ABC[menu.scroll + menu.choice][1] == "Gamma"


def test_uppercase_hotkey_is_folded():
    menu = Menu(ABC, 5, "a")
    menu.handle_key("G")
    assert ABC[menu.scroll + menu.choice][1] == "Gamma"


def test_paging_keeps_state_in_range():
    menu = Menu(TEN, 4, "t0")
    keys = [curses.KEY_NPAGE, curses.KEY_NPAGE, curses.KEY_DOWN, curses.KEY_UP,
            curses.KEY_PPAGE, "+", "+", "+", "-", curses.KEY_NPAGE, curses.KEY_PPAGE]
    for key in keys:
        assert menu.handle_key(key) is None
        assert 0 <= menu.choice < menu.max_choice
        assert 0 <= menu.scroll <= len(TEN) - menu.max_choice


def test_npage_reaches_last_item():
    menu = Menu(TEN, 4, "t0")
    menu.handle_key(curses.KEY_NPAGE)
    menu.handle_key(curses.KEY_NPAGE)
    menu.handle_key(curses.KEY_NPAGE)
    assert menu.scroll + menu.choice == len(TEN) - 1


@pytest.mark.parametrize("key,code", [("y", 3), ("s", 3), ("n", 4), ("m", 5), (" ", 6), ("/", 7)])
def test_action_keys(key, code):
    menu = Menu(ABC, 5, "b")
    assert menu.handle_key(key) == code
    assert menu.output == "b\n"
    assert menu.persist_scroll is True


def test_y_is_not_a_hotkey():
    menu = Menu([("a", "Alpha"), ("y", "Yellow")], 5, "a")
    assert menu.handle_key("y") == 3
    assert menu.output == "a\n"


def test_enter_returns_button_and_tag():
    menu = Menu(ABC, 5, "c")
    assert menu.handle_key("\n") == 0
    assert menu.output == "c\n"
    assert menu.persist_scroll is False


def test_exit_button_via_tab():
    menu = Menu(ABC, 5, "a")
    menu.handle_key(curses.KEY_RIGHT)
    assert menu.handle_key("\n") == 1


def test_help_reports_tag_and_text():
    menu = Menu([("opt", "(x) Option")], 5, "opt")
    assert menu.handle_key("?") == 2
    assert menu.output == 'opt "Option"\n'


@pytest.mark.parametrize("key", ["e", "x", "E", 27])
def test_exit_keys(key):
    assert Menu(ABC, 5).handle_key(key) == -1


def test_scroll_file_round_trip(tmp_path):
    path = tmp_path / "scroll"
    write_scroll_file(path, 7)
    assert read_scroll_file(path) == 7


def test_missing_scroll_file(tmp_path):
    assert read_scroll_file(tmp_path / "absent") is None


def test_bogus_scroll_file_removed(tmp_path):
    path = tmp_path / "scroll"
    path.write_text("junk\n")
    assert read_scroll_file(path) is None
    assert not path.exists()


def _screen():
    stdscr = mock.MagicMock()
    stdscr.getmaxyx.return_value = (24, 80)
    return Screen(stdscr, mono_theme())


def test_run_menu_saves_scroll(tmp_path):
    path = tmp_path / "scroll"
    window = mock.MagicMock()
    window.subwin.return_value.getch.side_effect = [ord("y")]
    with mock.patch("curses.newwin", return_value=window), \
            mock.patch("curses.has_colors", return_value=False):
        result = run_menu(_screen(), "T", "Prompt", 15, 76, 5, "a", ABC, path)
    assert result == (3, "a\n")
    assert read_scroll_file(path) == 0


def test_run_menu_escape_removes_scroll_file(tmp_path):
    path = tmp_path / "scroll"
    write_scroll_file(path, 0)
    window = mock.MagicMock()
    window.subwin.return_value.getch.side_effect = [27]
    with mock.patch("curses.newwin", return_value=window), \
            mock.patch("curses.has_colors", return_value=False):
        result = run_menu(_screen(), "T", "Prompt", 15, 76, 5, "a", ABC, path)
    assert result == (-1, "")
    assert not path.exists()