import curses

import pytest

from boxdialog.inputbox import InputField
from boxdialog.text import ESC, MAX_LEN, TAB


def type_text(field, text):
    for char in text:
        assert field.handle_key(char) is None


def test_initial_value_fits():
    field = InputField(10, "abc")
    assert field.value == "abc"
    assert field.scroll == 0
    assert field.input_x == 3
    assert field.button == -1


def test_none_init_is_empty():
    field = InputField(10, None)
    assert field.value == ""
    assert field.input_x == 0


def test_long_initial_value_scrolls():
    field = InputField(4, "abcdef")
    assert field.scroll == len("abcdef") - 4 + 1
    assert field.input_x == 3
    assert field.visible == "def"


def test_typing_appends():
    field = InputField(10)
    type_text(field, "hello")
    assert field.value == "hello"
    assert field.input_x == 5


def test_typing_past_width_scrolls_and_keeps_invariant():
    field = InputField(4)
    type_text(field, "abcdefg")
    assert field.value == "abcdefg"
    assert field.input_x == 3
    assert field.scroll + field.input_x == len(field.value)


def test_backspace_removes_last_char():
    field = InputField(10, "abc")
    assert field.handle_key(curses.KEY_BACKSPACE) is None
    assert field.value == "ab"
    assert field.handle_key(127) is None
    assert field.value == "a"


def test_backspace_on_empty_does_nothing():
    field = InputField(10)
    field.handle_key(127)
    assert field.value == ""
    assert field.input_x == 0


def test_backspace_at_left_edge_rescrolls_without_deleting():
    field = InputField(4, "abcdef")
    for _ in range(3):
        field.handle_key(127)
    assert field.value == "abc"
    assert field.input_x == 0
    field.handle_key(127)
    assert field.value == "abc"
    assert field.scroll == 0
    assert field.input_x == 3
    field.handle_key(127)
    assert field.value == "ab"


def test_letters_are_text_while_field_has_focus():
    field = InputField(10)
    assert field.handle_key("o") is None
    assert field.handle_key("h") is None
    assert field.handle_key("x") is None
    assert field.value == "ohx"


def test_enter_in_field_returns_ok():
    field = InputField(10, "v")
    assert field.handle_key("\n") == 0


def test_escape_returns_minus_one():
    assert InputField(10).handle_key(ESC) == -1


def test_left_and_right_ignored_in_field():
    field = InputField(10, "ab")
    assert field.handle_key(curses.KEY_LEFT) is None
    assert field.handle_key(curses.KEY_RIGHT) is None
    assert field.button == -1
    assert field.input_x == 2


def test_tab_cycles_focus():
    field = InputField(10)
    field.handle_key(TAB)
    assert field.button == 0
    field.handle_key(TAB)
    assert field.button == 1
    field.handle_key(TAB)
    assert field.button == -1


def test_up_cycles_focus_backwards():
    field = InputField(10)
    field.handle_key(curses.KEY_UP)
    assert field.button == 1
    field.handle_key(curses.KEY_LEFT)
    assert field.button == 0
    field.handle_key(curses.KEY_UP)
    assert field.button == -1


def test_buttons_hotkeys_when_not_in_field():
    field = InputField(10)
    field.handle_key(TAB)
    assert field.handle_key("o") == 0
    field = InputField(10)
    field.handle_key(TAB)
    assert field.handle_key("H") == 1
    field = InputField(10)
    field.handle_key(TAB)
    assert field.handle_key("x") == -1


def test_space_on_help_button_returns_help():
    field = InputField(10)
    field.handle_key(TAB)
    field.handle_key(TAB)
    assert field.handle_key(" ") == 1


def test_overflow_refuses_character():
    field = InputField(10, "a" * MAX_LEN)
    assert field.handle_key("b") is None
    assert field.overflow is True
    assert len(field.value) == MAX_LEN


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        InputField(0)