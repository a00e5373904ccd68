# boxdialog

Dialog boxes in the terminal, driven from shell scripts or from Python.
Each box draws itself with curses, waits for keys, writes its answer to
standard error and reports the outcome through the exit status.

## Install

    pip install boxdialog

No third-party libraries are needed; the standard `curses` module is used,
so a POSIX terminal is expected.

## From the shell

    boxdialog --clear
    boxdialog [--title <title>] [--backtitle <backtitle>] [--clear] <box options>

`--clear` on its own only clears the screen. Given with a box, the screen
is cleared again after the box closes. `--title` and `--backtitle` may each
be given once.

Box options:

    --menu      <text> <height> <width> <menu height> <current tag> <tag1> <item1>...
    --radiolist <text> <height> <width> <list height> <tag1> <item1> <status1>...
    --textbox   <file> <height> <width>
    --inputbox  <text> <height> <width> [<init>]
    --yesno     <text> <height> <width>
    --msgbox    <text> <height> <width>
    --infobox   <text> <height> <width>

A bad command line prints a usage text to standard error and exits with
status 255. A box left with Esc also exits with 255.

What each box answers:

- `--menu`: Enter reports the selected button, 0 for Select, 1 for Exit,
  2 for Help, and writes the tag under the cursor (for Help, the tag
  followed by the item text in quotes). The keys `s` and `y` give 3, `n`
  gives 4, `m` gives 5, space gives 6 and `/` gives 7, each writing the tag.
  `e` and `x` leave like Esc. Other letters jump to the item whose hot key
  they are. When an action key closes the menu its scroll position is kept
  in `lxdialog.scrltmp` in the working directory for the next call;
  otherwise that file is removed.
- `--radiolist`: a status of `on` marks the chosen item and `selected`
  puts the cursor on an item. Select (0) writes the chosen tag; Help (1,
  also `h` or `?`) writes the tag under the cursor.
- `--inputbox`: OK (0) writes the entered text; Help gives 1.
- `--yesno`: 0 for Yes, 1 for No.
- `--msgbox`: waits for Enter, space, `o` or `x` and gives 0.
- `--infobox`: shows the text and returns 0 at once.
- `--textbox`: pages through the file; `e` or `x` gives 0, Enter or Esc
  gives 255. A file that cannot be read gives 255 and a message.

Example:

    answer=$(boxdialog --title "Network" --inputbox "Host name:" 8 40 localhost 2>&1 >/dev/tty)

## From Python

    from boxdialog.screen import open_screen
    from boxdialog.yesno import run_yesno

    with open_screen() as screen:
        button = run_yesno(screen, "Save", "Save configuration?", 7, 40)

`open_screen` starts curses, switches to the colour scheme when the
terminal has colour, and restores the terminal on exit. The boxes are
`run_menu`, `run_checklist`, `run_inputbox`, `run_yesno`, `run_msgbox`
and `run_textbox`; from Python they return -1 for Esc, and the menu,
radio list and input box return `(code, text)`.

The key handling is separate from drawing, so it can be used and tested
without a terminal: `Menu`, `Checklist`, `InputField`, `YesNo` and
`TextPager` each take one key at a time through `handle_key`, which
returns None while the box stays open and the exit code once it closes.

Smaller helpers:

- `boxdialog.colors`: the `Attribute` names, `color_table()`,
  `mono_theme()` and `Theme`.
- `boxdialog.text`: `first_alpha`, `wrap_prompt`, `title_span`,
  `cycle_button`.
- `boxdialog.images`: a set of small icons as XPM strings (`IMAGES`) and
  `parse_xpm`, which reads XPM strings into an `Xpm`.
- `boxdialog.pot`: `MessageCatalog` collects messages with their file and
  line and renders them as a gettext template; `escape` quotes one message.

## What it does not do

boxdialog shows single boxes; it has no configuration editor built on
them and reads no configuration-language files. `MessageCatalog` only
renders the messages you add to it, and there is no command for it.
The icons are data with a parser; nothing in the package draws them.