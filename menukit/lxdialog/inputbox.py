"""A box for entering a line of text."""

from __future__ import annotations

import curses
from typing import Any, Optional

from .screen import (
    INPUTBOX_HEIGHT_MIN,
    INPUTBOX_WIDTH_MIN,
    KEY_ESC,
    MAX_LEN,
    TAB,
    DialogScreen,
    DisplayTooSmall,
    acs,
)


def _quiet(func: Any, *args: Any) -> None:
    try:
        func(*args)
    except curses.error:
        pass


class LineEditor:
    """A single-line edit buffer scrolled horizontally inside a field."""

    def __init__(self, text: str, box_width: int) -> None:
        self.text = text
        self.box_width = box_width
        self.pos = len(text)
        if len(text) >= box_width:
            self.show_x = len(text) - box_width + 1
            self.input_x = box_width - 1
        else:
            self.show_x = 0
            self.input_x = len(text)

    def insert(self, ch: str) -> bool:
        """Insert ``ch`` at the cursor; False when the buffer is full."""
        if len(self.text) >= MAX_LEN:
            return False
        self.text = self.text[: self.pos] + ch + self.text[self.pos :]
        self.pos += 1
        if self.input_x == self.box_width - 1:
            self.show_x += 1
        else:
            self.input_x += 1
        return True

    def backspace(self) -> bool:
        """Delete the character before the cursor; False at the start."""
        if not self.pos:
            return False
        if self.input_x == 0:
            self.show_x -= 1
        else:
            self.input_x -= 1
        self.text = self.text[: self.pos - 1] + self.text[self.pos :]
        self.pos -= 1
        return True

    def left(self) -> bool:
        """Move the cursor one place left; False at the start."""
        if self.pos <= 0:
            return False
        if self.input_x > 0:
            self.input_x -= 1
        else:
            self.show_x -= 1
        self.pos -= 1
        return True

    def right(self) -> bool:
        """Move the cursor one place right; False at the end."""
        if self.pos >= len(self.text):
            return False
        if self.input_x < self.box_width - 1:
            self.input_x += 1
        else:
            self.show_x += 1
        self.pos += 1
        return True

    def visible(self) -> str:
        """The part of the text shown in the field."""
        return self.text[self.show_x : self.show_x + self.box_width]


def _draw_frame(
    screen: DialogScreen, dialog: Any, title: Optional[str], prompt: str, height: int, width: int
) -> None:
    colors = screen.colors
    screen.draw_box(dialog, 0, 0, height, width, colors["dialog"], colors["border"])
    dialog.attrset(colors["border"])
    _quiet(dialog.addch, height - 3, 0, acs("ACS_LTEE", "+"))
    for _ in range(width - 2):
        _quiet(dialog.addch, acs("ACS_HLINE", "-"))
    dialog.attrset(colors["dialog"])
    _quiet(dialog.addch, acs("ACS_RTEE", "+"))
    screen.print_title(dialog, title, width)
    dialog.attrset(colors["dialog"])
    screen.print_autowrap(dialog, prompt, width - 2, 1, 3)


def _print_buttons(screen: DialogScreen, dialog: Any, height: int, width: int, selected: int) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(dialog, "  Ok  ", y, x, selected == 0)
    screen.print_button(dialog, " Help ", y, x + 14, selected == 1)
    _quiet(dialog.move, y, x + 1 + 14 * selected)
    dialog.refresh()


def _draw_field(screen: DialogScreen, dialog: Any, editor: LineEditor, box_y: int, box_x: int) -> None:
    dialog.attrset(screen.colors["inputbox"])
    shown = editor.visible()
    if len(shown) < editor.box_width:
        shown += " "
    _quiet(dialog.addstr, box_y, box_x, shown)
    _quiet(dialog.move, box_y, box_x + editor.input_x)
    dialog.refresh()


def dialog_inputbox(
    screen: DialogScreen,
    title: Optional[str],
    prompt: str,
    height: int,
    width: int,
    init: Optional[str] = None,
) -> tuple[int, str]:
    """Ask for a string; return (0 for Ok, 1 for Help or KEY_ESC, the text)."""
    text = init or ""
    key = 0
    button = -1
    while True:
        rows, cols = screen.stdscr.getmaxyx()
        if rows <= height - INPUTBOX_HEIGHT_MIN or cols <= width - INPUTBOX_WIDTH_MIN:
            raise DisplayTooSmall(f"display is {rows}x{cols}, too small for an input box")

        x = (cols - width) // 2
        y = (rows - height) // 2
        screen.draw_shadow(screen.stdscr, y, x, height, width)
        dialog = curses.newwin(height, width, y, x)
        dialog.keypad(True)
        _draw_frame(screen, dialog, title, prompt, height, width)

        box_width = width - 6
        row, _ = dialog.getyx()
        box_y = row + 2
        box_x = (width - box_width) // 2
        screen.draw_box(
            dialog, row + 1, box_x - 1, 3, box_width + 2,
            screen.colors["dialog"], screen.colors["border"],
        )
        _print_buttons(screen, dialog, height, width, 0)

        editor = LineEditor(text, box_width)
        _draw_field(screen, dialog, editor, box_y, box_x)

        while key != KEY_ESC:
            key = dialog.getch()
            if button == -1 and key not in (TAB, curses.KEY_UP, curses.KEY_DOWN):
                if key in (curses.KEY_BACKSPACE, 8, 127):
                    if editor.backspace():
                        _draw_field(screen, dialog, editor, box_y, box_x)
                    continue
                if key == curses.KEY_LEFT:
                    if editor.left():
                        _draw_field(screen, dialog, editor, box_y, box_x)
                    continue
                if key == curses.KEY_RIGHT:
                    if editor.right():
                        _draw_field(screen, dialog, editor, box_y, box_x)
                    continue
                if 32 <= key < 127:
                    if editor.insert(chr(key)):
                        _draw_field(screen, dialog, editor, box_y, box_x)
                    else:
                        curses.flash()
                    continue

            if key in (ord("O"), ord("o")):
                return 0, editor.text
            if key in (ord("H"), ord("h")):
                return 1, editor.text
            if key in (curses.KEY_UP, curses.KEY_LEFT):
                if button == -1:
                    button = 1
                    _print_buttons(screen, dialog, height, width, 1)
                elif button == 0:
                    button = -1
                    _print_buttons(screen, dialog, height, width, 0)
                    _quiet(dialog.move, box_y, box_x + editor.input_x)
                    dialog.refresh()
                else:
                    button = 0
                    _print_buttons(screen, dialog, height, width, 0)
            elif key in (TAB, curses.KEY_DOWN, curses.KEY_RIGHT):
                if button == -1:
                    button = 0
                    _print_buttons(screen, dialog, height, width, 0)
                elif button == 0:
                    button = 1
                    _print_buttons(screen, dialog, height, width, 1)
                else:
                    button = -1
                    _print_buttons(screen, dialog, height, width, 0)
                    _quiet(dialog.move, box_y, box_x + editor.input_x)
                    dialog.refresh()
            elif key in (ord(" "), ord("\n")):
                return (0 if button == -1 else button), editor.text
            elif key in (ord("X"), ord("x")):
                key = KEY_ESC
            elif key == KEY_ESC:
                key = screen.on_key_esc(dialog)
            elif key == curses.KEY_RESIZE:
                screen.on_key_resize()
                text = editor.text
                break
        else:
            return KEY_ESC, editor.text