"""A box asking a yes/no question."""

from __future__ import annotations

import curses
from typing import Any, Optional

from .screen import (
    KEY_ESC,
    TAB,
    YESNO_HEIGHT_MIN,
    YESNO_WIDTH_MIN,
    DialogScreen,
    DisplayTooSmall,
    acs,
)


def _quiet(func: Any, *args: Any) -> None:
    try:
        func(*args)
    except curses.error:
        pass


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
    x = width // 2 - 10
    y = height - 2
    screen.print_button(dialog, " Yes ", y, x, selected == 0)
    screen.print_button(dialog, "  No  ", y, x + 13, selected == 1)
    _quiet(dialog.move, y, x + 1 + 13 * selected)
    dialog.refresh()


def dialog_yesno(
    screen: DialogScreen, title: Optional[str], prompt: str, height: int, width: int
) -> int:
    """Ask a question; 0 for Yes, 1 for No, KEY_ESC when dismissed."""
    key = 0
    button = 0
    while True:
        rows, cols = screen.stdscr.getmaxyx()
        if rows < height + YESNO_HEIGHT_MIN or cols < width + YESNO_WIDTH_MIN:
            raise DisplayTooSmall(f"display is {rows}x{cols}, too small for a yes/no box")

        x = (cols - width) // 2
        y = (rows - height) // 2
        screen.draw_shadow(screen.stdscr, y, x, height, width)
        dialog = curses.newwin(height, width, y, x)
        dialog.keypad(True)
        _draw_frame(screen, dialog, title, prompt, height, width)
        _print_buttons(screen, dialog, height, width, 0)

        while key != KEY_ESC:
            key = dialog.getch()
            if key in (ord("Y"), ord("y")):
                return 0
            if key in (ord("N"), ord("n")):
                return 1
            if key in (TAB, curses.KEY_LEFT, curses.KEY_RIGHT):
                button += -1 if key == curses.KEY_LEFT else 1
                if button < 0:
                    button = 1
                elif button > 1:
                    button = 0
                _print_buttons(screen, dialog, height, width, button)
            elif key in (ord(" "), ord("\n")):
                return button
            elif key == KEY_ESC:
                key = screen.on_key_esc(dialog)
            elif key == curses.KEY_RESIZE:
                screen.on_key_resize()
                break
        else:
            return KEY_ESC