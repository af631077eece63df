"""A menu box: a scrolling list of entries with five buttons."""

from __future__ import annotations

import curses
from typing import Any, Callable, Optional, Sequence

from .items import DialogItem, ItemList
from .screen import (
    KEY_ESC,
    MENUBOX_HEIGHT_MIN,
    MENUBOX_WIDTH_MIN,
    TAB,
    DialogScreen,
    DisplayTooSmall,
    acs,
)
from .text import first_alpha

_EXEMPT = "YyNnMmHh"
_BUTTONS = ("Select", " Exit ", " Help ", " Save ", " Load ")
_ACTIONS = {
    ord("h"): 2,
    ord("?"): 2,
    ord("s"): 5,
    ord("y"): 5,
    ord("n"): 6,
    ord("m"): 7,
    ord(" "): 8,
    ord("/"): 9,
    ord("z"): 10,
}


def _quiet(func: Any, *args: Any) -> None:
    try:
        func(*args)
    except curses.error:
        pass


def _lower_key(key: int) -> int:
    if 0 <= key < 256:
        ch = chr(key)
        if ch.isascii() and ch.isalpha():
            return ord(ch.lower())
    return key


class MenuCursor:
    """The highlighted row and the scroll offset of a menu window.

    ``choice`` is relative to the first visible entry, ``scroll`` is the index
    of that entry.  Each movement returns how many lines the window scrolled.
    """

    def __init__(self, choice: int, scroll: int, max_choice: int, count: int) -> None:
        self.choice = choice
        self.scroll = scroll
        self.max_choice = max_choice
        self.count = count

    @property
    def position(self) -> int:
        """Index of the highlighted entry in the whole list."""
        return self.scroll + self.choice

    def up(self) -> int:
        """Move one entry up, scrolling while near the top."""
        if self.choice < 2 and self.scroll:
            self.scroll -= 1
            return -1
        self.choice = max(self.choice - 1, 0)
        return 0

    def down(self) -> int:
        """Move one entry down, scrolling while near the bottom."""
        if self.choice > self.max_choice - 3 and self.scroll + self.max_choice < self.count:
            self.scroll += 1
            return 1
        self.choice = min(self.choice + 1, self.max_choice - 1)
        return 0

    def page_up(self) -> int:
        """Move up by one window height."""
        moved = 0
        for _ in range(self.max_choice):
            if self.scroll > 0:
                self.scroll -= 1
                moved -= 1
            elif self.choice > 0:
                self.choice -= 1
        return moved

    def page_down(self) -> int:
        """Move down by one window height."""
        moved = 0
        for _ in range(self.max_choice):
            if self.scroll + self.max_choice < self.count:
                self.scroll += 1
                moved += 1
            elif self.choice + 1 < self.max_choice:
                self.choice += 1
        return moved


def initial_position(
    choice: int, saved_scroll: int, max_choice: int, count: int
) -> tuple[int, int]:
    """Relative choice and scroll that show entry ``choice`` in the window.

    A saved scroll offset is kept when the entry is still visible with it;
    otherwise the entry is placed in the middle of the window where possible.
    """
    scroll = saved_scroll
    if (
        scroll <= choice
        and scroll + max_choice > choice
        and scroll >= 0
        and scroll + max_choice <= count
    ):
        choice -= scroll
    else:
        scroll = 0
    if choice >= max_choice:
        if choice >= count - max_choice // 2:
            scroll = count - max_choice
        else:
            scroll = choice - max_choice // 2
        choice -= scroll
    return choice, scroll


def find_hotkey(
    items: Sequence[DialogItem], key: int, choice: int, scroll: int, max_choice: int
) -> Optional[int]:
    """Visible row whose hotkey is ``key``, searching after ``choice`` first.

    Keys y, n, m and h are commands and never select an entry.
    """
    key = _lower_key(key)
    if 0 <= key < 256 and chr(key) in "ynmh":
        return None

    def matches(row: int) -> bool:
        text = items[scroll + row].text
        if not text:
            return key == 0
        return key == ord(text[first_alpha(text, _EXEMPT)].lower())

    for row in range(choice + 1, max_choice):
        if matches(row):
            return row
    for row in range(max_choice):
        if matches(row):
            return row
    return None


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
    _quiet(dialog.bkgdset, ord(" "), colors["dialog"] & curses.A_COLOR)
    _quiet(dialog.addch, acs("ACS_RTEE", "+"))
    screen.print_title(dialog, title, width)
    dialog.attrset(colors["dialog"])
    screen.print_autowrap(dialog, prompt, width - 2, 1, 3)


def _print_item(
    screen: DialogScreen, win: Any, item: DialogItem, row: int, selected: bool,
    menu_width: int, item_x: int,
) -> None:
    colors = screen.colors
    text = item.text[: max(menu_width - item_x, 0)]
    j = first_alpha(text, _EXEMPT)
    win.attrset(colors["menubox"])
    _quiet(win.move, row, 0)
    _quiet(win.clrtoeol)
    win.attrset(colors["item_selected" if selected else "item"])
    _quiet(win.addstr, row, item_x, text)
    if item.tag != ":" and text:
        win.attrset(colors["tag_key_selected" if selected else "tag_key"])
        _quiet(win.addch, row, item_x + j, text[j])
    if selected:
        _quiet(win.move, row, item_x + 1)
    win.refresh()


def _print_arrows(
    screen: DialogScreen, win: Any, item_no: int, scroll: int, y: int, x: int, height: int
) -> None:
    colors = screen.colors
    hline = acs("ACS_HLINE", "-")
    cur_y, cur_x = win.getyx()
    _quiet(win.move, y, x)
    if scroll > 0:
        win.attrset(colors["uarrow"])
        _quiet(win.addch, acs("ACS_UARROW", "^"))
        _quiet(win.addstr, "(-)")
    else:
        win.attrset(colors["menubox"])
        for _ in range(4):
            _quiet(win.addch, hline)

    _quiet(win.move, y + height + 1, x)
    win.refresh()
    if height < item_no and scroll + height < item_no:
        win.attrset(colors["darrow"])
        _quiet(win.addch, acs("ACS_DARROW", "v"))
        _quiet(win.addstr, "(+)")
    else:
        win.attrset(colors["menubox_border"])
        for _ in range(4):
            _quiet(win.addch, hline)
    _quiet(win.move, cur_y, cur_x)
    win.refresh()


def _print_buttons(screen: DialogScreen, win: Any, height: int, width: int, selected: int) -> None:
    x = width // 2 - 28
    y = height - 2
    for number, label in enumerate(_BUTTONS):
        screen.print_button(win, label, y, x + 12 * number, selected == number)
    _quiet(win.move, y, x + 1 + 12 * selected)
    win.refresh()


def dialog_menu(
    screen: DialogScreen,
    items: ItemList,
    title: Optional[str],
    prompt: str,
    selected: Any = None,
    scroll: int = 0,
) -> tuple[int, int]:
    """Show a menu and return (result, scroll offset to remember).

    The result is the button under Enter (0 Select, 1 Exit, 2 Help, 3 Save,
    4 Load), 2 for h/?, 5 for s/y, 6 for n, 7 for m, 8 for space, 9 for /,
    10 for z, or KEY_ESC.  The highlighted entry is marked selected.
    """
    saved_scroll = scroll
    key = 0
    button = 0
    choice = 0
    while True:
        rows, cols = screen.stdscr.getmaxyx()
        if rows < MENUBOX_HEIGHT_MIN or cols < MENUBOX_WIDTH_MIN:
            raise DisplayTooSmall(f"display is {rows}x{cols}, too small for a menu")

        height = rows - 4
        width = cols - 5
        menu_height = height - 10
        count = len(items)
        max_choice = min(menu_height, count)

        x = (cols - width) // 2
        y = (rows - height) // 2
        screen.draw_shadow(screen.stdscr, y, x, height, width)
        dialog = curses.newwin(height, width, y, x)
        dialog.keypad(True)
        _draw_frame(screen, dialog, title, prompt, height, width)

        menu_width = width - 6
        box_y = height - menu_height - 5
        box_x = (width - menu_width) // 2 - 1
        menu = dialog.subwin(menu_height, menu_width, y + box_y + 1, x + box_x + 1)
        menu.keypad(True)
        screen.draw_box(
            dialog, box_y, box_x, menu_height + 2, menu_width + 2,
            screen.colors["menubox_border"], screen.colors["menubox"],
        )
        item_x = (menu_width - 70) // 2 if menu_width >= 80 else 4

        if selected is not None:
            for position, item in enumerate(items):
                if item.data is selected:
                    choice = position
        choice, top = initial_position(choice, saved_scroll, max_choice, count)
        cursor = MenuCursor(choice, top, max_choice, count)

        def redraw() -> None:
            for row in range(max_choice):
                _print_item(
                    screen, menu, items[cursor.scroll + row], row,
                    row == cursor.choice, menu_width, item_x,
                )

        def arrows() -> None:
            _print_arrows(
                screen, dialog, count, cursor.scroll, box_y, box_x + item_x + 1, menu_height
            )

        redraw()
        menu.noutrefresh()
        arrows()
        _print_buttons(screen, dialog, height, width, 0)
        _quiet(menu.move, cursor.choice, item_x + 1)
        menu.refresh()

        moves: dict[int, Callable[[], int]] = {
            curses.KEY_UP: cursor.up,
            ord("-"): cursor.up,
            curses.KEY_DOWN: cursor.down,
            ord("+"): cursor.down,
            curses.KEY_PPAGE: cursor.page_up,
            curses.KEY_NPAGE: cursor.page_down,
        }

        while key != KEY_ESC:
            key = _lower_key(menu.getch())
            hit = find_hotkey(items, key, cursor.choice, cursor.scroll, max_choice)
            if count and (hit is not None or key in moves):
                if key in moves:
                    moves[key]()
                else:
                    cursor.choice = hit
                redraw()
                arrows()
                dialog.noutrefresh()
                menu.refresh()
                continue

            if key in (curses.KEY_LEFT, TAB, curses.KEY_RIGHT):
                button += -1 if key == curses.KEY_LEFT else 1
                if button < 0:
                    button = 4
                elif button > 4:
                    button = 0
                _print_buttons(screen, dialog, height, width, button)
                menu.refresh()
            elif key in _ACTIONS or key == ord("\n"):
                items.select(cursor.position)
                if items.current is not None:
                    items.set_selected(True)
                result = button if key == ord("\n") else _ACTIONS[key]
                return result, cursor.scroll
            elif key in (ord("e"), ord("x")):
                key = KEY_ESC
            elif key == KEY_ESC:
                key = screen.on_key_esc(menu)
            elif key == curses.KEY_RESIZE:
                screen.on_key_resize()
                choice = cursor.choice
                break
        else:
            return key, saved_scroll