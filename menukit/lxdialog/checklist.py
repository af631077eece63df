"""A radiolist box: one entry of the list is chosen."""

from __future__ import annotations

import curses
from typing import Any, Optional

from .items import DialogItem, ItemList
from .screen import (
    CHECKLIST_HEIGHT_MIN,
    CHECKLIST_WIDTH_MIN,
    KEY_ESC,
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


def _upper(code: int) -> int:
    return code - 32 if ord("a") <= code <= ord("z") else code


def checklist_columns(items: ItemList, list_width: int) -> tuple[int, int]:
    """Columns of the check mark and of the text, centring the longest entry."""
    widest = max((len(item.text) + 4 for item in items), default=0)
    check_x = (list_width - min(widest, list_width)) // 2
    return check_x, check_x + 4


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


def _print_item(
    screen: DialogScreen, win: Any, item: DialogItem, row: int, selected: bool,
    list_width: int, check_x: int, item_x: int,
) -> None:
    colors = screen.colors
    text = item.text[: max(list_width - item_x, 0)]
    win.attrset(colors["menubox"])
    _quiet(win.addstr, row, 0, " " * list_width)
    _quiet(win.move, row, check_x)
    win.attrset(colors["check_selected" if selected else "check"])
    if item.tag != ":":
        _quiet(win.addstr, "(X)" if item.tag == "X" else "( )")
    win.attrset(colors["tag_selected" if selected else "tag"])
    if text:
        _quiet(win.addch, row, item_x, text[0])
    else:
        _quiet(win.move, row, item_x)
    win.attrset(colors["item_selected" if selected else "item"])
    _quiet(win.addstr, text[1:])
    if selected:
        _quiet(win.move, row, check_x + 1)
        win.refresh()


def _print_arrows(
    screen: DialogScreen, win: Any, choice: int, item_no: int, scroll: int,
    y: int, x: int, height: int,
) -> None:
    colors = screen.colors
    hline = acs("ACS_HLINE", "-")
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
    if height < item_no and scroll + choice < item_no - 1:
        win.attrset(colors["darrow"])
        _quiet(win.addch, acs("ACS_DARROW", "v"))
        _quiet(win.addstr, "(+)")
    else:
        win.attrset(colors["menubox_border"])
        for _ in range(4):
            _quiet(win.addch, hline)


def _print_buttons(screen: DialogScreen, dialog: Any, height: int, width: int, selected: int) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(dialog, "Select", y, x, selected == 0)
    screen.print_button(dialog, " Help ", y, x + 14, selected == 1)
    _quiet(dialog.move, y, x + 1 + 14 * selected)
    dialog.refresh()


def dialog_checklist(
    screen: DialogScreen,
    items: ItemList,
    title: Optional[str],
    prompt: str,
    height: int,
    width: int,
    list_height: int,
) -> int:
    """Let the user pick one entry; 0 for Select, 1 for Help, KEY_ESC to leave.

    On Select or Help the highlighted entry is the only one marked selected.
    """
    choice = 0
    for position, item in enumerate(items):
        if item.tag == "X":
            choice = position
        if item.selected:
            choice = position
            break

    scroll = 0
    key = 0
    button = 0
    while True:
        rows, cols = screen.stdscr.getmaxyx()
        if rows < height + CHECKLIST_HEIGHT_MIN or cols < width + CHECKLIST_WIDTH_MIN:
            raise DisplayTooSmall(f"display is {rows}x{cols}, too small for a checklist")

        count = len(items)
        max_choice = min(list_height, count)
        x = (cols - width) // 2
        y = (rows - height) // 2
        screen.draw_shadow(screen.stdscr, y, x, height, width)
        dialog = curses.newwin(height, width, y, x)
        dialog.keypad(True)
        _draw_frame(screen, dialog, title, prompt, height, width)

        list_width = width - 6
        box_y = height - list_height - 5
        box_x = (width - list_width) // 2 - 1
        list_win = dialog.subwin(list_height, list_width, y + box_y + 1, x + box_x + 1)
        list_win.keypad(True)
        screen.draw_box(
            dialog, box_y, box_x, list_height + 2, list_width + 2,
            screen.colors["menubox_border"], screen.colors["menubox"],
        )
        check_x, item_x = checklist_columns(items, list_width)
        arrows_x = box_x + check_x + 5

        def draw(index: int, row: int, selected: bool) -> None:
            _print_item(screen, list_win, items[index], row, selected, list_width, check_x, item_x)

        def arrows() -> None:
            _print_arrows(screen, dialog, choice, count, scroll, box_y, arrows_x, list_height)

        if choice >= list_height:
            scroll = choice - list_height + 1
            choice -= scroll

        for row in range(max_choice):
            draw(scroll + row, row, row == choice)
        arrows()
        _print_buttons(screen, dialog, height, width, 0)
        dialog.noutrefresh()
        list_win.refresh()

        while key != KEY_ESC:
            key = dialog.getch()
            hit = next(
                (
                    row for row in range(max_choice)
                    if items[scroll + row].text
                    and _upper(key) == _upper(ord(items[scroll + row].text[0]))
                ),
                None,
            )
            moving_up = key in (curses.KEY_UP, ord("-"))
            moving_down = key in (curses.KEY_DOWN, ord("+"))
            if hit is not None or moving_up or moving_down:
                target = hit
                if moving_up:
                    if choice == 0:
                        if not scroll:
                            continue
                        if list_height > 1:
                            draw(scroll, 0, False)
                            list_win.scrollok(True)
                            _quiet(list_win.scroll, -1)
                            list_win.scrollok(False)
                        scroll -= 1
                        draw(scroll, 0, True)
                        arrows()
                        dialog.noutrefresh()
                        list_win.refresh()
                        continue
                    target = choice - 1
                elif moving_down:
                    if choice == max_choice - 1:
                        if scroll + choice >= count - 1:
                            continue
                        if list_height > 1:
                            draw(scroll + max_choice - 1, max_choice - 1, False)
                            list_win.scrollok(True)
                            _quiet(list_win.scroll, 1)
                            list_win.scrollok(False)
                        scroll += 1
                        draw(scroll + max_choice - 1, max_choice - 1, True)
                        arrows()
                        dialog.noutrefresh()
                        list_win.refresh()
                        continue
                    target = choice + 1
                if target != choice:
                    draw(scroll + choice, choice, False)
                    choice = target
                    draw(scroll + choice, choice, True)
                    dialog.noutrefresh()
                    list_win.refresh()
                continue

            if key in (ord("H"), ord("h"), ord("?")):
                button = 1
            if key in (ord("H"), ord("h"), ord("?"), ord("S"), ord("s"), ord(" "), ord("\n")):
                for item in items:
                    item.selected = False
                items.select(scroll + choice)
                if items.current is not None:
                    items.set_selected(True)
                return button
            if key in (TAB, curses.KEY_LEFT, curses.KEY_RIGHT):
                button += -1 if key == curses.KEY_LEFT else 1
                if button < 0:
                    button = 1
                elif button > 1:
                    button = 0
                _print_buttons(screen, dialog, height, width, button)
            elif key in (ord("X"), ord("x")):
                key = KEY_ESC
            elif key == KEY_ESC:
                key = screen.on_key_esc(dialog)
            elif key == curses.KEY_RESIZE:
                screen.on_key_resize()
                break
        else:
            return key