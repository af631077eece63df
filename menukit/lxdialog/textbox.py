"""A scrolling text viewer."""

from __future__ import annotations

import curses
from typing import Any, Callable, Iterable, Optional

from .screen import (
    KEY_ESC,
    MAX_LEN,
    TEXTBOX_HEIGHT_MIN,
    TEXTBOX_WIDTH_MIN,
    DialogScreen,
    DisplayTooSmall,
    acs,
)

UpdateText = Callable[[str, int, int], str]


def _quiet(func: Any, *args: Any) -> None:
    try:
        func(*args)
    except curses.error:
        pass


class TextPager:
    """Line-wise position in a text, with begin and end markers."""

    def __init__(self, text: str, vscroll: int = 0) -> None:
        self.text = text
        self.page = 0
        self.begin_reached = True
        self.end_reached = False
        self.page_length = 0
        if vscroll:
            self.begin_reached = False
            for _ in range(vscroll):
                self.get_line()

    def get_line(self) -> str:
        """Return the line at the current position and advance past it.

        Lines longer than MAX_LEN are truncated.
        """
        self.end_reached = False
        newline = self.text.find("\n", self.page)
        if newline < 0:
            line = self.text[self.page:]
            self.page = len(self.text)
            self.end_reached = True
        else:
            line = self.text[self.page:newline]
            self.page = newline + 1
        return line[:MAX_LEN]

    def back_lines(self, n: int) -> None:
        """Go back ``n`` lines, stopping at the beginning of the text."""
        self.begin_reached = False
        for _ in range(n):
            if self.page >= len(self.text) and self.end_reached:
                self.end_reached = False
                continue
            if self.page == 0:
                self.begin_reached = True
                return
            self.page -= 1
            while True:
                if self.page == 0:
                    self.begin_reached = True
                    return
                self.page -= 1
                if self.text[self.page] == "\n":
                    break
            self.page += 1

    def page_lines(self, height: int) -> list[str]:
        """Read ``height`` lines for display and record how many were real."""
        lines: list[str] = []
        passed_end = False
        self.page_length = 0
        for _ in range(height):
            lines.append(self.get_line())
            if not passed_end:
                self.page_length += 1
                if self.end_reached:
                    passed_end = True
        return lines

    def percent(self) -> int:
        """How far into the text the current position is, in percent."""
        if not self.text:
            return 0
        return self.page * 100 // len(self.text)

    def vscroll(self) -> int:
        """Index of the first line of the page last read; moves back to it."""
        self.back_lines(self.page_length)
        count = 0
        start = 0
        while start < self.page:
            newline = self.text.find("\n", start)
            if newline < 0:
                break
            count += 1
            start = newline + 1
        return count


def _page_text(pager: TextPager, height: int, update_text: Optional[UpdateText]) -> list[str]:
    if update_text is not None:
        for _ in range(height):
            pager.get_line()
        end = pager.page
        pager.back_lines(height)
        updated = update_text(pager.text, pager.page, end)
        if len(updated) != len(pager.text):
            raise ValueError("update_text must not change the length of the text")
        pager.text = updated
    return pager.page_lines(height)


def dialog_textbox(
    screen: DialogScreen,
    title: Optional[str],
    text: str,
    height: int = 0,
    width: int = 0,
    keys: Iterable[int] = (),
    vscroll: int = 0,
    hscroll: int = 0,
    update_text: Optional[UpdateText] = None,
) -> tuple[int, int, int]:
    """Show ``text``; return (key that closed it, vertical and horizontal scroll).

    A height or width of 0 fills the screen.  Any key in ``keys`` closes the
    box.  ``update_text(text, start, end)`` may rewrite the visible part of the
    text before each page is drawn, keeping its length and line breaks.
    """
    pager = TextPager(text, vscroll)
    exit_keys = frozenset(k for k in keys if k)
    key = 0
    while True:
        rows, cols = screen.stdscr.getmaxyx()
        if rows < TEXTBOX_HEIGHT_MIN or cols < TEXTBOX_WIDTH_MIN:
            raise DisplayTooSmall(f"display is {rows}x{cols}, too small for a text box")
        box_height = height or (rows - 4 if rows > 4 else 0)
        box_width = width or (cols - 5 if cols > 5 else 0)

        x = (cols - box_width) // 2
        y = (rows - box_height) // 2
        screen.draw_shadow(screen.stdscr, y, x, box_height, box_width)
        dialog = curses.newwin(box_height, box_width, y, x)
        dialog.keypad(True)

        colors = screen.colors
        boxh = box_height - 4
        boxw = box_width - 2
        box = dialog.subwin(boxh, boxw, y + 1, x + 1)
        box.attrset(colors["dialog"])
        _quiet(box.bkgdset, ord(" "), colors["dialog"] & curses.A_COLOR)
        box.keypad(True)

        screen.draw_box(dialog, 0, 0, box_height, box_width, colors["dialog"], colors["border"])
        dialog.attrset(colors["border"])
        _quiet(dialog.addch, box_height - 3, 0, acs("ACS_LTEE", "+"))
        for _ in range(box_width - 2):
            _quiet(dialog.addch, acs("ACS_HLINE", "-"))
        dialog.attrset(colors["dialog"])
        _quiet(dialog.bkgdset, ord(" "), colors["dialog"] & curses.A_COLOR)
        _quiet(dialog.addch, acs("ACS_RTEE", "+"))
        screen.print_title(dialog, title, box_width)
        screen.print_button(dialog, " Exit ", box_height - 2, box_width // 2 - 4, True)
        dialog.noutrefresh()
        cur_y, cur_x = dialog.getyx()

        def refresh() -> None:
            for row, line in enumerate(_page_text(pager, boxh, update_text)):
                line = line[min(len(line), hscroll):]
                _quiet(box.move, row, 0)
                _quiet(box.addch, " ")
                count = min(len(line), boxw - 2)
                if count > 0:
                    _quiet(box.addnstr, line, count)
                _quiet(box.clrtoeol)
            box.noutrefresh()
            dialog.attrset(colors["position_indicator"])
            _quiet(dialog.bkgdset, ord(" "), colors["position_indicator"] & curses.A_COLOR)
            max_y, max_x = dialog.getmaxyx()
            _quiet(dialog.addstr, max_y - 3, max_x - 9, f"({pager.percent():3d}%)")
            _quiet(dialog.move, cur_y, cur_x)
            dialog.refresh()

        screen.attr_clear(box, boxh, boxw, colors["dialog"])
        refresh()

        done = False
        resized = False
        while not done:
            key = dialog.getch()
            if key in (ord("E"), ord("e"), ord("X"), ord("x"), ord("q"), ord("\n")):
                done = True
            elif key in (ord("g"), curses.KEY_HOME):
                if not pager.begin_reached:
                    pager.begin_reached = True
                    pager.page = 0
                    refresh()
            elif key in (ord("G"), curses.KEY_END):
                pager.end_reached = True
                pager.page = len(pager.text)
                pager.back_lines(boxh)
                refresh()
            elif key in (ord("K"), ord("k"), curses.KEY_UP):
                if not pager.begin_reached:
                    pager.back_lines(pager.page_length + 1)
                    refresh()
            elif key in (ord("B"), ord("b"), ord("u"), curses.KEY_PPAGE):
                if not pager.begin_reached:
                    pager.back_lines(pager.page_length + boxh)
                    refresh()
            elif key in (ord("J"), ord("j"), curses.KEY_DOWN):
                if not pager.end_reached:
                    pager.back_lines(pager.page_length - 1)
                    refresh()
            elif key in (curses.KEY_NPAGE, ord(" "), ord("d")):
                if not pager.end_reached:
                    pager.begin_reached = False
                    refresh()
            elif key in (ord("0"), ord("H"), ord("h"), curses.KEY_LEFT):
                if hscroll > 0:
                    hscroll = 0 if key == ord("0") else hscroll - 1
                    pager.back_lines(pager.page_length)
                    refresh()
            elif key in (ord("L"), ord("l"), curses.KEY_RIGHT):
                if hscroll < MAX_LEN:
                    hscroll += 1
                    pager.back_lines(pager.page_length)
                    refresh()
            elif key == KEY_ESC:
                if screen.on_key_esc(dialog) == KEY_ESC:
                    done = True
            elif key == curses.KEY_RESIZE:
                pager.back_lines(box_height)
                screen.on_key_resize()
                resized = True
                break
            elif key in exit_keys:
                done = True
        if resized:
            continue
        return key, pager.vscroll(), hscroll