"""Curses drawing primitives shared by every dialog."""

from __future__ import annotations

import curses
import os
from typing import Any, Optional

from .text import Glyph, autowrap, subtitle_line, title_span
from .theme import Attr, Theme, mono_theme, select_theme

KEY_ESC = 27
TAB = 9
MAX_LEN = 2048

CHECKLIST_HEIGHT_MIN = 6
CHECKLIST_WIDTH_MIN = 6
INPUTBOX_HEIGHT_MIN = 2
INPUTBOX_WIDTH_MIN = 2
MENUBOX_HEIGHT_MIN = 15
MENUBOX_WIDTH_MIN = 65
TEXTBOX_HEIGHT_MIN = 8
TEXTBOX_WIDTH_MIN = 8
YESNO_HEIGHT_MIN = 4
YESNO_WIDTH_MIN = 4
WINDOW_HEIGHT_MIN = 19
WINDOW_WIDTH_MIN = 80

_FROM_ENV = object()


class DisplayTooSmall(Exception):
    """The terminal is too small for the requested dialog."""


def acs(name: str, fallback: str) -> int:
    """A line-drawing character, or ``fallback`` where the terminal has none."""
    return getattr(curses, name, ord(fallback))


def _quiet(func: Any, *args: Any) -> None:
    # Curses reports an error when writing the last cell of a window.
    try:
        func(*args)
    except curses.error:
        pass


def _mono_attr(attr: Attr) -> int:
    value = curses.A_NORMAL
    if Attr.BOLD in attr:
        value |= curses.A_BOLD
    if Attr.REVERSE in attr:
        value |= curses.A_REVERSE
    if Attr.DIM in attr:
        value |= curses.A_DIM
    return value


class DialogScreen:
    """A curses screen with the active theme, titles and drawing helpers."""

    def __init__(self, stdscr: Any, theme: Theme, use_color: bool) -> None:
        self.stdscr = stdscr
        self.theme = theme
        self.use_color = use_color
        self.backtitle: Optional[str] = None
        self.subtitles: list[str] = []
        self.saved = (0, 0)
        self.colors: dict[str, int] = {}
        if use_color:
            for pair, (name, color) in enumerate(theme.items(), 1):
                curses.init_pair(pair, color.fg, color.bg)
                attr = curses.color_pair(pair)
                self.colors[name] = attr | curses.A_BOLD if color.hl else attr
        else:
            for name, color in mono_theme().items():
                self.colors[name] = _mono_attr(color.attr)

    def clear(self) -> None:
        """Repaint the background with the back title and subtitle trail."""
        win = self.stdscr
        lines, columns = win.getmaxyx()
        self.attr_clear(win, lines, columns, self.colors["screen"])
        if self.backtitle is not None:
            win.attrset(self.colors["screen"])
            _quiet(win.addstr, 0, 1, self.backtitle)
            _quiet(win.move, 1, 1)
            for piece in subtitle_line(self.subtitles, columns):
                if piece is Glyph.RARROW:
                    _quiet(win.addch, acs("ACS_RARROW", ">"))
                elif piece is Glyph.HLINE:
                    _quiet(win.addch, acs("ACS_HLINE", "-"))
                else:
                    _quiet(win.addstr, piece)
        win.noutrefresh()

    def attr_clear(self, win: Any, height: int, width: int, attr: int) -> None:
        """Fill a region with blanks drawn in ``attr``."""
        win.attrset(attr)
        for row in range(height):
            _quiet(win.move, row, 0)
            for _ in range(width):
                _quiet(win.addch, " ")
        win.touchwin()

    def print_title(self, win: Any, title: Optional[str], width: int) -> None:
        """Centre ``title`` on the top border."""
        span = title_span(title, width)
        if span is None:
            return
        col, text = span
        win.attrset(self.colors["title"])
        _quiet(win.addch, 0, col - 1, " ")
        _quiet(win.addnstr, 0, col, text, len(text))
        _quiet(win.addch, " ")

    def print_button(self, win: Any, label: str, y: int, x: int, selected: bool) -> None:
        """Draw ``<label>`` with its first letter highlighted."""
        frame = self.colors["button_active" if selected else "button_inactive"]
        text = self.colors["button_label_active" if selected else "button_label_inactive"]
        key = self.colors["button_key_active" if selected else "button_key_inactive"]
        _quiet(win.move, y, x)
        win.attrset(frame)
        _quiet(win.addstr, "<")
        stripped = label.lstrip(" ")
        indent = len(label) - len(stripped)
        win.attrset(text)
        _quiet(win.addstr, " " * indent)
        if stripped:
            win.attrset(key)
            _quiet(win.addch, stripped[0])
            win.attrset(text)
            _quiet(win.addstr, stripped[1:])
        win.attrset(frame)
        _quiet(win.addstr, ">")
        _quiet(win.move, y, x + indent + 1)

    def print_autowrap(self, win: Any, prompt: str, width: int, y: int, x: int) -> None:
        """Draw ``prompt`` wrapped to ``width`` columns."""
        for row, col, word in autowrap(prompt, width, y, x):
            _quiet(win.addstr, row, col, word)

    def draw_box(
        self, win: Any, y: int, x: int, height: int, width: int, box: int, border: int
    ) -> None:
        """Draw a rectangle with a lit top-left and a shaded bottom-right edge."""
        ul, ll = acs("ACS_ULCORNER", "+"), acs("ACS_LLCORNER", "+")
        ur, lr = acs("ACS_URCORNER", "+"), acs("ACS_LRCORNER", "+")
        hline, vline = acs("ACS_HLINE", "-"), acs("ACS_VLINE", "|")
        win.attrset(0)
        last_row, last_col = height - 1, width - 1
        for i in range(height):
            _quiet(win.move, y + i, x)
            for j in range(width):
                if i == 0 and j == 0:
                    ch = border | ul
                elif i == last_row and j == 0:
                    ch = border | ll
                elif i == 0 and j == last_col:
                    ch = box | ur
                elif i == last_row and j == last_col:
                    ch = box | lr
                elif i == 0:
                    ch = border | hline
                elif i == last_row:
                    ch = box | hline
                elif j == 0:
                    ch = border | vline
                elif j == last_col:
                    ch = box | vline
                else:
                    ch = box | ord(" ")
                _quiet(win.addch, ch)

    def draw_shadow(self, win: Any, y: int, x: int, height: int, width: int) -> None:
        """Shade the cells right of and below a box, on colour displays."""
        if not self.use_color:
            return
        win.attrset(self.colors["shadow"])
        _quiet(win.move, y + height, x + 2)
        for _ in range(width):
            _quiet(win.addch, win.inch() & curses.A_CHARTEXT)
        for row in range(y + 1, y + height + 1):
            _quiet(win.move, row, x + width)
            _quiet(win.addch, win.inch() & curses.A_CHARTEXT)
            _quiet(win.addch, win.inch() & curses.A_CHARTEXT)
        win.noutrefresh()

    def on_key_esc(self, win: Any) -> int:
        """Tell a lone ESC from an escape sequence; return KEY_ESC or -1."""
        win.nodelay(True)
        win.keypad(False)
        key = win.getch()
        key2 = win.getch()
        while win.getch() != curses.ERR:
            pass
        win.nodelay(False)
        win.keypad(True)
        if key == KEY_ESC and key2 == curses.ERR:
            return KEY_ESC
        if key != curses.ERR and key != KEY_ESC and key2 == curses.ERR:
            curses.ungetch(key)
        return -1

    def on_key_resize(self) -> int:
        """Redraw the background after the terminal changed size."""
        self.clear()
        return curses.KEY_RESIZE

    def end(self) -> None:
        """Restore the cursor to where it was and leave curses mode."""
        y, x = self.saved
        _quiet(self.stdscr.move, y, x)
        self.stdscr.refresh()
        curses.endwin()


def init_dialog(
    stdscr: Any, backtitle: Optional[str] = None, theme_name: Any = _FROM_ENV
) -> DialogScreen:
    """Prepare ``stdscr`` for dialogs.

    The theme is taken from MENUCONFIG_COLOR unless ``theme_name`` is given.
    Raises DisplayTooSmall below 19 lines by 80 columns.
    """
    saved = stdscr.getyx()
    height, width = stdscr.getmaxyx()
    if height < WINDOW_HEIGHT_MIN or width < WINDOW_WIDTH_MIN:
        raise DisplayTooSmall(
            f"display is {height}x{width}, it must be at least "
            f"{WINDOW_HEIGHT_MIN} lines by {WINDOW_WIDTH_MIN} columns"
        )
    if theme_name is _FROM_ENV:
        theme_name = os.environ.get("MENUCONFIG_COLOR")
    theme, use_color = select_theme(theme_name)
    color = use_color and curses.has_colors()
    if color:
        curses.start_color()
    screen = DialogScreen(stdscr, theme, color)
    screen.backtitle = backtitle
    screen.saved = saved
    stdscr.keypad(True)
    curses.cbreak()
    curses.noecho()
    screen.clear()
    return screen