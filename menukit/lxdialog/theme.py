"""Colour themes for the dialog widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Iterator, Optional

BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7


class Attr(enum.Flag):
    """Terminal attributes used when the display has no colours."""

    NORMAL = 0
    BOLD = enum.auto()
    REVERSE = enum.auto()
    DIM = enum.auto()


@dataclass
class DialogColor:
    """Foreground, background and highlight of one screen element."""

    fg: int = 0
    bg: int = 0
    hl: bool = False
    attr: Attr = Attr.NORMAL


@dataclass
class Theme:
    """The colours of every element a dialog draws."""

    screen: DialogColor = field(default_factory=DialogColor)
    shadow: DialogColor = field(default_factory=DialogColor)
    dialog: DialogColor = field(default_factory=DialogColor)
    title: DialogColor = field(default_factory=DialogColor)
    border: DialogColor = field(default_factory=DialogColor)
    button_active: DialogColor = field(default_factory=DialogColor)
    button_inactive: DialogColor = field(default_factory=DialogColor)
    button_key_active: DialogColor = field(default_factory=DialogColor)
    button_key_inactive: DialogColor = field(default_factory=DialogColor)
    button_label_active: DialogColor = field(default_factory=DialogColor)
    button_label_inactive: DialogColor = field(default_factory=DialogColor)
    inputbox: DialogColor = field(default_factory=DialogColor)
    inputbox_border: DialogColor = field(default_factory=DialogColor)
    searchbox: DialogColor = field(default_factory=DialogColor)
    searchbox_title: DialogColor = field(default_factory=DialogColor)
    searchbox_border: DialogColor = field(default_factory=DialogColor)
    position_indicator: DialogColor = field(default_factory=DialogColor)
    menubox: DialogColor = field(default_factory=DialogColor)
    menubox_border: DialogColor = field(default_factory=DialogColor)
    item: DialogColor = field(default_factory=DialogColor)
    item_selected: DialogColor = field(default_factory=DialogColor)
    tag: DialogColor = field(default_factory=DialogColor)
    tag_selected: DialogColor = field(default_factory=DialogColor)
    tag_key: DialogColor = field(default_factory=DialogColor)
    tag_key_selected: DialogColor = field(default_factory=DialogColor)
    check: DialogColor = field(default_factory=DialogColor)
    check_selected: DialogColor = field(default_factory=DialogColor)
    uarrow: DialogColor = field(default_factory=DialogColor)
    darrow: DialogColor = field(default_factory=DialogColor)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Element names in the order their colour pairs are allocated."""
        return tuple(f.name for f in fields(cls))

    def items(self) -> Iterator[tuple[str, DialogColor]]:
        for name in self.names():
            yield name, getattr(self, name)


_MONO = {
    "screen": Attr.NORMAL,
    "shadow": Attr.NORMAL,
    "dialog": Attr.NORMAL,
    "title": Attr.BOLD,
    "border": Attr.NORMAL,
    "button_active": Attr.REVERSE,
    "button_inactive": Attr.DIM,
    "button_key_active": Attr.REVERSE,
    "button_key_inactive": Attr.BOLD,
    "button_label_active": Attr.REVERSE,
    "button_label_inactive": Attr.NORMAL,
    "inputbox": Attr.NORMAL,
    "inputbox_border": Attr.NORMAL,
    "searchbox": Attr.NORMAL,
    "searchbox_title": Attr.BOLD,
    "searchbox_border": Attr.NORMAL,
    "position_indicator": Attr.BOLD,
    "menubox": Attr.NORMAL,
    "menubox_border": Attr.NORMAL,
    "item": Attr.NORMAL,
    "item_selected": Attr.REVERSE,
    "tag": Attr.BOLD,
    "tag_selected": Attr.REVERSE,
    "tag_key": Attr.BOLD,
    "tag_key_selected": Attr.REVERSE,
    "check": Attr.BOLD,
    "check_selected": Attr.REVERSE,
    "uarrow": Attr.BOLD,
    "darrow": Attr.BOLD,
}

_CLASSIC = {
    "screen": (CYAN, BLUE, True),
    "shadow": (BLACK, BLACK, True),
    "dialog": (BLACK, WHITE, False),
    "title": (YELLOW, WHITE, True),
    "border": (WHITE, WHITE, True),
    "button_active": (WHITE, BLUE, True),
    "button_inactive": (BLACK, WHITE, False),
    "button_key_active": (WHITE, BLUE, True),
    "button_key_inactive": (RED, WHITE, False),
    "button_label_active": (YELLOW, BLUE, True),
    "button_label_inactive": (BLACK, WHITE, True),
    "inputbox": (BLACK, WHITE, False),
    "inputbox_border": (BLACK, WHITE, False),
    "searchbox": (BLACK, WHITE, False),
    "searchbox_title": (YELLOW, WHITE, True),
    "searchbox_border": (WHITE, WHITE, True),
    "position_indicator": (YELLOW, WHITE, True),
    "menubox": (BLACK, WHITE, False),
    "menubox_border": (WHITE, WHITE, True),
    "item": (BLACK, WHITE, False),
    "item_selected": (WHITE, BLUE, True),
    "tag": (YELLOW, WHITE, True),
    "tag_selected": (YELLOW, BLUE, True),
    "tag_key": (YELLOW, WHITE, True),
    "tag_key_selected": (YELLOW, BLUE, True),
    "check": (BLACK, WHITE, False),
    "check_selected": (WHITE, BLUE, True),
    "uarrow": (GREEN, WHITE, True),
    "darrow": (GREEN, WHITE, True),
}

_BLACKBG = {
    "screen": (RED, BLACK, True),
    "shadow": (BLACK, BLACK, False),
    "dialog": (WHITE, BLACK, False),
    "title": (RED, BLACK, False),
    "border": (BLACK, BLACK, True),
    "button_active": (YELLOW, RED, False),
    "button_inactive": (YELLOW, BLACK, False),
    "button_key_active": (YELLOW, RED, True),
    "button_key_inactive": (RED, BLACK, False),
    "button_label_active": (WHITE, RED, False),
    "button_label_inactive": (BLACK, BLACK, True),
    "inputbox": (YELLOW, BLACK, False),
    "inputbox_border": (YELLOW, BLACK, False),
    "searchbox": (YELLOW, BLACK, False),
    "searchbox_title": (YELLOW, BLACK, True),
    "searchbox_border": (BLACK, BLACK, True),
    "position_indicator": (RED, BLACK, False),
    "menubox": (YELLOW, BLACK, False),
    "menubox_border": (BLACK, BLACK, True),
    "item": (WHITE, BLACK, False),
    "item_selected": (WHITE, RED, False),
    "tag": (RED, BLACK, False),
    "tag_selected": (YELLOW, RED, True),
    "tag_key": (RED, BLACK, False),
    "tag_key_selected": (YELLOW, RED, True),
    "check": (YELLOW, BLACK, False),
    "check_selected": (YELLOW, RED, True),
    "uarrow": (RED, BLACK, False),
    "darrow": (RED, BLACK, False),
}

_BLUETITLE = {
    **_CLASSIC,
    "title": (BLUE, WHITE, True),
    "button_key_active": (YELLOW, BLUE, True),
    "button_label_active": (WHITE, BLUE, True),
    "searchbox_title": (BLUE, WHITE, True),
    "position_indicator": (BLUE, WHITE, True),
    "tag": (BLUE, WHITE, True),
    "tag_key": (BLUE, WHITE, True),
}


def _from_table(table: dict[str, tuple[int, int, bool]]) -> Theme:
    return Theme(**{name: DialogColor(fg, bg, hl) for name, (fg, bg, hl) in table.items()})


def mono_theme() -> Theme:
    """Attributes suitable for a monochrome display."""
    return Theme(**{name: DialogColor(attr=attr) for name, attr in _MONO.items()})


def classic_theme() -> Theme:
    """Blue background, the classic look."""
    return _from_table(_CLASSIC)


def blackbg_theme() -> Theme:
    """A colour scheme with a black background."""
    return _from_table(_BLACKBG)


def bluetitle_theme() -> Theme:
    """An LCD friendly variant of the classic theme; the default."""
    return _from_table(_BLUETITLE)


def select_theme(name: Optional[str]) -> tuple[Theme, bool]:
    """Return the theme called ``name`` and whether it uses colour."""
    if name is None or name == "bluetitle":
        return bluetitle_theme(), True
    if name == "classic":
        return classic_theme(), True
    if name == "blackbg":
        return blackbg_theme(), True
    if name == "mono":
        return mono_theme(), False
    return Theme(), True