"""Text layout used by the dialog widgets, independent of the terminal."""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Union


class Glyph(enum.Enum):
    """Line-drawing characters placed by the layout functions."""

    RARROW = "rarrow"
    HLINE = "hline"


_ELLIPSIS = "[...] "


def first_alpha(string: str, exempt: str) -> int:
    """Index of the first letter outside brackets and not in ``exempt``, else 0."""
    in_paren = 0
    for index, ch in enumerate(string):
        c = ch.lower()
        if c in "<[(":
            in_paren += 1
        if c in ">])" and in_paren > 0:
            in_paren -= 1
        if not in_paren and c.isascii() and c.isalpha() and c not in exempt:
            return index
    return 0


def autowrap(prompt: str, width: int, y: int, x: int) -> list[tuple[int, int, str]]:
    """Lay out ``prompt`` as (row, column, word) placements.

    Newlines start a new line, and a new line is started early when there is
    no room for at least four non-blanks following a double space.
    """
    if len(prompt) <= width - x * 2:
        return [(y, (width - len(prompt)) // 2, prompt)]

    placements: list[tuple[int, int, str]] = []
    cur_x, cur_y = x, y
    newl = True
    rest: Optional[str] = prompt
    while rest:
        cut = min((i for i in (rest.find("\n"), rest.find(" ")) if i >= 0), default=-1)
        newline_separator = False
        if cut >= 0:
            newline_separator = rest[cut] == "\n"
            word, after = rest[:cut], rest[cut + 1:]
        else:
            word, after = rest, None

        room = width - cur_x
        wlen = len(word)
        wrap = wlen > room
        if not wrap and newl and wlen < 4 and after is not None and wlen + 1 + len(after) > room:
            next_cut = min(
                (i for i in (after.find("\n"), after.find(" ")) if i >= 0), default=-1
            )
            wrap = next_cut < 0 or wlen + 1 + next_cut > room
        if wrap:
            cur_y += 1
            cur_x = x
        if word:
            placements.append((cur_y, cur_x, word))
        cur_x += wlen

        if newline_separator:
            cur_y += 1
            cur_x = x
        else:
            cur_x += 1

        if after and after[0] == " ":
            cur_x += 1  # double space
            after = after.lstrip(" ")
            newl = True
        else:
            newl = False
        rest = after
    return placements


def subtitle_line(subtitles: Iterable[str], columns: int) -> list[Union[str, Glyph]]:
    """Pieces drawn on the subtitle row from column 1 of a screen ``columns`` wide.

    When the trail does not fit, its start is replaced by an ellipsis.
    """
    subtitles = list(subtitles)
    total = sum(len(text) + 3 for text in subtitles)
    pieces: list[Union[str, Glyph]] = []
    skip = 0
    if total > columns - 2:
        pieces.append(_ELLIPSIS)
        skip = total - (columns - 2 - len(_ELLIPSIS))

    for text in subtitles:
        if skip == 0:
            pieces.append(Glyph.RARROW)
        else:
            skip -= 1
        if skip == 0:
            pieces.append(" ")
        else:
            skip -= 1
        if skip < len(text):
            pieces.append(text[skip:])
            skip = 0
        else:
            skip -= len(text)
        if skip == 0:
            pieces.append(" ")
        else:
            skip -= 1

    pieces.extend(Glyph.HLINE for _ in range(total + 1, columns - 1))
    return pieces


def title_span(title: Optional[str], width: int) -> Optional[tuple[int, str]]:
    """Column and text of a centred title, truncated to ``width - 2``."""
    if title is None:
        return None
    tlen = min(width - 2, len(title))
    return (width - tlen) // 2, title[:tlen]