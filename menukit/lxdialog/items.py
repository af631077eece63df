"""The list of entries shown by the menu and checklist dialogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

MAX_ITEM_STR = 199


@dataclass(eq=False)
class DialogItem:
    """One entry: its text, a one-letter tag, caller data and selection."""

    text: str = ""
    tag: str = ""
    data: Any = None
    selected: bool = False


class ItemList:
    """Ordered dialog entries with a cursor on the current one."""

    def __init__(self) -> None:
        self._items: list[DialogItem] = []
        self.current: Optional[DialogItem] = None

    def _require(self) -> DialogItem:
        if self.current is None:
            raise LookupError("no current item")
        return self.current

    def reset(self) -> None:
        """Drop every entry."""
        self._items.clear()
        self.current = None

    def make(self, text: str) -> DialogItem:
        """Append an entry and make it current."""
        item = DialogItem(text[:MAX_ITEM_STR])
        self._items.append(item)
        self.current = item
        return item

    def add_str(self, text: str) -> None:
        """Extend the current entry's text, keeping it within the length limit."""
        item = self._require()
        item.text = (item.text + text)[:MAX_ITEM_STR]

    def set_tag(self, tag: str) -> None:
        self._require().tag = tag

    def set_data(self, data: Any) -> None:
        self._require().data = data

    def set_selected(self, value: bool) -> None:
        self._require().selected = bool(value)

    def activate_selected(self) -> bool:
        """Make the first selected entry current; False if none is selected."""
        for item in self._items:
            if item.selected:
                self.current = item
                return True
        self.current = None
        return False

    def select(self, n: int) -> None:
        """Make entry ``n`` current, or clear the cursor when out of range."""
        self.current = self._items[n] if 0 <= n < len(self._items) else None

    def index(self) -> int:
        """Position of the current entry, 0 when there is none."""
        for position, item in enumerate(self._items):
            if item is self.current:
                return position
        return 0

    def is_tag(self, tag: str) -> bool:
        return self._require().tag == tag

    def __getitem__(self, n: int) -> DialogItem:
        return self._items[n]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DialogItem]:
        return iter(list(self._items))