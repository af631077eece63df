import curses
from unittest import mock

import pytest

from menukit.lxdialog.checklist import checklist_columns, dialog_checklist
from menukit.lxdialog.items import ItemList
from menukit.lxdialog.screen import KEY_ESC, TAB, DialogScreen, DisplayTooSmall
from menukit.lxdialog.theme import mono_theme


class FakeWindow:
    def __init__(self, keys=(), size=(40, 100)):
        self.keys = [ord(k) if isinstance(k, str) else k for k in keys]
        self.size = size
        self.written = []
        self.idle = 0

    def getmaxyx(self):
        return self.size

    def getyx(self):
        return (1, 3)

    def getch(self):
        if self.keys:
            self.idle = 0
            return self.keys.pop(0)
        self.idle += 1
        if self.idle > 20:
            raise RuntimeError("ran out of keys")
        return curses.ERR

    def addstr(self, *args):
        self.written.append(args[-1])

    def subwin(self, *args):
        return FakeWindow()

    def inch(self):
        return 0

    def __getattr__(self, name):
        return lambda *args, **kwargs: None


def make_items(texts, chosen=None):
    items = ItemList()
    for text in texts:
        items.make(text)
        items.set_data(text)
        if text == chosen:
            items.set_tag("X")
    return items


def run(items, keys, size=(40, 100), list_height=3):
    screen = DialogScreen(FakeWindow(size=size), mono_theme(), False)
    dialog = FakeWindow(keys)
    with mock.patch("curses.newwin", return_value=dialog):
        return dialog_checklist(screen, items, "Choice", "Pick one", 15, 65, list_height)


def picked(items):
    assert items.activate_selected()
    return items.current.data


def test_columns_leave_room_for_check_mark():
    items = make_items(["ab", "abcd"])
    check_x, item_x = checklist_columns(items, 20)
    assert item_x - check_x == 4
    assert item_x + len("abcd") <= 20


def test_columns_for_overlong_item_start_at_left():
    items = make_items(["x" * 50])
    assert checklist_columns(items, 20)[0] == 0


def test_select_keeps_current_choice():
    items = make_items(["apple", "banana", "cherry"], chosen="banana")
    assert run(items, ["\n"]) == 0
    assert picked(items) == "banana"


def test_down_moves_choice():
    items = make_items(["apple", "banana", "cherry"])
    run(items, [curses.KEY_DOWN, " "])
    assert picked(items) == "banana"


def test_up_at_top_stays():
    items = make_items(["apple", "banana"])
    run(items, [curses.KEY_UP, "\n"])
    assert picked(items) == "apple"


def test_hotkey_jumps_to_entry():
    items = make_items(["apple", "banana", "cherry"])
    run(items, ["c", "\n"])
    assert picked(items) == "cherry"


def test_scrolls_past_visible_rows():
    items = make_items(["one", "two", "three", "four", "five"])
    run(items, [curses.KEY_DOWN] * 4 + ["\n"], list_height=2)
    assert picked(items) == "five"


def test_scrolls_back_up():
    items = make_items(["one", "two", "three", "four", "five"], chosen="five")
    run(items, [curses.KEY_UP] * 4 + ["\n"], list_height=2)
    assert picked(items) == "one"


def test_help_key_returns_help_and_marks_entry():
    items = make_items(["apple", "banana"], chosen="banana")
    assert run(items, ["?"]) == 1
    assert picked(items) == "banana"


def test_tab_then_enter_is_help():
    items = make_items(["apple", "banana"])
    assert run(items, [TAB, "\n"]) == run(make_items(["apple", "banana"]), ["?"])


def test_only_one_entry_selected():
    items = make_items(["apple", "banana", "cherry"])
    items.select(0)
    items.set_selected(True)
    run(items, [curses.KEY_DOWN, "\n"])
    assert sum(item.selected for item in items) == 1
    assert picked(items) == "banana"


def test_escape_returns_esc():
    items = make_items(["apple", "banana"])
    assert run(items, [KEY_ESC, KEY_ESC]) == KEY_ESC


def test_x_key_returns_esc():
    items = make_items(["apple", "banana"])
    assert run(items, ["x"]) == KEY_ESC


def test_too_small_display_raises():
    with pytest.raises(DisplayTooSmall):
        run(make_items(["apple"]), ["\n"], size=(10, 40))