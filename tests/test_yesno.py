import curses
from unittest import mock

import pytest

from menukit.lxdialog.screen import KEY_ESC, TAB, DialogScreen, DisplayTooSmall
from menukit.lxdialog.theme import mono_theme
from menukit.lxdialog.yesno import dialog_yesno


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


def run(keys, prompt="Save the configuration?", size=(40, 100)):
    screen = DialogScreen(FakeWindow(size=size), mono_theme(), False)
    dialog = FakeWindow(keys)
    with mock.patch("curses.newwin", return_value=dialog):
        result = dialog_yesno(screen, None, prompt, 6, 60)
    return result, dialog


def test_yes_key():
    assert run(["y"])[0] == 0


def test_no_key():
    assert run(["n"])[0] == 1


def test_upper_case_keys_match_lower():
    assert run(["Y"])[0] == run(["y"])[0]
    assert run(["N"])[0] == run(["n"])[0]


def test_enter_on_default_button_is_yes():
    assert run(["\n"])[0] == run(["y"])[0]
    assert run([" "])[0] == run(["y"])[0]


def test_tab_moves_to_no():
    assert run([TAB, "\n"])[0] == run(["n"])[0]


def test_left_wraps_to_no():
    assert run([curses.KEY_LEFT, "\n"])[0] == run(["n"])[0]


def test_two_tabs_wrap_to_yes():
    assert run([TAB, TAB, "\n"])[0] == run(["y"])[0]


def test_double_escape_dismisses():
    assert run([KEY_ESC, KEY_ESC])[0] == KEY_ESC


def test_prompt_is_drawn():
    _, dialog = run(["y"], prompt="Proceed?")
    assert "Proceed?" in dialog.written


def test_too_small_display_raises():
    with pytest.raises(DisplayTooSmall):
        run(["y"], size=(5, 20))