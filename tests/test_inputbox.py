import curses
from unittest import mock

import pytest

from menukit.lxdialog.inputbox import LineEditor, dialog_inputbox
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


def run(keys, init=None, size=(40, 100)):
    screen = DialogScreen(FakeWindow(size=size), mono_theme(), False)
    dialog = FakeWindow(keys)
    with mock.patch("curses.newwin", return_value=dialog):
        return dialog_inputbox(screen, "Value", "Enter a value", 10, 75, init)


def _consistent(editor):
    return editor.show_x + editor.input_x == editor.pos


def test_editor_short_text_starts_at_end():
    editor = LineEditor("abc", 10)
    assert editor.pos == len("abc")
    assert editor.visible() == "abc"
    assert _consistent(editor)


def test_editor_long_text_scrolls_to_end():
    editor = LineEditor("abcdefghij", 5)
    assert editor.input_x == editor.box_width - 1
    assert "abcdefghij".endswith(editor.visible())
    assert _consistent(editor)


def test_editor_insert_in_middle():
    editor = LineEditor("ace", 10)
    assert editor.left()
    assert editor.left()
    assert editor.insert("b")
    assert editor.text == "abce"
    assert _consistent(editor)


def test_editor_backspace_and_bounds():
    editor = LineEditor("ab", 10)
    assert editor.backspace()
    assert editor.text == "a"
    assert editor.backspace()
    assert editor.text == ""
    assert not editor.backspace()
    assert not editor.left()
    assert not editor.right()


def test_editor_moves_keep_invariant_while_scrolling():
    editor = LineEditor("0123456789", 4)
    while editor.left():
        assert _consistent(editor)
        assert editor.visible() == editor.text[editor.show_x:editor.show_x + 4]
    assert editor.pos == 0
    while editor.right():
        assert _consistent(editor)
    assert editor.pos == len(editor.text)


def test_typing_then_enter_returns_text():
    assert run(["a", "b", "c", "\n"]) == (0, "abc")


def test_initial_value_kept():
    assert run(["\n"], init="hello")[1] == "hello"


def test_backspace_removes_last_character():
    assert run([127, "\n"], init="hello")[1] == "hell"


def test_letters_are_text_while_editing():
    assert run(["x", "o", "\n"])[1] == "xo"


def test_help_button_from_buttons():
    assert run([TAB, "h"], init="abc") == (1, "abc")


def test_ok_key_from_buttons():
    assert run([TAB, "o"], init="abc") == run(["\n"], init="abc")


def test_x_on_buttons_escapes():
    assert run([TAB, "x"], init="abc") == (KEY_ESC, "abc")


def test_double_escape_dismisses():
    assert run([KEY_ESC, KEY_ESC])[0] == KEY_ESC


def test_too_small_display_raises():
    with pytest.raises(DisplayTooSmall):
        run(["\n"], size=(5, 40))