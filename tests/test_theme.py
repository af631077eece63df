from menukit.lxdialog.theme import (
    BLUE,
    CYAN,
    Attr,
    DialogColor,
    Theme,
    blackbg_theme,
    bluetitle_theme,
    classic_theme,
    mono_theme,
    select_theme,
)


def test_classic_screen_colour():
    assert classic_theme().screen == DialogColor(CYAN, BLUE, True)


def test_bluetitle_differs_from_classic_in_listed_elements():
    classic = dict(classic_theme().items())
    blue = dict(bluetitle_theme().items())
    changed = {name for name in classic if classic[name] != blue[name]}
    assert changed == {
        "title",
        "button_key_active",
        "button_label_active",
        "searchbox_title",
        "position_indicator",
        "tag",
        "tag_key",
    }


def test_mono_attributes():
    theme = mono_theme()
    assert theme.item_selected.attr == Attr.REVERSE
    assert theme.title.attr == Attr.BOLD
    assert theme.button_inactive.attr == Attr.DIM
    assert theme.dialog.attr == Attr.NORMAL


def test_names_order():
    names = Theme.names()
    assert names[0] == "screen"
    assert names[-1] == "darrow"
    assert len(names) == len(set(names))
    assert [name for name, _ in mono_theme().items()] == list(names)


def test_select_default_is_bluetitle():
    assert select_theme(None) == (bluetitle_theme(), True)
    assert select_theme("bluetitle") == (bluetitle_theme(), True)


def test_select_named_themes():
    assert select_theme("classic") == (classic_theme(), True)
    assert select_theme("blackbg") == (blackbg_theme(), True)
    theme, use_color = select_theme("mono")
    assert use_color is False
    assert theme == mono_theme()


def test_select_unknown_leaves_blank_colours():
    theme, use_color = select_theme("bogus")
    assert use_color is True
    assert theme == Theme()