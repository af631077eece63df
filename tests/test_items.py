import pytest

from menukit.lxdialog.items import MAX_ITEM_STR, ItemList


def _filled():
    items = ItemList()
    for text in ("alpha", "beta", "gamma"):
        items.make(text)
        items.set_data(text.upper())
    return items


def test_make_sets_current_and_order():
    items = _filled()
    assert [item.text for item in items] == ["alpha", "beta", "gamma"]
    assert items.current.text == "gamma"
    assert len(items) == 3


def test_make_truncates_long_text():
    items = ItemList()
    item = items.make("x" * 500)
    assert len(item.text) == MAX_ITEM_STR


def test_add_str_appends_and_truncates():
    items = ItemList()
    items.make("[*]")
    items.add_str(" Feature")
    assert items.current.text == "[*] Feature"
    items.add_str("y" * 400)
    assert len(items.current.text) == MAX_ITEM_STR
    assert items.current.text.startswith("[*] Feature")


def test_tag_data_selected():
    items = ItemList()
    items.make("entry")
    items.set_tag("t")
    items.set_data({"key": "value"})
    items.set_selected(1)
    assert items.is_tag("t")
    assert not items.is_tag("m")
    assert items.current.data == {"key": "value"}
    assert items.current.selected is True


def test_select_and_index_round_trip():
    items = _filled()
    for n in range(len(items)):
        items.select(n)
        assert items.index() == n
        assert items.current is items[n]


def test_select_out_of_range_clears_cursor():
    items = _filled()
    items.select(len(items))
    assert items.current is None
    assert items.index() == 0
    with pytest.raises(LookupError):
        items.is_tag("t")


def test_activate_selected_finds_first():
    items = _filled()
    items.select(1)
    items.set_selected(True)
    items.select(2)
    items.set_selected(True)
    items.select(0)
    assert items.activate_selected() is True
    assert items.current.text == "beta"


def test_activate_selected_without_selection():
    items = _filled()
    assert items.activate_selected() is False
    assert items.current is None


def test_reset_empties():
    items = _filled()
    items.reset()
    assert len(items) == 0
    assert list(items) == []
    with pytest.raises(LookupError):
        items.add_str("more")