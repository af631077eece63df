from menukit.files import FileRegistry, SourceFile


def test_lookup_returns_same_object_for_same_name():
    registry = FileRegistry()
    first = registry.lookup("Kconfig")
    second = registry.lookup("Kconfig")
    assert first is second
    assert first.name == "Kconfig"


def test_distinct_names_give_distinct_entries():
    registry = FileRegistry()
    a = registry.lookup("a/Kconfig")
    b = registry.lookup("b/Kconfig")
    assert a is not b
    assert (a.name, b.name) == ("a/Kconfig", "b/Kconfig")


def test_len_counts_unique_names():
    registry = FileRegistry()
    for name in ["x", "y", "x", "z", "y"]:
        registry.lookup(name)
    assert len(registry) == 3


def test_iteration_is_newest_first():
    registry = FileRegistry()
    registry.lookup("first")
    registry.lookup("second")
    registry.lookup("first")
    assert [f.name for f in registry] == ["second", "first"]


def test_empty_registry():
    registry = FileRegistry()
    assert len(registry) == 0
    assert list(registry) == []


def test_entries_are_source_files():
    registry = FileRegistry()
    entry = registry.lookup("main")
    assert isinstance(entry, SourceFile) and entry.name == "main"