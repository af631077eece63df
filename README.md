# menukit

Building blocks for text-mode configuration menus:

- `menukit.preprocess` expands `$(...)` references in configuration text.
  It has simple, recursive and appending variables, user functions
  that take numbered arguments (`$(1)`, `$(2)`, ...), lookups in the
  environment, and the built-in functions `error-if`, `filename`, `info`,
  `lineno`, `shell` and `warning-if`.
- `menukit.files` keeps a registry of source files, with one entry per name.
- `menukit.lxdialog` holds curses dialog boxes (menu, checklist, input
  box, yes/no box, text pager), their colour themes, and the pure-logic
  helpers behind them.

The package needs only the standard library and Python 3.10 or later.

## Installing

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Expanding variables

```python
from menukit.preprocess import Preprocessor, VariableFlavor

pp = Preprocessor("Kconfig", 1, {"ARCH": "riscv"})
pp.variable_add("greet", "hello $(1)", VariableFlavor.RECURSIVE)
pp.expand_string("$(greet,$(ARCH))")          # "hello riscv"
```

Undefined names expand to an empty string, and a `$` that is not
followed by `(` stands for itself. `expand_dollar` and `expand_one_token`
return the expansion together with the text that remains after it.

`VariableFlavor.SIMPLE` expands the value when it is assigned;
`VariableFlavor.RECURSIVE` expands it each time it is used;
`VariableFlavor.APPEND` adds to an existing variable, keeping its flavor,
or creates a recursive one. `variable_all_del` forgets every variable.

The preprocessor remembers each environment variable that an expansion
read. `env_write_dep(stream, name)` writes them to `stream` as Makefile
rules that make `name` depend on `FORCE` when a value has changed, then
forgets them.

A variable that refers to itself, an unterminated reference, too many
arguments, a wrong number of arguments to a built-in function, or
`$(error-if,y,message)` raises `PreprocessError`, which carries the
file name and line number the preprocessor was given. `$(shell,command)`
runs the command through the shell and returns its output with line
breaks replaced by spaces.

## Source files

```python
from menukit.files import FileRegistry

registry = FileRegistry()
first = registry.lookup("Kconfig")
assert registry.lookup("Kconfig") is first
```

Iterating over a `FileRegistry` yields its `SourceFile` entries, newest
first.

## Dialog boxes

`menukit.lxdialog.screen.init_dialog(stdscr, backtitle, theme_name)`
takes a curses screen, an optional back title and a theme name (`mono`,
`classic`, `blackbg` or `bluetitle`; by default the `MENUCONFIG_COLOR`
environment variable) and returns a `DialogScreen`. It raises
`DisplayTooSmall` if the terminal is smaller than 19 lines by 80 columns.
Call `DialogScreen.end()` to restore the cursor and leave curses mode.

The dialogs draw on that screen and raise `DisplayTooSmall` when it is
too small for them:

- `yesno.dialog_yesno(screen, title, prompt, height, width)` returns 0
  for Yes, 1 for No, or `KEY_ESC`.
- `inputbox.dialog_inputbox(screen, title, prompt, height, width, init)`
  returns the button (0 Ok, 1 Help, or `KEY_ESC`) and the entered text.
- `menubox.dialog_menu(screen, items, title, prompt, selected, scroll)`
  returns a result code and the scroll offset to pass in next time.
- `checklist.dialog_checklist(screen, items, title, prompt, height, width, list_height)`
  returns 0 for Select, 1 for Help, or `KEY_ESC`, and marks the chosen
  entry selected.
- `textbox.dialog_textbox(screen, title, text, ...)` returns the key that
  closed it and the vertical and horizontal scroll positions.

Menus and checklists show the entries of an `items.ItemList`, each a
`DialogItem` with text, a one-letter tag, caller data and a selected flag.

The editing, scrolling and paging logic lives in plain classes and
functions that work without a terminal: `LineEditor`, `MenuCursor`,
`initial_position`, `find_hotkey`, `checklist_columns`, `TextPager`,
`ItemList`, and in `menukit.lxdialog.text` the layout helpers
`first_alpha`, `autowrap`, `subtitle_line` and `title_span`. The themes
are in `menukit.lxdialog.theme` (`mono_theme`, `classic_theme`,
`blackbg_theme`, `bluetitle_theme`, `select_theme`).

## What it does not do

menukit does not read configuration files, hold configuration symbols or
evaluate their dependencies, and does not save a configuration. It has no
command-line program: the dialogs are pieces for a program that builds its
own menus and decides what each answer means.

## Running the tests

```
pytest
```