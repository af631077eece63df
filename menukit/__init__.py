"""Configuration-menu building blocks: a string preprocessor, a file registry and curses dialogs."""

__version__ = "0.1.0"
__all__ = ["files", "preprocess", "lxdialog"]