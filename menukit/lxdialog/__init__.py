"""Curses dialog boxes, their themes and layout helpers, and the item list they display."""

__all__ = [
    "theme",
    "text",
    "screen",
    "items",
    "yesno",
    "inputbox",
    "checklist",
    "menubox",
    "textbox",
]