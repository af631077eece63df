"""Registry of the configuration source files that have been opened."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class SourceFile:
    """A configuration source file known to the parser."""

    name: str


class FileRegistry:
    """Keeps one SourceFile per distinct name, newest first."""

    def __init__(self) -> None:
        self._files: list[SourceFile] = []

    def lookup(self, name: str) -> SourceFile:
        """Return the entry for ``name``, adding it if it is not yet known."""
        for source in self._files:
            if source.name == name:
                return source
        source = SourceFile(name)
        self._files.insert(0, source)
        return source

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(list(self._files))

    def __len__(self) -> int:
        return len(self._files)