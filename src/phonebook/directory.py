"""Name-keyed store of every phone entry, iterated alphabetically."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from phonebook.errors import DuplicateNameError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from phonebook.models.phone import PhoneEntry


class PhoneDirectory:
    """Insert-only mapping from name to entry.

    An existing name is never overwritten; updating an entry means removing
    it and inserting the replacement.
    """

    def __init__(self) -> None:
        self._entries: dict[str, PhoneEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[PhoneEntry]:
        return self.iter_all()

    def insert(self, entry: PhoneEntry) -> PhoneEntry:
        """Store ``entry``. Raises ``DuplicateNameError`` if the name is taken."""
        if entry.name in self._entries:
            raise DuplicateNameError(entry.name)
        self._entries[entry.name] = entry
        return entry

    def get(self, name: str) -> PhoneEntry | None:
        return self._entries.get(name)

    def remove(self, name: str) -> PhoneEntry | None:
        """Remove and return the entry stored under ``name``, if any."""
        return self._entries.pop(name, None)

    def iter_all(self) -> Iterator[PhoneEntry]:
        """Fresh traversal in ascending name order."""
        for name in sorted(self._entries):
            yield self._entries[name]

    def print_all(self, sink: TextIO | None = None) -> None:
        out = sink if sink is not None else sys.stdout
        for entry in self.iter_all():
            print(entry, file=out)
