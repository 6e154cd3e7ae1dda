"""Phone book: the directory of all entries plus the top-K cache over it.

Every write goes to the directory first and is then reported to the cache.
The cache is allowed to fall behind (it is invalidated when a cached entry is
removed) and ``top()`` rebuilds it from a directory scan when that happens.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

from phonebook.cache import TopCache
from phonebook.config import Settings
from phonebook.directory import PhoneDirectory
from phonebook.errors import CacheInvalidatedError, DuplicateNameError, ParserError
from phonebook.models.imports import ImportFailure, ImportFailureKind
from phonebook.models.phone import PhoneEntry, rank_key
from phonebook.parser import normalize

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

log = structlog.get_logger()


class PhoneBook:
    """Bulgarian phone numbers in alphabetical order, with the most called on hand."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings()
        self._directory = PhoneDirectory()
        self._top: TopCache[PhoneEntry] = TopCache(rank_key, size=self._settings.top.size)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, name: str, number: str, call_count: int = 0) -> PhoneEntry:
        """Normalize ``number`` and store a new entry under ``name``.

        Raises:
            ParserError: ``number`` is not a valid Bulgarian mobile number.
            DuplicateNameError: ``name`` is already in the phone book.
        """
        entry = PhoneEntry(name=name, number=normalize(number), call_count=call_count)
        self._directory.insert(entry)
        self._top.try_update_if_valid((entry,))
        log.debug("entry_added", name=name, number=str(entry.number), call_count=call_count)
        return entry

    def remove(self, name: str) -> bool:
        """Remove ``name``. Returns False if there was no such entry."""
        removed = self._directory.remove(name)
        if removed is None:
            return False
        if self._top.contains(removed):
            self._top.invalidate()
        log.debug("entry_removed", name=name)
        return True

    def bump_call_count(self, name: str, delta: int) -> bool:
        """Add ``delta`` outgoing calls to ``name``.

        The cached copy is refreshed whether or not the cache is valid.
        Returns False if there was no such entry.
        """
        current = self._directory.get(name)
        if current is None:
            return False
        # Validate before touching the directory so a bad delta loses nothing.
        updated = current.with_calls(delta)
        self._directory.remove(name)
        self._top.update_if_present(updated)
        self._directory.insert(updated)
        log.debug("call_count_bumped", name=name, delta=delta, call_count=updated.call_count)
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, name: str) -> PhoneEntry | None:
        return self._directory.get(name)

    def top(self) -> list[PhoneEntry]:
        """Most called entries first, rebuilding the cache if it was invalidated."""
        try:
            return self._top.get_ordered()
        except CacheInvalidatedError:
            return self._top.rebuild(self._directory.iter_all())

    def print_all(self, sink: TextIO | None = None) -> None:
        """Print one entry per line in alphabetical order (stdout by default)."""
        self._directory.print_all(sink)

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def bulk_load(self, lines: Iterable[str]) -> int:
        """Add every ``name,number`` line and return how many were added.

        Lines with the wrong number of fields, invalid numbers or duplicate
        names are skipped without being reported to the caller.
        """
        delimiter = self._settings.importer.delimiter
        added = 0
        for lineno, line in enumerate(lines, start=1):
            fields = line.rstrip("\r\n").split(delimiter)
            if len(fields) != 2:
                log.debug(
                    "import_line_skipped", line=lineno, reason="field_count", fields=len(fields)
                )
                continue
            name, number = fields
            try:
                self.add(name, number)
            except (ParserError, DuplicateNameError) as exc:
                log.debug("import_line_skipped", line=lineno, reason=exc.code)
                continue
            added += 1
        return added

    def load_file(self, path: str | os.PathLike[str]) -> ImportFailure | None:
        """Import a ``name,number`` file. Returns ``None`` on success.

        A failure stops the import; entries read before it are kept.
        """
        try:
            with Path(path).open(encoding=self._settings.importer.encoding) as fh:
                added = self.bulk_load(fh)
        except FileNotFoundError as exc:
            log.warning("import_failed", path=str(path), kind=ImportFailureKind.FILE_NOT_FOUND)
            return ImportFailure(kind=ImportFailureKind.FILE_NOT_FOUND, message=str(exc))
        except OSError as exc:
            log.warning(
                "import_failed", path=str(path), kind=ImportFailureKind.IO_ERROR, exc_info=True
            )
            return ImportFailure(kind=ImportFailureKind.IO_ERROR, message=str(exc))
        except Exception as exc:
            log.warning(
                "import_failed", path=str(path), kind=ImportFailureKind.UNKNOWN, exc_info=True
            )
            return ImportFailure(kind=ImportFailureKind.UNKNOWN, message=str(exc))
        log.info("import_complete", path=str(path), added=added)
        return None
