"""Unit-specific fixtures (no I/O)."""

from __future__ import annotations

import pytest

from phonebook.cache import TopCache
from phonebook.directory import PhoneDirectory
from phonebook.models.phone import PhoneEntry, rank_key


@pytest.fixture()
def top_cache() -> TopCache[PhoneEntry]:
    return TopCache(rank_key, size=3)


@pytest.fixture()
def directory() -> PhoneDirectory:
    return PhoneDirectory()
