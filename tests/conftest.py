"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import structlog

from phonebook.config import LoggingSettings, Settings
from phonebook.log_setup import setup_logging
from phonebook.models.phone import NormalizedPhoneNumber, PhoneEntry
from phonebook.registry import PhoneBook


def _make_entry(name: str, call_count: int = 0, number: str = "+359878123456") -> PhoneEntry:
    return PhoneEntry(
        name=name, number=NormalizedPhoneNumber(normalized=number), call_count=call_count
    )


@pytest.fixture()
def make_entry() -> Callable[..., PhoneEntry]:
    """Factory for entries built without going through the parser."""
    return _make_entry


@pytest.fixture()
def settings() -> Settings:
    return Settings(top={"size": 5})


@pytest.fixture()
def phone_book(settings: Settings) -> PhoneBook:
    return PhoneBook(settings)


@pytest.fixture(autouse=True)
def _configure_logging():
    """Send log output to stderr so it never mixes with printed entries."""
    setup_logging(LoggingSettings(level="DEBUG", format="text"))
    yield
    structlog.reset_defaults()
