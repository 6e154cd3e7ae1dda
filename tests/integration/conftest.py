"""Integration test fixtures: a populated phone book and an import file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

    from phonebook.registry import PhoneBook

SAMPLE_LINES: list[tuple[str, str]] = [
    ("foo", "+359878123456"),
    ("incorrect", "009878123456"),
    ("bar", "+359878223456"),
    ("baz", "+359878423456"),
    ("wrong", "++359878123456"),
    ("hello", "+359878121456"),
    ("there", "+359878129456"),
]


@pytest.fixture()
def sample_lines() -> list[tuple[str, str]]:
    """name,number pairs from a typical export; two numbers are invalid."""
    return list(SAMPLE_LINES)


@pytest.fixture()
def numbers_file(tmp_path: Path) -> Path:
    """CSV import file with no trailing newline, two invalid numbers and one bad line."""
    path = tmp_path / "numbers.csv"
    lines = [f"{name},{number}" for name, number in SAMPLE_LINES] + ["x,y,z"]
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture()
def ranked_book(phone_book: PhoneBook) -> PhoneBook:
    """Eight entries with distinct call counts, 10 through 80."""
    names = ["ana", "boris", "cveta", "dimo", "elena", "filip", "gergana", "hristo"]
    for i, name in enumerate(names):
        phone_book.add(name, f"08782{i}0000", call_count=(i + 1) * 10)
    return phone_book
