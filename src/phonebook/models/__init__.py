from __future__ import annotations

from phonebook.models.imports import ImportFailure, ImportFailureKind
from phonebook.models.phone import INT64_MAX, NormalizedPhoneNumber, PhoneEntry, rank_key

__all__ = [
    # phone
    "NormalizedPhoneNumber",
    "PhoneEntry",
    "rank_key",
    "INT64_MAX",
    # imports
    "ImportFailure",
    "ImportFailureKind",
]
