from __future__ import annotations

from phonebook.cache import TopCache
from phonebook.config import Settings
from phonebook.directory import PhoneDirectory
from phonebook.errors import (
    CacheInvalidatedError,
    CountryCodeError,
    DuplicateNameError,
    ErrorCode,
    InvalidNumberError,
    OperatorCodeError,
    ParserError,
)
from phonebook.models import ImportFailure, ImportFailureKind, NormalizedPhoneNumber, PhoneEntry
from phonebook.log_setup import setup_logging
from phonebook.parser import normalize
from phonebook.registry import PhoneBook

__all__ = [
    "PhoneBook",
    "PhoneDirectory",
    "TopCache",
    "Settings",
    "setup_logging",
    "normalize",
    # models
    "NormalizedPhoneNumber",
    "PhoneEntry",
    "ImportFailure",
    "ImportFailureKind",
    # errors
    "ErrorCode",
    "ParserError",
    "CountryCodeError",
    "OperatorCodeError",
    "InvalidNumberError",
    "DuplicateNameError",
    "CacheInvalidatedError",
]
