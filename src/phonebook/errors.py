"""Error types raised by the phone book.

There are three independent families and they never share a base class:

- ``ParserError`` for malformed phone numbers, one subclass per positional
  rule (country code, operator code, subscriber number).
- ``DuplicateNameError`` when the directory already holds the name.
- ``CacheInvalidatedError`` when the top cache has to be rebuilt before it
  can be read.

All of them are recoverable. Import failures are not exceptions at all; see
``phonebook.models.imports.ImportFailure``.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    COUNTRY_CODE_INVALID = "COUNTRY_CODE_INVALID"
    OPERATOR_CODE_INVALID = "OPERATOR_CODE_INVALID"
    NUMBER_INVALID = "NUMBER_INVALID"
    NAME_ALREADY_EXISTS = "NAME_ALREADY_EXISTS"
    CACHE_INVALIDATED = "CACHE_INVALIDATED"


class ParserError(ValueError):
    """Base class for phone numbers rejected by the parser."""

    code: ErrorCode
    recoverable = True

    def __init__(self, raw: str, message: str) -> None:
        super().__init__(f"{self.code}: {message} ({raw!r})")
        self.raw = raw
        self.message = message


class CountryCodeError(ParserError):
    code = ErrorCode.COUNTRY_CODE_INVALID


class OperatorCodeError(ParserError):
    code = ErrorCode.OPERATOR_CODE_INVALID


class InvalidNumberError(ParserError):
    code = ErrorCode.NUMBER_INVALID


class DuplicateNameError(KeyError):
    code = ErrorCode.NAME_ALREADY_EXISTS
    recoverable = True

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"{self.code}: an entry named {self.name!r} already exists"


class CacheInvalidatedError(RuntimeError):
    """Raised on reads of an invalidated cache. The next rebuild clears it."""

    code = ErrorCode.CACHE_INVALIDATED
    recoverable = True

    def __init__(self) -> None:
        super().__init__(f"{self.code}: cache must be rebuilt before it can be read")
