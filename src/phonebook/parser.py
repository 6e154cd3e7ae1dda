"""Bulgarian mobile number parser.

A normalized number looks like ``+359878123456``:

- ``+359`` is the country code
- the next 2 digits are the operator code: 87, 88 or 89
- the next digit is between 2 and 9
- the last 6 digits are between 0 and 9

Two other country-code spellings are accepted on input: ``0`` in place of
``+359`` (``0878123456``) and ``00`` in place of ``+`` (``00359878123456``).

Each rule consumes a prefix of whatever the previous rule left over and the
first rule that fails decides the error. On success the canonical form is
``+359`` followed by the last 9 characters of the raw input, regardless of
which country-code spelling was used.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from phonebook.errors import (
    CountryCodeError,
    InvalidNumberError,
    OperatorCodeError,
    ParserError,
)
from phonebook.models.phone import NormalizedPhoneNumber

COUNTRY_PREFIX = "+359"
NATIONAL_LENGTH = 9


@dataclass(frozen=True, slots=True)
class _Rule:
    pattern: re.Pattern[str]
    error: type[ParserError]
    message: str
    whole: bool = False  # must consume the remainder entirely

    def consume(self, remainder: str) -> int | None:
        """Return how many characters matched, or None on failure."""
        match = self.pattern.fullmatch(remainder) if self.whole else self.pattern.match(remainder)
        return match.end() if match else None


_RULES: tuple[_Rule, ...] = (
    _Rule(
        re.compile(r"\+359|00359|0(?!0)"),
        CountryCodeError,
        "expected +359, 00359 or a single leading 0",
    ),
    _Rule(
        re.compile(r"8[7-9]"),
        OperatorCodeError,
        "operator code must be 87, 88 or 89",
    ),
    _Rule(
        re.compile(r"[2-9][0-9]{6}"),
        InvalidNumberError,
        "subscriber number must be 7 digits starting with 2-9",
        # No trailing newline allowance: the remainder must be exactly 7 digits.
        whole=True,
    ),
)


def validate(raw: str) -> None:
    """Raise the ``ParserError`` of the first rule ``raw`` violates."""
    start = 0
    for rule in _RULES:
        consumed = rule.consume(raw[start:])
        if consumed is None:
            raise rule.error(raw, rule.message)
        start += consumed


def normalize(raw: str) -> NormalizedPhoneNumber:
    """Validate ``raw`` and return its canonical form.

    Raises:
        CountryCodeError, OperatorCodeError, InvalidNumberError
    """
    validate(raw)
    return NormalizedPhoneNumber(normalized=COUNTRY_PREFIX + raw[-NATIONAL_LENGTH:])
