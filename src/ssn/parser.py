"""Strict parser for `YYMMDD[-|+]XXXX` identity numbers.

Checks run left to right and the first failure decides the error kind:
    length, separator, year digits, month, day.
The trailing four characters are carried verbatim; no checksum is computed.
"""

from __future__ import annotations

from typing import cast

from src.ssn.schema import (
    IdentityNumber,
    Parsed,
    ParseError,
    ParseErrorKind,
    ParseResult,
    Rejected,
    Separator,
)

SSN_LENGTH = 11
SEPARATOR_INDEX = 6
SEPARATORS: frozenset[str] = frozenset({"-", "+"})

# Two-digit years above this fall in the earlier century of the separator's band.
CENTURY_THRESHOLD = 14


class IdentityNumberError(ValueError):
    """Raised by `parse_or_raise` when the input is not a valid identity number."""

    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(error.message)


def _two_digits(text: str) -> int | None:
    # `isdigit` alone accepts characters like "²"; only ASCII 0-9 are valid here.
    if len(text) != 2 or not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def resolve_century(short_year: int, separator: Separator) -> int:
    """Map a two-digit year and its separator to a four-digit year.

    `-`: 15-99 -> 1915-1999, 00-14 -> 2000-2014.
    `+`: 15-99 -> 1815-1899, 00-14 -> 1900-1914.
    """

    if not 0 <= short_year <= 99:
        raise ValueError(f"short_year must be in 0..99, got {short_year}")
    if separator not in SEPARATORS:
        raise ValueError(f"separator must be '-' or '+', got {separator!r}")

    base = 1900 if separator == "-" else 1800
    if short_year > CENTURY_THRESHOLD:
        return base + short_year
    return base + 100 + short_year


def _reject(kind: ParseErrorKind) -> Rejected:
    return Rejected(error=ParseError.of(kind))


def parse(text: str) -> ParseResult:
    """Parse an identity number string.

    Returns:
        `Parsed` with the decoded record, or `Rejected` with the first failing check.
        Never raises for string input.
    """

    value = text or ""
    if len(value) != SSN_LENGTH:
        return _reject(ParseErrorKind.invalid_length)

    separator = value[SEPARATOR_INDEX]
    if separator not in SEPARATORS:
        return _reject(ParseErrorKind.invalid_separator)

    short_year = _two_digits(value[0:2])
    if short_year is None:
        return _reject(ParseErrorKind.invalid_year)
    year = resolve_century(short_year, cast(Separator, separator))

    month = _two_digits(value[2:4])
    if month is None or not 1 <= month <= 12:
        return _reject(ParseErrorKind.invalid_month)

    day = _two_digits(value[4:6])
    if day is None or not 1 <= day <= 31:
        return _reject(ParseErrorKind.invalid_day)

    return Parsed(value=IdentityNumber(year=year, month=month, day=day, code=value[7:11]))


def parse_or_raise(text: str) -> IdentityNumber:
    """Parse an identity number, raising `IdentityNumberError` on invalid input."""

    result = parse(text)
    if isinstance(result, Rejected):
        raise IdentityNumberError(result.error)
    return result.value
