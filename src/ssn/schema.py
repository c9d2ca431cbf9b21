"""Identity number schema (Pydantic models and parse result types).

`IdentityNumber` is the only record the parser produces. It is frozen and re-validates its own
ranges, so a half-valid record cannot exist even when built directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Separator = Literal["-", "+"]

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class ParseErrorKind(StrEnum):
    """Which validation step rejected the input."""

    invalid_length = "invalid_length"
    invalid_separator = "invalid_separator"
    invalid_year = "invalid_year"
    invalid_month = "invalid_month"
    invalid_day = "invalid_day"


ERROR_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.invalid_length: "Social security number has to be 11 characters",
    ParseErrorKind.invalid_separator: "Separator has to be - or +",
    ParseErrorKind.invalid_year: "Year has to be two digits",
    ParseErrorKind.invalid_month: "Month has to be between 1 and 12",
    ParseErrorKind.invalid_day: "Day has to be between 1 and 31",
}


class ParseError(BaseModel):
    """A typed parse failure."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ParseErrorKind
    message: str

    @classmethod
    def of(cls, kind: ParseErrorKind) -> ParseError:
        return cls(kind=kind, message=ERROR_MESSAGES[kind])


class IdentityNumber(BaseModel):
    """A decoded identity number.

    `year` is the fully resolved four-digit year. `day` is not cross-checked against the month, so
    `310231-0000` decodes to February 31st.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(ge=1815, le=2014)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    code: str = Field(min_length=4, max_length=4)

    @property
    def month_name(self) -> str:
        """English month name, e.g. `May` for month 5."""

        return MONTH_NAMES[self.month - 1]

    @property
    def short_year(self) -> int:
        return self.year % 100

    @property
    def separator(self) -> Separator:
        """The separator the resolved year was encoded with.

        `-` covers 1915-2014 and `+` covers 1815-1914, so the mapping back is unambiguous.
        """

        return "+" if self.year <= 1914 else "-"

    def __str__(self) -> str:
        return f"{self.short_year:02d}{self.month:02d}{self.day:02d}{self.separator}{self.code}"


@dataclass(frozen=True)
class Parsed:
    """Successful parse carrying the decoded record."""

    value: IdentityNumber
    ok: Literal[True] = True


@dataclass(frozen=True)
class Rejected:
    """Failed parse carrying only the error, never a partial record."""

    error: ParseError
    ok: Literal[False] = False


ParseResult = Parsed | Rejected
