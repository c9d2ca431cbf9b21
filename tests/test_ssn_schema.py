"""Tests for the frozen IdentityNumber model and its derived accessors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.ssn.schema import ERROR_MESSAGES, MONTH_NAMES, IdentityNumber, ParseError, ParseErrorKind


def _ssn(**overrides: object) -> IdentityNumber:
    fields: dict[str, object] = {"year": 1981, "month": 5, "day": 4, "code": "8303"}
    fields.update(overrides)
    return IdentityNumber(**fields)  # type: ignore[arg-type]


def test_month_names_cover_the_year_in_order() -> None:
    assert len(MONTH_NAMES) == 12
    assert MONTH_NAMES[0] == "January"
    assert MONTH_NAMES[-1] == "December"
    assert [_ssn(month=m).month_name for m in (3, 9)] == ["March", "September"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"month": 0},
        {"month": 13},
        {"day": 0},
        {"day": 32},
        {"code": "830"},
        {"code": "83033"},
        {"year": 1814},
        {"year": 2015},
    ],
)
def test_out_of_range_fields_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        _ssn(**overrides)


def test_unknown_fields_are_forbidden() -> None:
    with pytest.raises(ValueError):
        _ssn(separator="-")


def test_identity_number_is_frozen() -> None:
    ssn = _ssn()
    with pytest.raises(ValidationError):
        ssn.year = 1982  # type: ignore[misc]


def test_value_equality_and_hashing() -> None:
    assert _ssn() == _ssn()
    assert _ssn() != _ssn(code="8304")
    assert len({_ssn(), _ssn()}) == 1


@pytest.mark.parametrize(
    ("year", "separator"),
    [(1815, "+"), (1899, "+"), (1914, "+"), (1915, "-"), (1999, "-"), (2014, "-")],
)
def test_separator_is_derived_from_year(year: int, separator: str) -> None:
    assert _ssn(year=year).separator == separator


def test_str_formats_canonical_form() -> None:
    assert str(_ssn(year=1905, month=1, day=9, code="0042")) == "050109+0042"
    assert str(_ssn(year=2003, month=12, day=31)) == "031231-8303"


def test_every_error_kind_has_a_message() -> None:
    assert set(ERROR_MESSAGES) == set(ParseErrorKind)
    error = ParseError.of(ParseErrorKind.invalid_length)
    assert error.kind == "invalid_length"
    assert error.message == "Social security number has to be 11 characters"
