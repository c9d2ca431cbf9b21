"""Validate a sequence of identity numbers and report what was rejected.

Only error kinds and positions are logged; raw identity numbers never reach the logs.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from src.ssn.parser import parse
from src.ssn.schema import IdentityNumber, ParseError, ParseErrorKind, Rejected

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchReport:
    """Outcome of `parse_many`, in input order."""

    parsed: tuple[IdentityNumber, ...]
    rejected: tuple[tuple[int, ParseError], ...]

    @property
    def total(self) -> int:
        return len(self.parsed) + len(self.rejected)

    def counts_by_kind(self) -> dict[ParseErrorKind, int]:
        return dict(Counter(error.kind for _, error in self.rejected))


def parse_many(values: Iterable[str]) -> BatchReport:
    """Parse every value independently; one bad value never stops the batch."""

    parsed: list[IdentityNumber] = []
    rejected: list[tuple[int, ParseError]] = []

    for index, value in enumerate(values):
        result = parse(value)
        if isinstance(result, Rejected):
            logger.debug("rejected index=%d kind=%s", index, result.error.kind)
            rejected.append((index, result.error))
        else:
            parsed.append(result.value)

    report = BatchReport(parsed=tuple(parsed), rejected=tuple(rejected))
    logger.info(
        "batch total=%d parsed=%d rejected=%d",
        report.total,
        len(report.parsed),
        len(report.rejected),
    )
    return report
