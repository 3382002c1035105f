"""Event duration value object.

A ``Duration`` is an inclusive range of calendar dates.  It is written
either as a single date ``d/M/yyyy`` or as a range
``d/M/yyyy-d/M/yyyy`` (whitespace around the hyphen is allowed)::

    >>> str(Duration.parse("1/10/2025"))
    '1/10/2025 - 1/10/2025'
    >>> str(Duration.parse("9/1/2022 - 10/2/2022"))
    '9/1/2022 - 10/2/2022'

Dates are resolved strictly: ``31/4/2024`` is rejected rather than
rolled over into May.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final

MESSAGE_CONSTRAINTS: Final[str] = (
    "Event duration must either be in the format of "
    'd/M/yyyy or d/M/yyyy-d/M/yyyy. E.g. "1/10/2025" or "9/1/2022-10/2/2022".'
    "Where each date is a valid date."
)
MESSAGE_CONSTRAINTS_RANGE: Final[str] = (
    "Event duration of the format d/M/yyyy-d/M/yyyy, "
    "should not have the first date after the second date."
)

_DATE: Final[str] = r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})"
SINGLE_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(_DATE)
DATE_RANGE_PATTERN: Final[re.Pattern[str]] = re.compile(_DATE + r"\s*-\s*" + _DATE, re.ASCII)


class DurationError(ValueError):
    """Base class for invalid durations."""


class InvalidDurationFormatError(DurationError):
    """The text is not one of the two accepted shapes, or a date is not real."""

    def __init__(self, message: str = MESSAGE_CONSTRAINTS) -> None:
        super().__init__(message)


class InvalidDurationRangeError(DurationError):
    """The start date falls after the end date."""

    def __init__(self, message: str = MESSAGE_CONSTRAINTS_RANGE) -> None:
        super().__init__(message)


def _to_date(day: str, month: str, year: str) -> date:
    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        raise InvalidDurationFormatError() from exc


def _format_date(value: date) -> str:
    return f"{value.day}/{value.month}/{value.year:04d}"


@dataclass(frozen=True, slots=True)
class Duration:
    """An inclusive ``[start_date, end_date]`` range of calendar dates.

    Parameters
    ----------
    start_date:
        First day of the range.
    end_date:
        Last day of the range; must not precede ``start_date``.

    Raises
    ------
    InvalidDurationRangeError
        If ``start_date`` is after ``end_date``.
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not is_valid_date_range(self.start_date, self.end_date):
            raise InvalidDurationRangeError()

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Build a ``Duration`` from its textual form.

        Raises
        ------
        InvalidDurationFormatError
            If *text* matches neither accepted shape or names a date
            that does not exist.
        InvalidDurationRangeError
            If the range's first date is after its second.
        """
        single = SINGLE_DATE_PATTERN.fullmatch(text)
        if single is not None:
            day = _to_date(*single.groups())
            return cls(day, day)

        ranged = DATE_RANGE_PATTERN.fullmatch(text)
        if ranged is None:
            raise InvalidDurationFormatError()
        groups = ranged.groups()
        return cls(_to_date(*groups[:3]), _to_date(*groups[3:]))

    @staticmethod
    def is_valid_duration(text: str) -> bool:
        """Return True if *text* parses into a valid ``Duration``."""
        try:
            Duration.parse(text)
        except DurationError:
            return False
        return True

    @property
    def is_single_day(self) -> bool:
        return self.start_date == self.end_date

    def __str__(self) -> str:
        return f"{_format_date(self.start_date)} - {_format_date(self.end_date)}"


def is_valid_date_range(start_date: date, end_date: date) -> bool:
    """Return True if *start_date* is not after *end_date*."""
    return start_date <= end_date
