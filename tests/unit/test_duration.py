"""Unit tests for evman.model.duration — parsing, ordering, and rendering."""
from __future__ import annotations

from datetime import date

import pytest

from evman.model.duration import (
    MESSAGE_CONSTRAINTS,
    MESSAGE_CONSTRAINTS_RANGE,
    Duration,
    DurationError,
    InvalidDurationFormatError,
    InvalidDurationRangeError,
)


# ---------------------------------------------------------------------------
# Single dates
# ---------------------------------------------------------------------------


class TestSingleDate:
    def test_collapses_to_same_start_and_end(self) -> None:
        duration = Duration.parse("1/10/2025")
        assert duration.start_date == duration.end_date == date(2025, 10, 1)
        assert duration.is_single_day

    @pytest.mark.parametrize("text", ["1/10/2025", "9/1/2022", "29/2/2024", "31/12/1999"])
    def test_renders_both_bounds(self, text: str) -> None:
        assert str(Duration.parse(text)) == f"{text} - {text}"

    def test_zero_padded_input_renders_canonical(self) -> None:
        assert str(Duration.parse("01/02/2023")) == "1/2/2023 - 1/2/2023"


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


class TestRange:
    @pytest.mark.parametrize("text", [
        "9/1/2022-10/2/2022",
        "9/1/2022 - 10/2/2022",
        "9/1/2022 -10/2/2022",
        "9/1/2022-   10/2/2022",
    ])
    def test_whitespace_around_hyphen(self, text: str) -> None:
        duration = Duration.parse(text)
        assert duration.start_date == date(2022, 1, 9)
        assert duration.end_date == date(2022, 2, 10)

    def test_equal_bounds_allowed(self) -> None:
        duration = Duration.parse("5/5/2025-5/5/2025")
        assert duration.is_single_day

    def test_renders_canonical(self) -> None:
        assert str(Duration.parse("9/1/2022  -  10/2/2022")) == "9/1/2022 - 10/2/2022"

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(InvalidDurationRangeError) as exc_info:
            Duration.parse("10/2/2022-9/1/2022")
        assert str(exc_info.value) == MESSAGE_CONSTRAINTS_RANGE

    def test_inverted_by_year(self) -> None:
        with pytest.raises(InvalidDurationRangeError):
            Duration.parse("1/1/2025-31/12/2024")


# ---------------------------------------------------------------------------
# Format errors
# ---------------------------------------------------------------------------


class TestFormatErrors:
    @pytest.mark.parametrize("text", [
        "31/4/2024",
        "29/2/2023",
        "0/1/2024",
        "1/13/2024",
        "1/1/24",
        "1/1/20245",
        "123/1/2024",
        "2024-01-01",
        "1-1-2024",
        "",
        " 1/1/2024",
        "1/1/2024-",
        "1/1/2024-2/1/2024-3/1/2024",
        "1/1/2024 to 2/1/2024",
        "30/2/2024-1/3/2024",
    ])
    def test_rejected_with_format_message(self, text: str) -> None:
        with pytest.raises(InvalidDurationFormatError) as exc_info:
            Duration.parse(text)
        assert str(exc_info.value) == MESSAGE_CONSTRAINTS

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Duration.parse("nonsense")
        assert issubclass(InvalidDurationRangeError, DurationError)


# ---------------------------------------------------------------------------
# is_valid_duration
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text, expected", [
    ("1/10/2025", True),
    ("9/1/2022-10/2/2022", True),
    ("31/4/2024", False),
    ("10/2/2022-9/1/2022", False),
    ("abc", False),
])
def test_is_valid_duration(text: str, expected: bool) -> None:
    assert Duration.is_valid_duration(text) is expected


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------


class TestValueSemantics:
    def test_equality_is_structural(self) -> None:
        assert Duration.parse("1/1/2024-2/1/2024") == Duration.parse("01/01/2024 - 02/01/2024")
        assert Duration.parse("1/1/2024") != Duration.parse("1/1/2024-2/1/2024")

    def test_hash_is_structural(self) -> None:
        a = Duration.parse("1/1/2024")
        b = Duration(date(2024, 1, 1), date(2024, 1, 1))
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_direct_construction_checks_order(self) -> None:
        with pytest.raises(InvalidDurationRangeError):
            Duration(date(2024, 2, 1), date(2024, 1, 1))

    def test_immutable(self) -> None:
        duration = Duration.parse("1/1/2024")
        with pytest.raises((AttributeError, TypeError)):
            duration.start_date = date(2000, 1, 1)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("space", ["\u3000", "\u00a0", "\u2003"])
def test_non_ascii_whitespace_around_hyphen_rejected(space: str) -> None:
    with pytest.raises(InvalidDurationFormatError):
        Duration.parse(f"1/1/2024{space}-{space}2/1/2024")


@pytest.mark.parametrize("text", ["1/1/0000", "1/1/0000-1/1/2024"])
def test_year_zero_rejected(text: str) -> None:
    with pytest.raises(InvalidDurationFormatError):
        Duration.parse(text)


def test_year_one_accepted_and_padded() -> None:
    assert str(Duration.parse("1/1/0001")) == "1/1/0001 - 1/1/0001"
