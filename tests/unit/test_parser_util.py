"""Unit tests for evman.parser.parser_util and evman.model.index."""
from __future__ import annotations

from datetime import date

import pytest

from evman.errors import EmptyIndexListError, InvalidDurationError, InvalidIndexError, ParseError
from evman.model.duration import MESSAGE_CONSTRAINTS, MESSAGE_CONSTRAINTS_RANGE
from evman.model.index import Index
from evman.parser.parser_util import MAX_INDEX, parse_duration, parse_index, parse_indexes


def _ints(indexes: list[Index]) -> list[int]:
    return [i.one_based for i in indexes]


# ---------------------------------------------------------------------------
# Index
# ---------------------------------------------------------------------------


class TestIndex:
    def test_one_and_zero_based_views(self) -> None:
        index = Index.from_one_based(3)
        assert index.one_based == 3
        assert index.zero_based == 2

    def test_from_zero_based(self) -> None:
        assert Index.from_zero_based(0) == Index.from_one_based(1)

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value: int) -> None:
        with pytest.raises(ValueError):
            Index.from_one_based(value)

    def test_str(self) -> None:
        assert str(Index(7)) == "7"


# ---------------------------------------------------------------------------
# parse_index
# ---------------------------------------------------------------------------


class TestParseIndex:
    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("  5  ", 5),
        ("42", 42),
        ("01", 1),
        (str(MAX_INDEX), MAX_INDEX),
    ])
    def test_valid(self, raw: str, expected: int) -> None:
        assert parse_index(raw).one_based == expected

    @pytest.mark.parametrize("raw", [
        "0",
        "00",
        "-1",
        "+1",
        "1.0",
        "a",
        "1a",
        "1 2",
        "",
        "   ",
        "١",
        str(MAX_INDEX + 1),
    ])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidIndexError):
            parse_index(raw)

    def test_error_names_offending_token(self) -> None:
        with pytest.raises(InvalidIndexError) as exc_info:
            parse_index(" abc ")
        assert exc_info.value.token == "abc"
        assert "'abc'" in str(exc_info.value)


# ---------------------------------------------------------------------------
# parse_indexes
# ---------------------------------------------------------------------------


class TestParseIndexes:
    def test_several(self) -> None:
        assert _ints(parse_indexes("1 2 3")) == [1, 2, 3]

    def test_any_whitespace_separates(self) -> None:
        assert _ints(parse_indexes(" 4\t5\n6 ")) == [4, 5, 6]

    def test_order_and_repeats_preserved(self) -> None:
        assert _ints(parse_indexes("3 1 3")) == [3, 1, 3]

    def test_zero_rejected(self) -> None:
        with pytest.raises(InvalidIndexError):
            parse_indexes("0")

    def test_first_invalid_token_reported(self) -> None:
        with pytest.raises(InvalidIndexError) as exc_info:
            parse_indexes("1 x 0")
        assert exc_info.value.token == "x"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_rejected(self, raw: str) -> None:
        with pytest.raises(EmptyIndexListError):
            parse_indexes(raw)

    def test_errors_are_parse_errors(self) -> None:
        with pytest.raises(ParseError):
            parse_indexes("")


# ---------------------------------------------------------------------------
# parse_duration
# ---------------------------------------------------------------------------


class TestParseDuration:
    def test_trims_input(self) -> None:
        duration = parse_duration("  1/10/2025 ")
        assert duration.start_date == date(2025, 10, 1)

    def test_format_error_message(self) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("31/4/2024")
        assert str(exc_info.value) == MESSAGE_CONSTRAINTS

    def test_range_error_message(self) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("10/2/2022-9/1/2022")
        assert str(exc_info.value) == MESSAGE_CONSTRAINTS_RANGE


# ---------------------------------------------------------------------------
# Very long digit strings
# ---------------------------------------------------------------------------


class TestOversizedIndexTokens:
    @pytest.mark.parametrize("token", [
        "1" * 5000,
        "0" * 4999 + "1",
        "0" * 4999 + "0",
        "9" * 11,
    ])
    def test_rejected_as_invalid_index(self, token: str) -> None:
        with pytest.raises(InvalidIndexError):
            parse_index(token)

    def test_zero_padded_small_value_accepted(self) -> None:
        assert parse_index("0" * 20 + "12").one_based == 12

    def test_inside_index_list(self) -> None:
        with pytest.raises(InvalidIndexError):
            parse_indexes("1 " + "7" * 5000)
