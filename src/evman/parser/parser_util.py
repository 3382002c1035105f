"""Field parsers shared by the command parsers.

Each helper trims its input, validates it, and either returns a domain
value or raises a ``ParseError`` subclass describing the problem.
"""
from __future__ import annotations

import re
from typing import Final

from evman.errors import EmptyIndexListError, InvalidDurationError, InvalidIndexError
from evman.model.duration import Duration, DurationError
from evman.model.index import Index

_UNSIGNED_INT: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

MAX_INDEX: Final[int] = 2**31 - 1


def parse_index(raw: str) -> Index:
    """Parse *raw* into a one-based ``Index``.

    Leading and trailing whitespace is ignored.  The remaining text must
    be an unsigned decimal integer between 1 and ``MAX_INDEX``.

    Raises
    ------
    InvalidIndexError
        If the token is signed, non-numeric, zero, or too large.
    """
    token = raw.strip()
    if not _UNSIGNED_INT.fullmatch(token):
        raise InvalidIndexError(token)
    digits = token.lstrip("0") or "0"
    if len(digits) > len(str(MAX_INDEX)):
        raise InvalidIndexError(token)
    value = int(digits)
    if not 0 < value <= MAX_INDEX:
        raise InvalidIndexError(token)
    return Index.from_one_based(value)


def parse_indexes(raw: str) -> list[Index]:
    """Parse whitespace-separated indexes, keeping order and repeats.

    Raises
    ------
    InvalidIndexError
        For the first token that is not a valid index.
    EmptyIndexListError
        If *raw* holds no tokens at all.
    """
    indexes = [parse_index(token) for token in raw.split()]
    if not indexes:
        raise EmptyIndexListError()
    return indexes


def parse_duration(raw: str) -> Duration:
    """Parse *raw* into a ``Duration``.

    Raises
    ------
    InvalidDurationError
        Carrying the duration's format or range constraint message.
    """
    try:
        return Duration.parse(raw.strip())
    except DurationError as exc:
        raise InvalidDurationError(str(exc)) from exc
