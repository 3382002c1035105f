"""Argument tokenizer: splits a raw argument string into prefixed fields.

Given an argument string such as ``"p/1 2 3 e/2"`` and the prefixes
``p/`` and ``e/``, the tokenizer produces an ``ArgumentMultimap`` that
maps each prefix to the list of values that followed it::

    p/ -> ["1 2 3"]
    e/ -> ["2"]

A marker only counts when it starts a word, i.e. it sits at the very
start of the input or right after whitespace.  ``"xp/1"`` therefore
contains no ``p/`` marker.  Markers are matched case-sensitively.

Text before the first marker is kept as the *preamble*.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from evman.errors import DuplicatePrefixError
from evman.grammar.cli_syntax import Prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PrefixPosition:
    """Start offset of one marker occurrence in the argument string."""

    start: int
    prefix: Prefix

    @property
    def value_start(self) -> int:
        """Offset of the first character after the marker."""
        return self.start + len(self.prefix.marker)


@dataclass
class ArgumentMultimap:
    """Prefix-keyed view of a tokenized argument string.

    Values for each prefix are stored in the order they appeared.  A
    prefix that never appeared has no entry at all, which is different
    from a prefix that appeared with an empty value (``""``).

    Parameters
    ----------
    preamble:
        Trimmed text preceding the first recognised marker.
    """

    preamble: str = ""
    _values: dict[Prefix, list[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        """Append *value* to the values recorded for *prefix*."""
        self._values.setdefault(prefix, []).append(value)

    def value_present(self, prefix: Prefix) -> bool:
        """Return True if at least one value was recorded for *prefix*."""
        return bool(self._values.get(prefix))

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value recorded for *prefix*, or ``None``."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return a copy of every value recorded for *prefix*."""
        return list(self._values.get(prefix, []))

    def verify_no_duplicates(self, *prefixes: Prefix) -> None:
        """Raise if any of *prefixes* was given more than once.

        Raises
        ------
        DuplicatePrefixError
            Listing every offending prefix, in the order given.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise DuplicatePrefixError(duplicated)


class ArgumentTokenizer:
    """Splits an argument string on a fixed set of prefix markers.

    Parameters
    ----------
    prefixes:
        The markers to recognise.  Any other text, including markers of
        prefixes not listed here, is treated as part of a value.
    """

    __slots__ = ("_prefixes", "_patterns")

    def __init__(self, *prefixes: Prefix) -> None:
        self._prefixes: tuple[Prefix, ...] = prefixes
        self._patterns: tuple[tuple[Prefix, re.Pattern[str]], ...] = tuple(
            (p, re.compile(r"(?<!\S)" + re.escape(p.marker), re.ASCII)) for p in prefixes
        )

    def tokenize(self, args: str) -> ArgumentMultimap:
        """Tokenize *args* and return the resulting multimap."""
        positions = self._find_positions(args)
        if not positions:
            return ArgumentMultimap(preamble=args.strip())

        multimap = ArgumentMultimap(preamble=args[: positions[0].start].strip())
        ends = [pos.start for pos in positions[1:]] + [len(args)]
        for current, end in zip(positions, ends):
            multimap.put(current.prefix, args[current.value_start:end].strip())

        logger.debug(
            "Tokenized %d field(s): %s",
            len(positions),
            {p.label: len(multimap.get_all_values(p)) for p in self._prefixes},
        )
        return multimap

    def _find_positions(self, args: str) -> list[PrefixPosition]:
        positions = [
            PrefixPosition(start=match.start(), prefix=prefix)
            for prefix, pattern in self._patterns
            for match in pattern.finditer(args)
        ]
        positions.sort(key=lambda pos: pos.start)
        return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Convenience wrapper: tokenize *args* against *prefixes*."""
    return ArgumentTokenizer(*prefixes).tokenize(args)
