"""Parse error types for evman command parsing.

Every failure raised while turning a raw argument string into a
command derives from ``ParseError``.  The individual subclasses carry
the structured details of what went wrong (missing prefixes, the
offending token, ...) so that callers and tests can inspect them
without scraping the message text.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from evman.messages import (
    MESSAGE_DUPLICATE_FIELDS,
    MESSAGE_EMPTY_INDEX_LIST,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
)

if TYPE_CHECKING:
    from evman.grammar.cli_syntax import Prefix


class ParseError(Exception):
    """Base class for all command parsing failures.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingCompulsoryPrefixError(ParseError):
    """One or more required prefixes were not given at all.

    Parameters
    ----------
    missing:
        The absent prefixes, in the parser's declared order.
    template:
        Message template with a single ``{}`` placeholder that receives
        the missing markers joined by ``", "``.
    """

    def __init__(self, missing: Sequence[Prefix], template: str) -> None:
        self.missing: tuple[Prefix, ...] = tuple(missing)
        super().__init__(template.format(", ".join(p.marker for p in self.missing)))


class DuplicatePrefixError(ParseError):
    """A single-valued prefix appeared more than once."""

    def __init__(self, duplicated: Sequence[Prefix]) -> None:
        self.duplicated: tuple[Prefix, ...] = tuple(duplicated)
        super().__init__(
            MESSAGE_DUPLICATE_FIELDS.format(" ".join(p.marker for p in self.duplicated))
        )


class InvalidIndexError(ParseError):
    """A token could not be read as a positive one-based index."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{MESSAGE_INVALID_INDEX} Got: '{token}'")


class EmptyIndexListError(ParseError):
    """An index list contained no tokens."""

    def __init__(self) -> None:
        super().__init__(MESSAGE_EMPTY_INDEX_LIST)


class InvalidDurationError(ParseError):
    """A duration field failed validation."""


class UnknownCommandError(ParseError):
    """The command word is not registered with the dispatcher."""

    def __init__(self, command_word: str) -> None:
        self.command_word = command_word
        super().__init__(MESSAGE_UNKNOWN_COMMAND)


class InvalidCommandFormatError(ParseError):
    """Uniform top-level failure raised by every command parser.

    Wraps whichever check failed together with the usage text of the
    command being parsed, so the user always sees what went wrong and
    how the command should be written.

    Parameters
    ----------
    usage:
        The ``MESSAGE_USAGE`` text of the command.
    cause:
        The underlying failure, if any.
    """

    def __init__(self, usage: str, cause: ParseError | None = None) -> None:
        self.usage = usage
        self.cause = cause
        body = usage if cause is None else f"{cause.message}\n{usage}"
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT.format(body))
