"""Command parsers: raw argument text to validated ``Command`` objects.

``PrefixedCommandParser`` implements the parsing flow every
prefix-based command follows:

1. tokenize the arguments against the command's prefixes;
2. report *all* missing required prefixes at once;
3. reject prefixes given more than once;
4. convert the field values into domain values;
5. construct the command.

Any failure along the way is re-raised as a single
``InvalidCommandFormatError`` that also carries the command's usage
text.  Individual commands only supply configuration: the command
class, the required prefixes, the missing-prefix message template and
a builder that turns the multimap into a command.

``CommandWordParser`` sits in front of the per-command parsers and
routes a full input line (``"attend p/1 e/2"``) by its first word.

Usage
-----
::

    from evman.parser import ATTEND_PARSER, parse_command

    command = ATTEND_PARSER.parse("p/1 2 e/3")
    command = parse_command("unattend p/1 e/3")
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Final, Generic, TypeVar

from evman.commands.attendance import AttendCommand, UnattendCommand
from evman.commands.base import Command
from evman.errors import (
    InvalidCommandFormatError,
    MissingCompulsoryPrefixError,
    ParseError,
    UnknownCommandError,
)
from evman.grammar.cli_syntax import PREFIX_EVENT, PREFIX_PERSON, Prefix
from evman.lexer.tokenizer import ArgumentMultimap, ArgumentTokenizer
from evman.messages import MESSAGE_MISSING_COMPULSORY_PREFIX
from evman.parser.parser_util import parse_index, parse_indexes

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Command)

_BASIC_COMMAND_FORMAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL
)


class PrefixedCommandParser(Generic[C]):
    """Generic parser for commands whose fields are introduced by prefixes.

    Parameters
    ----------
    command_type:
        The command class produced; its ``MESSAGE_USAGE`` is attached to
        every failure.
    required:
        Prefixes that must each appear exactly once, in the order they
        are reported when missing.
    build:
        Turns the validated multimap into a command.  May raise any
        ``ParseError`` while converting field values.
    missing_prefix_template:
        Message template with one ``{}`` placeholder for the missing
        markers.
    """

    __slots__ = ("_command_type", "_required", "_build", "_missing_template", "_tokenizer")

    def __init__(
        self,
        command_type: type[C],
        required: Sequence[Prefix],
        build: Callable[[ArgumentMultimap], C],
        missing_prefix_template: str = MESSAGE_MISSING_COMPULSORY_PREFIX,
    ) -> None:
        self._command_type = command_type
        self._required: tuple[Prefix, ...] = tuple(required)
        self._build = build
        self._missing_template = missing_prefix_template
        self._tokenizer = ArgumentTokenizer(*self._required)

    @property
    def command_type(self) -> type[C]:
        return self._command_type

    @property
    def usage(self) -> str:
        return self._command_type.MESSAGE_USAGE

    def parse(self, args: str) -> C:
        """Parse *args* into a command.

        Raises
        ------
        InvalidCommandFormatError
            Wrapping whichever validation step failed.
        """
        try:
            multimap = self._tokenizer.tokenize(args)

            missing = [p for p in self._required if not multimap.value_present(p)]
            if missing:
                raise MissingCompulsoryPrefixError(missing, self._missing_template)

            multimap.verify_no_duplicates(*self._required)
            return self._build(multimap)
        except ParseError as exc:
            logger.debug("%s: rejected %r: %s", self._command_type.COMMAND_WORD, args, exc)
            raise InvalidCommandFormatError(self.usage, exc) from exc


def _attendance_builder(
    command_type: type[AttendCommand] | type[UnattendCommand],
) -> Callable[[ArgumentMultimap], Command]:
    def build(multimap: ArgumentMultimap) -> Command:
        # Both values are present once the required-prefix check has passed.
        event_index = parse_index(multimap.get_value(PREFIX_EVENT) or "")
        person_indexes = parse_indexes(multimap.get_value(PREFIX_PERSON) or "")
        return command_type(event_index, tuple(person_indexes))

    return build


ATTEND_PARSER: Final[PrefixedCommandParser[AttendCommand]] = PrefixedCommandParser(
    AttendCommand,
    (PREFIX_PERSON, PREFIX_EVENT),
    _attendance_builder(AttendCommand),  # type: ignore[arg-type]
)

UNATTEND_PARSER: Final[PrefixedCommandParser[UnattendCommand]] = PrefixedCommandParser(
    UnattendCommand,
    (PREFIX_PERSON, PREFIX_EVENT),
    _attendance_builder(UnattendCommand),  # type: ignore[arg-type]
)


class CommandWordParser:
    """Routes a full input line to the parser registered for its first word.

    Parameters
    ----------
    parsers:
        Mapping of command word to the parser handling that command.
        Defaults to the built-in attend and unattend parsers.
    """

    def __init__(self, parsers: Mapping[str, PrefixedCommandParser] | None = None) -> None:
        if parsers is None:
            parsers = {
                AttendCommand.COMMAND_WORD: ATTEND_PARSER,
                UnattendCommand.COMMAND_WORD: UNATTEND_PARSER,
            }
        self._parsers: dict[str, PrefixedCommandParser] = dict(parsers)

    @property
    def command_words(self) -> list[str]:
        return list(self._parsers)

    @property
    def help_text(self) -> str:
        """Usage text of every registered command, blank-line separated."""
        return "\n\n".join(p.usage for p in self._parsers.values())

    def parse(self, user_input: str) -> Command:
        """Parse a complete command line.

        Raises
        ------
        InvalidCommandFormatError
            If the line is blank or the command's arguments are invalid.
        UnknownCommandError
            If the first word names no registered command.
        """
        match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise InvalidCommandFormatError(self.help_text)

        command_word = match.group("command_word")
        parser = self._parsers.get(command_word)
        if parser is None:
            raise UnknownCommandError(command_word)

        logger.debug("Dispatching %r to %s", command_word, parser.command_type.__name__)
        return parser.parse(match.group("arguments"))


_DEFAULT_PARSER = CommandWordParser()


def parse_command(user_input: str) -> Command:
    """Parse *user_input* with the built-in command set."""
    return _DEFAULT_PARSER.parse(user_input)
