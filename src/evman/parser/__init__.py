"""Command parser module.

Exports the generic ``PrefixedCommandParser``, the configured attend
and unattend parsers, the ``CommandWordParser`` dispatcher, and the
field helpers in ``parser_util``.
"""
from __future__ import annotations

from evman.parser.command_parser import (
    ATTEND_PARSER,
    UNATTEND_PARSER,
    CommandWordParser,
    PrefixedCommandParser,
    parse_command,
)
from evman.parser.parser_util import parse_duration, parse_index, parse_indexes

__all__ = [
    "PrefixedCommandParser",
    "CommandWordParser",
    "ATTEND_PARSER",
    "UNATTEND_PARSER",
    "parse_command",
    "parse_index",
    "parse_indexes",
    "parse_duration",
]
