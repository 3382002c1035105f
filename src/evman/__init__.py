"""evman — command parsing and validation for a contact/event manager.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import evman

    # Parse a full command line into a validated command
    command = evman.parse_command("attend p/1 2 e/3")
    command.event_index.one_based        # 3
    [i.one_based for i in command.person_indexes]   # [1, 2]

    # Validate an event duration
    duration = evman.parse_duration("9/1/2022 - 10/2/2022")
    str(duration)                        # '9/1/2022 - 10/2/2022'

    evman.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from evman.commands.base import Command
    from evman.model.duration import Duration


def parse_command(user_input: str) -> "Command":
    """Parse a complete command line such as ``"attend p/1 e/2"``.

    Parameters
    ----------
    user_input:
        The command word followed by its arguments.

    Returns
    -------
    Command
        The validated command, ready to ``execute`` against a model.

    Raises
    ------
    evman.errors.UnknownCommandError
        If the command word is not recognised.
    evman.errors.InvalidCommandFormatError
        If the arguments fail validation.
    """
    from evman.parser.command_parser import parse_command as _parse_command

    return _parse_command(user_input)


def parse_duration(text: str) -> "Duration":
    """Parse a ``d/M/yyyy`` date or ``d/M/yyyy-d/M/yyyy`` range.

    Raises
    ------
    evman.errors.InvalidDurationError
        If the text is malformed, names an impossible date, or is an
        inverted range.
    """
    from evman.parser.parser_util import parse_duration as _parse_duration

    return _parse_duration(text)


__all__ = [
    "__version__",
    "parse_command",
    "parse_duration",
]
