"""User-facing message templates shared across parsers and commands."""
from __future__ import annotations

from typing import Final

MESSAGE_INVALID_COMMAND_FORMAT: Final[str] = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND: Final[str] = "Unknown command"
MESSAGE_MISSING_COMPULSORY_PREFIX: Final[str] = "Missing compulsory prefix(es): {}"
MESSAGE_DUPLICATE_FIELDS: Final[str] = (
    "Multiple values specified for the following single-valued field(s): {}"
)
MESSAGE_INVALID_INDEX: Final[str] = "Index is not a non-zero unsigned integer."
MESSAGE_EMPTY_INDEX_LIST: Final[str] = "At least one index must be given."

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX: Final[str] = "The person index provided is invalid"
MESSAGE_INVALID_EVENT_DISPLAYED_INDEX: Final[str] = "The event index provided is invalid"
