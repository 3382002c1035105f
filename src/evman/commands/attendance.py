"""Attend / unattend commands.

Both commands name one event and one or more persons by their position
in the displayed lists.  Execution resolves every index first and
checks every person before touching the model, so a failing command
leaves the model unchanged.
"""
from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from evman.commands.base import Command, CommandError, CommandResult
from evman.messages import (
    MESSAGE_INVALID_EVENT_DISPLAYED_INDEX,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
)
from evman.model.index import Index

if TYPE_CHECKING:
    from evman.model.model import Model

logger = logging.getLogger(__name__)

MESSAGE_REPEATED_PERSON = "Person index {} is listed more than once"


def _resolve(items: Sequence[Any], index: Index, message: str) -> Any:
    if index.zero_based >= len(items):
        raise CommandError(message)
    return items[index.zero_based]


def _names(persons: Iterable[Any]) -> str:
    return ", ".join(str(p) for p in persons)


@dataclass(frozen=True)
class _AttendanceCommand(Command):
    """Shared state and execution flow of attend and unattend.

    Parameters
    ----------
    event_index:
        Position of the event in the displayed event list.
    person_indexes:
        Positions of the persons in the displayed person list, in the
        order given by the user.
    """

    MESSAGE_SUCCESS: ClassVar[str]

    event_index: Index
    person_indexes: tuple[Index, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "person_indexes", tuple(self.person_indexes))
        if not self.person_indexes:
            raise ValueError(f"{type(self).__name__} needs at least one person index")

    def execute(self, model: "Model") -> CommandResult:
        event = _resolve(
            model.get_filtered_event_list(),
            self.event_index,
            MESSAGE_INVALID_EVENT_DISPLAYED_INDEX,
        )
        shown_persons = model.get_filtered_person_list()
        persons = [
            _resolve(shown_persons, index, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
            for index in self.person_indexes
        ]

        seen: set[Index] = set()
        for index in self.person_indexes:
            if index in seen:
                raise CommandError(MESSAGE_REPEATED_PERSON.format(index))
            seen.add(index)

        self._check(model, event, persons)
        for person in persons:
            self._apply(model, event, person)

        logger.debug(
            "%s: event %s, %d person(s)", self.COMMAND_WORD, self.event_index, len(persons)
        )
        return CommandResult(self.MESSAGE_SUCCESS.format(_names(persons), event))

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.COMMAND_WORD,
            "event_index": self.event_index.one_based,
            "person_indexes": [i.one_based for i in self.person_indexes],
        }

    @abstractmethod
    def _check(self, model: "Model", event: Any, persons: list[Any]) -> None:
        """Raise ``CommandError`` if any of *persons* cannot be applied."""

    @abstractmethod
    def _apply(self, model: "Model", event: Any, person: Any) -> None:
        """Record the change for one person."""


@dataclass(frozen=True)
class AttendCommand(_AttendanceCommand):
    """Marks persons as attending an event.

    The parser keeps repeated person indexes (``p/1 1``) as given.
    Execution rejects them: a command naming the same person twice
    raises ``CommandError`` before the model is changed.
    """

    COMMAND_WORD: ClassVar[str] = "attend"
    MESSAGE_USAGE: ClassVar[str] = (
        COMMAND_WORD
        + ": Marks the persons identified by the index numbers used in the displayed "
        "person list as attending the event identified by the index number used in "
        "the displayed event list.\n"
        "Parameters: p/PERSON_INDEX [MORE_PERSON_INDEXES]... e/EVENT_INDEX\n"
        "Example: " + COMMAND_WORD + " p/1 2 3 e/2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Marked {} as attending {}"
    MESSAGE_ALREADY_ATTENDING: ClassVar[str] = "Already attending {}: {}"

    def _check(self, model: "Model", event: Any, persons: list[Any]) -> None:
        attending = [p for p in persons if model.is_attending(event, p)]
        if attending:
            raise CommandError(self.MESSAGE_ALREADY_ATTENDING.format(event, _names(attending)))

    def _apply(self, model: "Model", event: Any, person: Any) -> None:
        model.add_attendee(event, person)


@dataclass(frozen=True)
class UnattendCommand(_AttendanceCommand):
    """Removes persons from the attendees of an event.

    Repeated person indexes are rejected at execution time, as for
    ``AttendCommand``.
    """

    COMMAND_WORD: ClassVar[str] = "unattend"
    MESSAGE_USAGE: ClassVar[str] = (
        COMMAND_WORD
        + ": Removes the persons identified by the index numbers used in the displayed "
        "person list from the attendees of the event identified by the index number "
        "used in the displayed event list.\n"
        "Parameters: p/PERSON_INDEX [MORE_PERSON_INDEXES]... e/EVENT_INDEX\n"
        "Example: " + COMMAND_WORD + " p/1 2 3 e/2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Removed {} from the attendees of {}"
    MESSAGE_NOT_ATTENDING: ClassVar[str] = "Not attending {}: {}"

    def _check(self, model: "Model", event: Any, persons: list[Any]) -> None:
        absent = [p for p in persons if not model.is_attending(event, p)]
        if absent:
            raise CommandError(self.MESSAGE_NOT_ATTENDING.format(event, _names(absent)))

    def _apply(self, model: "Model", event: Any, person: Any) -> None:
        model.remove_attendee(event, person)
