"""The ``Model`` protocol commands execute against.

Commands never see a concrete address book; they only need the lists
currently shown to the user and a way to record attendance.  Any object
with the methods below satisfies the protocol.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Model(Protocol):
    """Capabilities required by attendance commands.

    Persons and events are opaque to the commands; they are passed back
    to the model unchanged and rendered with ``str()`` in feedback.
    """

    def get_filtered_person_list(self) -> Sequence[Any]:
        """Return the persons currently displayed, in display order."""
        ...  # pragma: no cover

    def get_filtered_event_list(self) -> Sequence[Any]:
        """Return the events currently displayed, in display order."""
        ...  # pragma: no cover

    def is_attending(self, event: Any, person: Any) -> bool:
        """Return True if *person* is recorded as attending *event*."""
        ...  # pragma: no cover

    def add_attendee(self, event: Any, person: Any) -> None:
        """Record *person* as attending *event*."""
        ...  # pragma: no cover

    def remove_attendee(self, event: Any, person: Any) -> None:
        """Remove *person* from the attendees of *event*."""
        ...  # pragma: no cover
