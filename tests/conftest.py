"""Shared test fixtures for evman.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


class FakeModel:
    """Minimal in-memory ``Model`` holding names and an attendance set."""

    def __init__(self, persons: list[str], events: list[str]) -> None:
        self.persons = persons
        self.events = events
        self.attendance: set[tuple[str, str]] = set()

    def get_filtered_person_list(self) -> list[str]:
        return self.persons

    def get_filtered_event_list(self) -> list[str]:
        return self.events

    def is_attending(self, event: str, person: str) -> bool:
        return (event, person) in self.attendance

    def add_attendee(self, event: str, person: str) -> None:
        self.attendance.add((event, person))

    def remove_attendee(self, event: str, person: str) -> None:
        self.attendance.discard((event, person))


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "evman"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def model() -> FakeModel:
    """Three persons and two events, nobody attending anything yet."""
    return FakeModel(persons=["Alice", "Bob", "Carol"], events=["Hackathon", "Retreat"])
