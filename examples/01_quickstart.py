#!/usr/bin/env python3
"""Example: Quickstart — evman

Minimal working example: parse attend/unattend commands, run them
against a small in-memory model, and validate event durations.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install evman
"""
from __future__ import annotations

import evman
from evman.commands import CommandError
from evman.errors import ParseError


class DemoModel:
    def __init__(self) -> None:
        self.persons = ["Alice", "Bob", "Carol"]
        self.events = ["Hackathon", "Retreat"]
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


def main() -> None:
    print(f"evman version: {evman.__version__}")
    model = DemoModel()

    # Step 1: Parse and execute commands
    for line in ("attend p/1 2 e/1", "attend p/2 e/1", "unattend p/1 e/1", "attend e/2"):
        try:
            result = evman.parse_command(line).execute(model)
        except (ParseError, CommandError) as exc:
            print(f"{line!r} failed:\n  {exc}")
        else:
            print(f"{line!r}: {result}")

    # Step 2: Validate durations
    for text in ("1/10/2025", "9/1/2022 - 10/2/2022", "31/4/2024", "10/2/2022-9/1/2022"):
        try:
            print(f"{text!r} -> {evman.parse_duration(text)}")
        except ParseError as exc:
            print(f"{text!r} rejected: {exc}")


if __name__ == "__main__":
    main()
