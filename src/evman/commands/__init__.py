"""Executable commands."""
from __future__ import annotations

from evman.commands.attendance import AttendCommand, UnattendCommand
from evman.commands.base import Command, CommandError, CommandResult

__all__ = [
    "Command",
    "CommandError",
    "CommandResult",
    "AttendCommand",
    "UnattendCommand",
]
