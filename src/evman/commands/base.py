"""Abstract base class for executable commands.

A command is produced by a parser once its arguments have been fully
validated and is executed later against a ``Model``.  Each concrete
command declares the word that invokes it (``COMMAND_WORD``) and the
help text shown when it is written incorrectly (``MESSAGE_USAGE``).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from evman.model.model import Model


class CommandError(Exception):
    """Raised when a valid command cannot be carried out on the model."""


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command execution.

    Parameters
    ----------
    feedback:
        Message to show the user.
    """

    feedback: str

    def __str__(self) -> str:
        return self.feedback


class Command(ABC):
    """Base class for all commands.

    Subclasses must set ``COMMAND_WORD`` and ``MESSAGE_USAGE`` and
    implement :meth:`execute` and :meth:`to_dict`.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: "Model") -> CommandResult:
        """Apply this command to *model*.

        Raises
        ------
        CommandError
            If the command cannot be applied in the model's current state.
        """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data view of this command for serialization."""
