"""Prefix definitions for the evman command syntax.

Every field of a command's argument string is introduced by a short
marker such as ``p/`` or ``e/``.  Each marker is represented by a
frozen ``Prefix`` dataclass; the complete, fixed set of markers lives
in the module constants below and never changes at runtime.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Prefix:
    """A field marker within a flat argument string.

    Parameters
    ----------
    marker:
        The literal text that introduces the field, e.g. ``"p/"``.
    label:
        Human-readable name of the field, e.g. ``"person"``.
    """

    marker: str
    label: str

    def __str__(self) -> str:
        return self.marker


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

PREFIX_PERSON: Final[Prefix] = Prefix("p/", "person")
PREFIX_EVENT: Final[Prefix] = Prefix("e/", "event")

