"""Command syntax module.

Exports the ``Prefix`` dataclass and the fixed prefix constants.
"""
from __future__ import annotations

from evman.grammar.cli_syntax import PREFIX_EVENT, PREFIX_PERSON, Prefix

__all__ = [
    "Prefix",
    "PREFIX_PERSON",
    "PREFIX_EVENT",
]
