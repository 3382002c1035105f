"""One-based display index into a shown list."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Index:
    """A position in a displayed list.

    Users see and type one-based positions; collections are accessed
    with zero-based offsets.  ``Index`` stores the one-based value and
    exposes both views.

    Parameters
    ----------
    one_based:
        The user-facing position; must be at least 1.
    """

    one_based: int

    def __post_init__(self) -> None:
        if self.one_based < 1:
            raise ValueError(f"Index must be positive, got {self.one_based}")

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(value)

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(value + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)
