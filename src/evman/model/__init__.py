"""Domain value objects and the model protocol."""
from __future__ import annotations

from evman.model.duration import (
    Duration,
    DurationError,
    InvalidDurationFormatError,
    InvalidDurationRangeError,
)
from evman.model.index import Index
from evman.model.model import Model

__all__ = [
    "Duration",
    "DurationError",
    "InvalidDurationFormatError",
    "InvalidDurationRangeError",
    "Index",
    "Model",
]
