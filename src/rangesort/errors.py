"""Exception hierarchy for rangesort.

Failures raised by user code (a comparator, an element's ``__eq__``, a
container's ``__setitem__``) are never wrapped: they propagate unchanged.
The classes below only cover misuse of the library itself.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "RangeSortError",
    "CapabilityError",
    "InvalidRangeError",
    "UnknownAlgorithmError",
    "ConfigError",
]


class RangeSortError(Exception):
    """Base exception for rangesort errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class CapabilityError(RangeSortError, TypeError):
    """Raised when a cursor cannot do what an algorithm or primitive needs."""
    pass


class InvalidRangeError(RangeSortError, ValueError):
    """Raised when two cursors do not delimit a range of one container."""
    pass


class UnknownAlgorithmError(RangeSortError, KeyError):
    """Raised when an algorithm name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ConfigError(RangeSortError, ValueError):
    """Raised when a benchmark config or dataset spec is invalid."""
    pass
