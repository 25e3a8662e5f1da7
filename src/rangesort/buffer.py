"""
Linear auxiliary buffer for merge sort.

Slots start out *vacant* rather than holding a default-constructed value, so
any element type can be buffered. Reading a vacant slot is a bug in the
caller and raises ``LookupError``.
"""

from __future__ import annotations

from typing import Any, Iterator, List

__all__ = ["LinearBuffer"]


class _Vacant:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<vacant>"


_VACANT = _Vacant()


class LinearBuffer:
    """Fixed-length store addressed by index; resizable between uses."""

    __slots__ = ("_slots",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be nonnegative")
        self._slots: List[Any] = [_VACANT] * size

    def __len__(self) -> int:
        return len(self._slots)

    def resize(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be nonnegative")
        current = len(self._slots)
        if size < current:
            del self._slots[size:]
        else:
            self._slots.extend([_VACANT] * (size - current))

    def __setitem__(self, index: int, value: Any) -> None:
        self._slots[index] = value

    def __getitem__(self, index: int) -> Any:
        value = self._slots[index]
        if value is _VACANT:
            raise LookupError(f"buffer slot {index} is vacant")
        return value

    def take(self, index: int) -> Any:
        """Return the value at ``index`` and leave the slot vacant."""
        value = self[index]
        self._slots[index] = _VACANT
        return value

    def is_vacant(self, index: int) -> bool:
        return self._slots[index] is _VACANT

    def occupied(self) -> int:
        return sum(1 for v in self._slots if v is not _VACANT)

    def clear(self) -> None:
        self._slots[:] = [_VACANT] * len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        return (v for v in self._slots if v is not _VACANT)

    def __repr__(self) -> str:
        return f"LinearBuffer(size={len(self._slots)}, occupied={self.occupied()})"
