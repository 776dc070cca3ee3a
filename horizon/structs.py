"""Small value types shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SoundId = int


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(eq=False)
class IPoint2:
    """A two-dimensional integer point with element-wise arithmetic."""

    x: int = 0
    y: int = 0

    @staticmethod
    def _coerce(other: Union["IPoint2", int]) -> "IPoint2 | None":
        if isinstance(other, IPoint2):
            return other
        if isinstance(other, int):
            return IPoint2(other, other)
        return None

    def __add__(self, other: Union["IPoint2", int]) -> "IPoint2":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IPoint2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, other: Union["IPoint2", int]) -> "IPoint2":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IPoint2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, other: Union["IPoint2", int]) -> "IPoint2":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IPoint2(self.x * rhs.x, self.y * rhs.y)

    def __truediv__(self, other: Union["IPoint2", int]) -> "IPoint2":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IPoint2(_trunc_div(self.x, rhs.x), _trunc_div(self.y, rhs.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IPoint2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]


@dataclass
class FPoint2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class IPoint3:
    x: int = 0
    y: int = 0
    z: int = 0


@dataclass
class FPoint3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Color:
    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class AudioData:
    id: SoundId = 0
    volume: int = 0


@dataclass
class IRect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0