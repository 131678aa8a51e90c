"""Integer two-dimensional vectors used for positions and velocities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable pair of integer coordinates.

    Scaling by a number truncates each component toward zero, so the result
    always has integer coordinates.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if isinstance(factor, Vector2) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(int(self.x * factor), int(self.y * factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        if isinstance(divisor, Vector2) or not isinstance(divisor, (int, float)):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vector2(int(self.x / divisor), int(self.y / divisor))