"""Two-dimensional vector arithmetic."""

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """A 2D vector. Ordering compares lengths; ``*`` with a vector is the dot product."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.length() < other.length()

    def __gt__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.length() > other.length()

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def approx_zero(self) -> bool:
        return self.length() < 0.0001

    def normalize(self) -> "Vector2":
        """Return a unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)