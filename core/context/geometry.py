"""Small immutable geometry and colour value types used by ``Ui`` scopes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# RGBA, each channel 0-255.
Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Transform:
    """A layer translation in logical pixels."""
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def from_translation(cls, dx: float, dy: float) -> "Transform":
        return cls(float(dx), float(dy))

    def is_identity(self) -> bool:
        return self.dx == 0.0 and self.dy == 0.0

    def then(self, other: "Transform") -> "Transform":
        """Apply ``other`` after this transform."""
        return Transform(self.dx + other.dx, self.dy + other.dy)


Transform.IDENTITY = Transform()


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle (x, y, width, height)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def with_width(self, width: float) -> "Rect":
        return Rect(self.x, self.y, max(0.0, width), self.height)

    def with_height(self, height: float) -> "Rect":
        return Rect(self.x, self.y, self.width, max(0.0, height))

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.right and self.y <= py < self.bottom

    def intersected(self, other: "Rect") -> "Rect":
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0.0, right - x), max(0.0, bottom - y))


def clamp_channel(value: float) -> int:
    return int(max(0, min(255, value)))
