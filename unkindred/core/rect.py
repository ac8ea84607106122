"""Rectangle primitive used while placing rooms."""

from __future__ import annotations

from dataclasses import dataclass

from unkindred.core.models import Vector2


@dataclass(frozen=True, slots=True)
class Rect:
    """Room footprint. ``(x1, y1)`` is the top-left corner, ``(x2, y2)`` the
    bottom-right; the bounding edge stays wall, only the interior is carved."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(x, y, x + w, y + h)

    def center(self) -> Vector2:
        return Vector2((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect) -> bool:
        """Inclusive-bound overlap test: rooms sharing an edge also collide."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self):
        """Yield the cells strictly inside the bounding edge."""
        for y in range(self.y1 + 1, self.y2):
            for x in range(self.x1 + 1, self.x2):
                yield x, y

    def contains_interior(self, x: int, y: int) -> bool:
        return self.x1 < x < self.x2 and self.y1 < y < self.y2
