"""Axis-aligned rectangles used for hit boxes, buttons and sprite frames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

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

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def collides(self, other: Rect) -> bool:
        """True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )