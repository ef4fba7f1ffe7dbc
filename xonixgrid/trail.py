"""Rectangles, moving-object geometry and the player's trail."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .grid import CELL_SIZE

BODY_SIZE = CELL_SIZE - 2


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    def intersects(self, other):
        """True when the two rectangles overlap with a non-zero area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )

    def contains(self, point):
        x, y = point
        return self.left <= x < self.right and self.top <= y < self.bottom


def cell_of_point(pos):
    """Grid cell holding the pixel position ``pos``."""
    return (int(pos[0] / CELL_SIZE), int(pos[1] / CELL_SIZE))


class Trail:
    """Points left behind while the player crosses open water."""

    def __init__(self):
        self._path: list[tuple[float, float]] = []

    def add_point(self, point):
        """Append a point unless it repeats or sits too close to the last one."""
        point = (point[0], point[1])
        if not self._path:
            self._path.append(point)
            return
        if self._path[-1] == point:
            return
        if self.distance_to_last_point(point) < CELL_SIZE * 0.2:
            return
        self._path.append(point)

    def clear(self):
        self._path.clear()

    def distance_to_last_point(self, point):
        if not self._path:
            return 0.0
        last_x, last_y = self._path[-1]
        return math.hypot(last_x - point[0], last_y - point[1])

    def collides(self, rect):
        """True if ``rect`` touches a trail cell; the trail is then cleared."""
        for x, y in self._path:
            if rect.intersects(Rect(x, y, CELL_SIZE, CELL_SIZE)):
                self.clear()
                return True
        return False

    def __iter__(self):
        return iter(list(self._path))

    def __len__(self):
        return len(self._path)