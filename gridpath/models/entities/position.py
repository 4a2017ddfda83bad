"""Position value object for the editor grid."""

from dataclasses import dataclass
from typing import List
import math


@dataclass(frozen=True)
class Position:
    """Immutable 2D position on the grid."""
    x: int
    y: int

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance, so diagonal steps cost sqrt(2)."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def neighbors(self, grid_width: int, grid_height: int) -> List["Position"]:
        """Return valid neighboring positions (8-directional, row-major)."""
        candidates = [
            Position(self.x + dx, self.y + dy)
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if dx != 0 or dy != 0
        ]
        return [
            p for p in candidates
            if 0 <= p.x < grid_width and 0 <= p.y < grid_height
        ]
