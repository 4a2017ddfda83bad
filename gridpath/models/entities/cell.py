"""Cell entity and the enums that drive its type."""

from dataclasses import dataclass
from enum import Enum


class CellType(str, Enum):
    """What a cell currently represents on the grid."""
    DEFAULT = "default"
    OBSTACLE = "obstacle"
    GOAL = "goal"
    PATH = "path"

    @property
    def class_name(self) -> str:
        """CSS class used by the renderer."""
        return f"cell {self.value}"


class DrawingMode(str, Enum):
    """Brush selected in the editor toolbar."""
    DEFAULT = "default"
    OBSTACLE = "obstacle"
    GOAL = "goal"

    @property
    def cell_type(self) -> CellType:
        return CellType(self.value)


@dataclass
class Cell:
    """A single grid position addressed by its row-major index."""
    id: int
    cell_type: CellType = CellType.DEFAULT
    visited: bool = False
    distance: float = float("inf")

    @property
    def is_obstacle(self) -> bool:
        return self.cell_type == CellType.OBSTACLE

    @property
    def is_goal(self) -> bool:
        return self.cell_type == CellType.GOAL

    def manipulate(self, mode: DrawingMode) -> None:
        """Paint the cell with the given drawing mode."""
        self.cell_type = mode.cell_type

    def reset_markers(self) -> None:
        """Clear search state and any path marking."""
        self.visited = False
        self.distance = float("inf")
        if self.cell_type == CellType.PATH:
            self.cell_type = CellType.DEFAULT

    def to_dict(self, size: float) -> dict:
        """Read-only projection consumed by the renderer."""
        return {
            "id": int(self.id),
            "type": self.cell_type.value,
            "class_name": self.cell_type.class_name,
            "size": float(size),
        }
