"""Grid state container for the editor."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Iterable
import copy

import numpy as np

from .cell import Cell, CellType, DrawingMode
from .position import Position


@dataclass
class Grid:
    """
    Fixed-size grid of cells stored flat in row-major order.
    Only cell attributes mutate; the cell list never changes length.
    """
    width: int
    height: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self):
        """Create one cell per position if not provided."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Grid dimensions must be positive")
        if not self.cells:
            self.cells = [Cell(id=i) for i in range(self.width * self.height)]
        elif len(self.cells) != self.width * self.height:
            raise ValueError("Cell count does not match grid dimensions")

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def cell_size(self) -> float:
        """Display size of one cell in viewport-width units."""
        return (100 - self.width) / self.width

    def contains(self, cell_id: int) -> bool:
        return 0 <= cell_id < self.size

    def cell(self, cell_id: int) -> Cell:
        """Get cell by index."""
        if not self.contains(cell_id):
            raise IndexError(f"Cell index {cell_id} outside grid of {self.size} cells")
        return self.cells[cell_id]

    def coordinate_of(self, cell_id: int) -> Tuple[int, int]:
        """Decode a linear index into (x, y)."""
        return cell_id % self.width, (cell_id // self.width) % self.height

    def id_of(self, x: int, y: int) -> int:
        """Encode (x, y) into a linear index."""
        return x + self.width * y

    def position_of(self, cell_id: int) -> Position:
        x, y = self.coordinate_of(cell_id)
        return Position(x, y)

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Unvisited, non-obstacle cells in the Moore neighborhood."""
        position = self.position_of(cell.id)
        result = []
        for p in position.neighbors(self.width, self.height):
            neighbor = self.cells[self.id_of(p.x, p.y)]
            if neighbor.visited or neighbor.is_obstacle:
                continue
            result.append(neighbor)
        return result

    def distance(self, u: Cell, v: Cell) -> float:
        """Euclidean distance between two cells."""
        return self.position_of(u.id).distance_to(self.position_of(v.id))

    def goal(self) -> Optional[Cell]:
        """The goal cell, or None when no goal has been placed yet."""
        for cell in self.cells:
            if cell.is_goal:
                return cell
        return None

    def rows(self) -> List[List[Cell]]:
        """Split the flat storage into display rows."""
        return [
            self.cells[row * self.width:(row + 1) * self.width]
            for row in range(self.height)
        ]

    def manipulate_cell(self, cell_id: int, mode: DrawingMode) -> None:
        """Paint one cell, demoting any previous goal when placing a new one."""
        target = self.cell(cell_id)
        if mode == DrawingMode.GOAL:
            previous = self.goal()
            if previous is not None and previous.id != cell_id:
                previous.cell_type = CellType.DEFAULT
        target.manipulate(mode)

    def reset_markers(self) -> None:
        """Clear visited flags, distances and path marks before a search."""
        for cell in self.cells:
            cell.reset_markers()

    def clear(self) -> None:
        """Return every cell to its initial state."""
        for cell in self.cells:
            cell.cell_type = CellType.DEFAULT
            cell.reset_markers()

    def scatter_obstacles(
        self,
        density: float,
        rng: np.random.Generator,
        protected: Iterable[int] = (),
    ) -> List[int]:
        """
        Paint obstacles onto a random fraction of the default cells.

        Protected indices and the goal are never painted.
        Returns the indices that became obstacles.
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError("Obstacle density must be between 0 and 1")

        skip = set(protected)
        candidates = [
            c.id for c in self.cells
            if c.cell_type == CellType.DEFAULT and c.id not in skip
        ]
        count = int(round(density * len(candidates)))
        if count == 0:
            return []

        chosen = rng.choice(candidates, size=count, replace=False)
        painted = sorted(int(i) for i in chosen)
        for cell_id in painted:
            self.cells[cell_id].cell_type = CellType.OBSTACLE
        return painted

    def path_ids(self) -> List[int]:
        """Indices currently marked as path."""
        return [c.id for c in self.cells if c.cell_type == CellType.PATH]

    def snapshot(self) -> "Grid":
        """Create a deep copy used as a working copy during search."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        size = self.cell_size
        goal = self.goal()
        return {
            "width": int(self.width),
            "height": int(self.height),
            "cell_size": float(size),
            "goal_id": goal.id if goal else None,
            "cells": [c.to_dict(size) for c in self.cells],
            "rows": [[c.id for c in row] for row in self.rows()],
        }
