from .cell import Cell, CellType, DrawingMode
from .position import Position
from .grid import Grid

__all__ = [
    "Cell",
    "CellType",
    "DrawingMode",
    "Position",
    "Grid",
]
