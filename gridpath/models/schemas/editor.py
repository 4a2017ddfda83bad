"""Pydantic schemas for the grid editing API."""

from pydantic import BaseModel, Field
from typing import Optional, List

from gridpath.models.entities import DrawingMode


class CellSchema(BaseModel):
    """Per-cell projection consumed by the renderer."""
    id: int
    type: str
    class_name: str
    size: float


class SearchResultSchema(BaseModel):
    """Outcome of the most recent search."""
    start_id: int
    goal_id: int
    path: List[int]
    reachable: bool
    visited_count: int
    cost: Optional[float]
    runtime: float
    strategy: str


class GridSnapshot(BaseModel):
    """Complete snapshot of the editor state."""
    width: int
    height: int
    cell_size: float
    goal_id: Optional[int]
    drawing: str
    is_drawing: bool
    start_index: int
    strategy: str
    cells: List[CellSchema]
    rows: List[List[int]]
    last_result: Optional[SearchResultSchema] = None


class DrawingModeRequest(BaseModel):
    """Request to change the drawing brush."""
    mode: DrawingMode


class ScatterRequest(BaseModel):
    """Request to scatter random obstacles over free cells."""
    density: float = Field(default=0.2, ge=0.0, le=1.0, description="Fraction of free cells to cover")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible layouts")


class EditorControlResponse(BaseModel):
    """Response for editor control actions."""
    message: str
    needs_redraw: bool
