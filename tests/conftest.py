"""Pytest fixtures for grid editor tests."""

import pytest
from fastapi.testclient import TestClient

from gridpath.core.editor import EditorConfig, EditorState, create_editor_state
from gridpath.core.editor_manager import get_editor_manager
from gridpath.main import app
from gridpath.models.entities import Grid, CellType
from gridpath.pathfinding import HeapDijkstra, LinearScanDijkstra, SearchStats


@pytest.fixture
def small_grid() -> Grid:
    """3x3 grid for neighborhood tests."""
    return Grid(width=3, height=3)


@pytest.fixture
def open_grid() -> Grid:
    """Obstacle-free 10x10 grid."""
    return Grid(width=10, height=10)


@pytest.fixture
def open_grid_with_goal(open_grid) -> Grid:
    """10x10 grid with the goal at (8, 9)."""
    open_grid.cells[98].cell_type = CellType.GOAL
    return open_grid


@pytest.fixture
def enclosed_goal_grid() -> Grid:
    """10x10 grid whose goal at (5, 5) is surrounded by obstacles."""
    grid = Grid(width=10, height=10)
    grid.cells[55].cell_type = CellType.GOAL
    for cell_id in (44, 45, 46, 54, 56, 64, 65, 66):
        grid.cells[cell_id].cell_type = CellType.OBSTACLE
    return grid


@pytest.fixture
def walled_grid() -> Grid:
    """10x10 grid with a wall at x=5 open only at the bottom row, goal at (9, 0)."""
    grid = Grid(width=10, height=10)
    for y in range(9):
        grid.cells[grid.id_of(5, y)].cell_type = CellType.OBSTACLE
    grid.cells[grid.id_of(9, 0)].cell_type = CellType.GOAL
    return grid


@pytest.fixture(params=[LinearScanDijkstra, HeapDijkstra], ids=["linear_scan", "binary_heap"])
def strategy(request):
    """Each search strategy in turn."""
    return request.param()


@pytest.fixture
def editor_config() -> EditorConfig:
    """Small editor configuration for fast tests."""
    return EditorConfig(grid_width=10, grid_height=10, random_seed=42)


@pytest.fixture
def editor_state(editor_config) -> EditorState:
    """Fresh editor state on a 10x10 grid."""
    return create_editor_state(editor_config)


@pytest.fixture
def search_stats() -> SearchStats:
    """Fresh statistics collector."""
    return SearchStats()


@pytest.fixture
def client(editor_config) -> TestClient:
    """HTTP client against a freshly configured editor."""
    get_editor_manager().configure(editor_config)
    return TestClient(app)
