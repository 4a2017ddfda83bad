"""Editor state and command handling for the grid editor.

The editor state is owned by exactly one caller at a time. Commands are
applied with handle_command(), which returns the state together with a
flag telling the caller whether the grid needs to be redrawn.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
import logging

import numpy as np

from gridpath.models.entities import Grid, CellType, DrawingMode
from gridpath.pathfinding import (
    SearchStrategy,
    SearchStrategyType,
    SearchResult,
    SearchStats,
    DEFAULT_SEARCH_STRATEGY,
    create_search_strategy,
)

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Configuration for the editor."""
    # Grid dimensions
    grid_width: int = 20
    grid_height: int = 20

    # Fixed start cell of every search
    start_index: int = 0

    # Can be a SearchStrategyType, a SearchStrategy instance, or None (uses default)
    search_strategy: Optional[Union[SearchStrategyType, SearchStrategy]] = SearchStrategyType.BINARY_HEAP

    # Random seed for obstacle scattering
    random_seed: Optional[int] = None


@dataclass
class EditorState:
    """Complete editor state: the grid plus the toolbar and drag state."""
    grid: Grid
    strategy: SearchStrategy
    drawing: DrawingMode = DrawingMode.OBSTACLE
    is_drawing: bool = False
    start_index: int = 0
    stats: SearchStats = field(default_factory=SearchStats)
    last_result: Optional[SearchResult] = None
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "drawing": self.drawing.value,
            "is_drawing": self.is_drawing,
            "start_index": self.start_index,
            "strategy": self.strategy.name,
            "last_result": self.last_result.to_dict() if self.last_result else None,
            **self.grid.to_dict(),
        }


@dataclass(frozen=True)
class SetDrawingMode:
    mode: DrawingMode


@dataclass(frozen=True)
class BeginDrag:
    pass


@dataclass(frozen=True)
class EndDrag:
    pass


@dataclass(frozen=True)
class ToggleCell:
    """Paint a cell; ignored unless dragging or forced (single click)."""
    index: int
    force: bool = False


@dataclass(frozen=True)
class RunSearch:
    pass


@dataclass(frozen=True)
class ClearGrid:
    pass


@dataclass(frozen=True)
class ScatterObstacles:
    density: float
    seed: Optional[int] = None


Command = Union[
    SetDrawingMode, BeginDrag, EndDrag, ToggleCell,
    RunSearch, ClearGrid, ScatterObstacles,
]


def resolve_search_strategy(
    strategy: Optional[Union[SearchStrategyType, SearchStrategy, str]]
) -> SearchStrategy:
    """Resolve strategy configuration to a SearchStrategy instance."""
    if strategy is None:
        return DEFAULT_SEARCH_STRATEGY
    elif isinstance(strategy, SearchStrategy):
        return strategy
    elif isinstance(strategy, SearchStrategyType):
        return create_search_strategy(strategy)
    else:
        try:
            return create_search_strategy(SearchStrategyType(strategy))
        except ValueError:
            raise ValueError(f"Unknown search strategy: {strategy}")


def create_editor_state(config: EditorConfig) -> EditorState:
    """Build a fresh editor state from configuration."""
    grid = Grid(width=config.grid_width, height=config.grid_height)
    if not grid.contains(config.start_index):
        raise ValueError(
            f"Start index {config.start_index} outside "
            f"{config.grid_width}x{config.grid_height} grid"
        )
    return EditorState(
        grid=grid,
        strategy=resolve_search_strategy(config.search_strategy),
        start_index=config.start_index,
        rng=np.random.default_rng(config.random_seed),
    )


def refresh_path(state: EditorState) -> Optional[SearchResult]:
    """Reset markers and recompute the path from scratch.

    Without a goal the search is skipped and the grid is left with no
    visited cells and no path.
    """
    grid = state.grid
    grid.reset_markers()

    if grid.goal() is None:
        state.last_result = None
        state.stats.record_skip()
        return None

    result = state.strategy.find_path(grid, state.start_index)
    for cell in result.path:
        if cell.cell_type != CellType.GOAL:
            cell.cell_type = CellType.PATH

    state.last_result = result
    state.stats.record(result)
    return result


def handle_command(state: EditorState, command: Command) -> Tuple[EditorState, bool]:
    """Apply one command to the editor state.

    Args:
        state: State owned by the caller for the duration of the call
        command: Command to apply

    Returns:
        (state, needs_redraw)

    Raises:
        IndexError: If a ToggleCell index lies outside the grid
        ValueError: If a command carries invalid parameters
    """
    if isinstance(command, SetDrawingMode):
        state.drawing = DrawingMode(command.mode)
        return state, True

    elif isinstance(command, BeginDrag):
        state.is_drawing = True
        return state, True

    elif isinstance(command, EndDrag):
        state.is_drawing = False
        return state, True

    elif isinstance(command, ToggleCell):
        if not (state.is_drawing or command.force):
            return state, False
        state.grid.manipulate_cell(command.index, state.drawing)
        refresh_path(state)
        return state, True

    elif isinstance(command, RunSearch):
        refresh_path(state)
        return state, True

    elif isinstance(command, ClearGrid):
        state.grid.clear()
        refresh_path(state)
        return state, True

    elif isinstance(command, ScatterObstacles):
        rng = state.rng if command.seed is None else np.random.default_rng(command.seed)
        # Path cells count as free space
        state.grid.reset_markers()
        painted = state.grid.scatter_obstacles(
            command.density, rng, protected=(state.start_index,)
        )
        logger.info(f"Scattered {len(painted)} obstacles (density={command.density})")
        refresh_path(state)
        return state, True

    else:
        raise ValueError(f"Unknown command: {command!r}")
