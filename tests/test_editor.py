"""Tests for the edit/reset orchestration."""

import pytest

from gridpath.core.editor import (
    BeginDrag,
    ClearGrid,
    EditorConfig,
    EndDrag,
    RunSearch,
    ScatterObstacles,
    SetDrawingMode,
    ToggleCell,
    create_editor_state,
    handle_command,
    refresh_path,
    resolve_search_strategy,
)
from gridpath.models.entities import CellType, DrawingMode
from gridpath.pathfinding import (
    DEFAULT_SEARCH_STRATEGY,
    HeapDijkstra,
    LinearScanDijkstra,
    SearchStrategyType,
)


def paint(state, mode, *indices):
    """Force-paint cells with the given brush."""
    state, _ = handle_command(state, SetDrawingMode(mode))
    for index in indices:
        state, _ = handle_command(state, ToggleCell(index=index, force=True))
    return state


class TestToolbarCommands:
    """Tests for mode and drag commands."""

    def test_default_drawing_mode(self, editor_state):
        assert editor_state.drawing == DrawingMode.OBSTACLE
        assert editor_state.is_drawing is False

    def test_set_mode(self, editor_state):
        state, redraw = handle_command(editor_state, SetDrawingMode(DrawingMode.GOAL))
        assert state.drawing == DrawingMode.GOAL
        assert redraw is True

    def test_drag_cycle(self, editor_state):
        state, _ = handle_command(editor_state, BeginDrag())
        assert state.is_drawing is True
        state, _ = handle_command(state, EndDrag())
        assert state.is_drawing is False


class TestToggleCell:
    """Tests for cell editing."""

    def test_ignored_when_not_dragging(self, editor_state):
        state, redraw = handle_command(editor_state, ToggleCell(index=5))

        assert redraw is False
        assert state.grid.cells[5].cell_type == CellType.DEFAULT

    def test_applied_while_dragging(self, editor_state):
        state, _ = handle_command(editor_state, BeginDrag())
        state, redraw = handle_command(state, ToggleCell(index=5))

        assert redraw is True
        assert state.grid.cells[5].cell_type == CellType.OBSTACLE

    def test_forced_click(self, editor_state):
        state, redraw = handle_command(editor_state, ToggleCell(index=5, force=True))

        assert redraw is True
        assert state.grid.cells[5].cell_type == CellType.OBSTACLE

    def test_out_of_range(self, editor_state):
        with pytest.raises(IndexError):
            handle_command(editor_state, ToggleCell(index=100, force=True))

    def test_goal_triggers_search(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)

        assert state.last_result is not None
        assert state.last_result.path_ids[-1] == 98
        assert state.grid.cells[98].cell_type == CellType.GOAL
        assert set(state.grid.path_ids()) == set(state.last_result.path_ids[:-1])

    def test_start_never_marked(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)
        assert state.grid.cells[0].cell_type == CellType.DEFAULT

    def test_path_follows_edits(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)
        first_path = state.grid.path_ids()

        blocked = first_path[0]
        state = paint(state, DrawingMode.OBSTACLE, blocked)

        assert state.grid.cells[blocked].cell_type == CellType.OBSTACLE
        assert blocked not in state.grid.path_ids()
        assert state.last_result.reachable


class TestNoGoalSafety:
    """Tests that editing without a goal never searches."""

    def test_no_search_without_goal(self, editor_state):
        state = paint(editor_state, DrawingMode.OBSTACLE, 5, 15, 25)

        assert state.last_result is None
        assert state.stats.total_runs == 0
        assert state.stats.skipped_runs == 3
        assert all(not c.visited for c in state.grid.cells)
        assert {c.cell_type for c in state.grid.cells} <= {CellType.DEFAULT, CellType.OBSTACLE}

    def test_erasing_goal_clears_path(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)
        assert state.grid.path_ids()

        state = paint(state, DrawingMode.DEFAULT, 98)

        assert state.grid.goal() is None
        assert state.grid.path_ids() == []
        assert state.last_result is None
        assert all(not c.visited for c in state.grid.cells)

    def test_run_search_without_goal(self, editor_state):
        state, redraw = handle_command(editor_state, RunSearch())
        assert redraw is True
        assert state.last_result is None


class TestResetCycle:
    """Tests for the full reset-and-rerun after each edit."""

    def test_idempotent_rerun(self, editor_state):
        state = paint(editor_state, DrawingMode.OBSTACLE, 44, 45, 46)
        state = paint(state, DrawingMode.GOAL, 98)

        state, _ = handle_command(state, RunSearch())
        first = state.grid.path_ids()
        state, _ = handle_command(state, RunSearch())
        second = state.grid.path_ids()

        assert first == second
        assert first

    def test_unreachable_goal_marks_nothing(self, editor_state):
        state = paint(editor_state, DrawingMode.OBSTACLE, 44, 45, 46, 54, 56, 64, 65, 66)
        state = paint(state, DrawingMode.GOAL, 55)

        assert state.last_result is not None
        assert state.last_result.path == []
        assert state.grid.path_ids() == []
        assert state.stats.unreachable_runs == 1

    def test_moving_goal_moves_path(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)
        state = paint(state, DrawingMode.GOAL, 9)

        assert state.grid.goal().id == 9
        assert state.grid.cells[98].cell_type == CellType.DEFAULT
        assert state.last_result.path_ids == list(range(1, 10))

    def test_clear_grid(self, editor_state):
        state = paint(editor_state, DrawingMode.OBSTACLE, 5, 6)
        state = paint(state, DrawingMode.GOAL, 98)

        state, _ = handle_command(state, ClearGrid())

        assert all(c.cell_type == CellType.DEFAULT for c in state.grid.cells)
        assert state.last_result is None

    def test_scatter_keeps_start_free(self, editor_state):
        state = paint(editor_state, DrawingMode.GOAL, 98)
        state, _ = handle_command(state, ScatterObstacles(density=0.3, seed=3))

        assert state.grid.cells[0].cell_type == CellType.DEFAULT
        assert state.grid.cells[98].cell_type == CellType.GOAL
        assert state.last_result is not None

    def test_refresh_path_returns_result(self, editor_state):
        editor_state.grid.cells[11].cell_type = CellType.GOAL
        result = refresh_path(editor_state)
        assert result.path_ids == [11]


class TestEditorConfig:
    """Tests for building editor state from configuration."""

    def test_defaults(self):
        config = EditorConfig()
        assert config.grid_width == 20
        assert config.grid_height == 20
        assert config.start_index == 0

    def test_start_outside_grid(self):
        with pytest.raises(ValueError):
            create_editor_state(EditorConfig(grid_width=5, grid_height=5, start_index=25))

    def test_custom_start(self):
        state = create_editor_state(EditorConfig(grid_width=5, grid_height=5, start_index=12))
        state = paint(state, DrawingMode.GOAL, 14)
        assert state.last_result.path_ids == [13, 14]

    def test_resolve_strategies(self):
        assert resolve_search_strategy(None) is DEFAULT_SEARCH_STRATEGY
        assert isinstance(resolve_search_strategy(None), HeapDijkstra)
        assert isinstance(resolve_search_strategy("linear_scan"), LinearScanDijkstra)
        assert isinstance(resolve_search_strategy(SearchStrategyType.BINARY_HEAP), HeapDijkstra)
        custom = LinearScanDijkstra()
        assert resolve_search_strategy(custom) is custom

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            resolve_search_strategy("bellman_ford")
