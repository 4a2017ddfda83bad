"""Tests for search statistics collection."""

import pytest

from gridpath.models.entities import CellType, Grid
from gridpath.pathfinding import HeapDijkstra, SearchResult


class TestSearchStatsUnit:
    """Unit tests for SearchStats."""

    def test_initial_state(self, search_stats):
        assert search_stats.total_runs == 0
        assert search_stats.skipped_runs == 0
        assert search_stats.unreachable_runs == 0
        assert search_stats.average_runtime == 0.0
        assert search_stats.max_runtime == 0.0
        assert search_stats.last_run is None

    def test_record_run(self, search_stats, open_grid_with_goal):
        result = HeapDijkstra().find_path(open_grid_with_goal, 0)
        search_stats.record(result)

        assert search_stats.total_runs == 1
        assert search_stats.last_run.goal_id == 98
        assert search_stats.last_run.path_length == 9
        assert search_stats.last_run.strategy == "binary_heap"

    def test_unreachable_counted(self, search_stats, enclosed_goal_grid):
        search_stats.record(HeapDijkstra().find_path(enclosed_goal_grid, 0))
        assert search_stats.unreachable_runs == 1

    def test_goal_on_start_is_reachable(self, search_stats):
        grid = Grid(width=5, height=5)
        grid.cells[0].cell_type = CellType.GOAL

        search_stats.record(HeapDijkstra().find_path(grid, 0))

        assert search_stats.unreachable_runs == 0
        assert search_stats.last_run.cost == 0.0

    def test_runtime_aggregates(self, search_stats):
        search_stats.record(SearchResult(start_id=0, goal_id=1, runtime=0.2))
        search_stats.record(SearchResult(start_id=0, goal_id=1, runtime=0.4))

        assert search_stats.average_runtime == pytest.approx(0.3)
        assert search_stats.max_runtime == pytest.approx(0.4)

    def test_compile(self, search_stats):
        search_stats.record_skip()
        search_stats.record(SearchResult(start_id=0, goal_id=1, runtime=0.1))

        summary = search_stats.compile()

        assert summary["total_runs"] == 1
        assert summary["skipped_runs"] == 1
        assert summary["unreachable_runs"] == 1
        assert summary["last_run"]["goal_id"] == 1

    def test_reset(self, search_stats):
        search_stats.record_skip()
        search_stats.record(SearchResult(start_id=0, goal_id=1))
        search_stats.reset()

        assert search_stats.total_runs == 0
        assert search_stats.skipped_runs == 0
