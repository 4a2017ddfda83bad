"""Pathfinding module exports."""

from .search_strategies import (
    SearchStrategy,
    SearchStrategyType,
    SearchResult,
    LinearScanDijkstra,
    HeapDijkstra,
    NoGoalError,
    create_search_strategy,
    DEFAULT_SEARCH_STRATEGY,
)

from .stats import SearchRun, SearchStats

__all__ = [
    # Search strategies
    "SearchStrategy",
    "SearchStrategyType",
    "SearchResult",
    "LinearScanDijkstra",
    "HeapDijkstra",
    "NoGoalError",
    "create_search_strategy",
    "DEFAULT_SEARCH_STRATEGY",
    # Statistics
    "SearchRun",
    "SearchStats",
]
