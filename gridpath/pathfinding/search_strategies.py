"""Search strategy pattern for pluggable shortest-path searches.

Both strategies run Dijkstra's algorithm over the Moore-neighborhood graph
of a Grid, weighting edges by Euclidean distance (1 or sqrt(2)). They differ
only in how the next candidate is extracted:

- LinearScanDijkstra: scans every remaining candidate, O(n^2) per run
- HeapDijkstra: binary heap keyed by (distance, id), O((n + e) log n)

Ties are broken by the lowest cell index in both, so the two strategies
return the same path for the same grid.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
import heapq
import logging
import time

from gridpath.models.entities import Cell, Grid

logger = logging.getLogger(__name__)


class NoGoalError(LookupError):
    """Raised when a search is requested on a grid without a goal cell."""


class SearchStrategyType(str, Enum):
    """Enum for available search strategy types."""
    LINEAR_SCAN = "linear_scan"
    BINARY_HEAP = "binary_heap"


@dataclass
class SearchResult:
    """Outcome of a single search run."""
    start_id: int
    goal_id: int
    path: List[Cell] = field(default_factory=list)
    visited_count: int = 0
    cost: Optional[float] = None
    runtime: float = 0.0
    strategy: str = ""

    @property
    def reachable(self) -> bool:
        return self.cost is not None

    @property
    def path_ids(self) -> List[int]:
        return [c.id for c in self.path]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "start_id": self.start_id,
            "goal_id": self.goal_id,
            "path": self.path_ids,
            "reachable": self.reachable,
            "visited_count": self.visited_count,
            "cost": self.cost,
            "runtime": self.runtime,
            "strategy": self.strategy,
        }


class SearchStrategy(ABC):
    """Abstract base class for shortest-path search strategies.

    The base class owns everything except candidate extraction: working
    copy setup, relaxation, path reconstruction and writing visitation
    state back to the grid.

    Subclasses must implement:
    - _explore(): Visit candidates in distance order, filling predecessors
    """

    name: str = ""

    def find_path(self, grid: Grid, start: int) -> SearchResult:
        """Find the shortest path from start to the grid's goal.

        Args:
            grid: Grid to search. Its visited/distance markers are
                overwritten with the outcome of this run.
            start: Linear index of the start cell

        Returns:
            SearchResult whose path runs from the cell after start up to
            and including the goal. Empty when the goal is unreachable.

        Raises:
            NoGoalError: If the grid has no goal cell
            IndexError: If start lies outside the grid
        """
        goal = grid.goal()
        if goal is None:
            raise NoGoalError("A goal has to be placed before searching")
        grid.cell(start)

        began = time.perf_counter()

        work = grid.snapshot()
        for cell in work.cells:
            cell.visited = False
            cell.distance = float("inf")
        work.cells[start].distance = 0.0

        previous: Dict[int, int] = {}
        self._explore(work, start, previous)

        for source, target in zip(work.cells, grid.cells):
            target.visited = source.visited
            target.distance = source.distance

        path_ids = []
        current = goal.id
        while current in previous:
            path_ids.append(current)
            current = previous[current]
        path_ids.reverse()

        result = SearchResult(
            start_id=start,
            goal_id=goal.id,
            path=[grid.cells[i] for i in path_ids],
            visited_count=sum(1 for c in work.cells if c.visited),
            cost=work.cells[goal.id].distance if path_ids or goal.id == start else None,
            runtime=time.perf_counter() - began,
            strategy=self.name,
        )
        logger.debug(
            f"{self.name}: {len(path_ids)} path cells, "
            f"visited={result.visited_count}, runtime={result.runtime:.4f}s"
        )
        return result

    @abstractmethod
    def _explore(self, work: Grid, start: int, previous: Dict[int, int]) -> None:
        """Run the search loop on the working copy.

        Args:
            work: Working copy with start distance 0 and all others infinite
            start: Index of the start cell
            previous: Mapping from cell index to predecessor index, filled in place
        """
        pass

    def _relax_neighbors(
        self,
        work: Grid,
        current: Cell,
        previous: Dict[int, int]
    ) -> List[Cell]:
        """Relax edges out of current and return the neighbors that improved."""
        improved = []
        for neighbor in work.neighbors(current):
            alt = current.distance + work.distance(current, neighbor)
            if alt < neighbor.distance:
                neighbor.distance = alt
                previous[neighbor.id] = current.id
                improved.append(neighbor)
            if neighbor.is_goal:
                break
        return improved


class LinearScanDijkstra(SearchStrategy):
    """Dijkstra with linear-scan minimum extraction.

    Every cell starts in the candidate set; each iteration scans the whole
    set for the smallest distance. Unreachable cells are still extracted
    (at infinite distance) and marked visited.
    """

    name = SearchStrategyType.LINEAR_SCAN.value

    def _explore(self, work: Grid, start: int, previous: Dict[int, int]) -> None:
        candidates = list(work.cells)

        while candidates:
            # min() keeps the first minimum, i.e. the lowest index
            idx = min(range(len(candidates)), key=lambda i: candidates[i].distance)
            current = candidates.pop(idx)
            current.visited = True
            self._relax_neighbors(work, current, previous)


class HeapDijkstra(SearchStrategy):
    """Dijkstra with a binary heap and lazy deletion of stale entries.

    Only cells reachable from start are ever extracted.
    """

    name = SearchStrategyType.BINARY_HEAP.value

    def _explore(self, work: Grid, start: int, previous: Dict[int, int]) -> None:
        queue = [(0.0, start)]

        while queue:
            distance, cell_id = heapq.heappop(queue)
            current = work.cells[cell_id]
            if current.visited or distance > current.distance:
                continue
            current.visited = True
            for neighbor in self._relax_neighbors(work, current, previous):
                heapq.heappush(queue, (neighbor.distance, neighbor.id))


def create_search_strategy(strategy_type: SearchStrategyType) -> SearchStrategy:
    """Factory function to create search strategies by type.

    Args:
        strategy_type: The type of strategy to create

    Returns:
        A new instance of the requested strategy type

    Raises:
        ValueError: If strategy_type is not recognized
    """
    if strategy_type == SearchStrategyType.LINEAR_SCAN:
        return LinearScanDijkstra()
    elif strategy_type == SearchStrategyType.BINARY_HEAP:
        return HeapDijkstra()
    else:
        raise ValueError(f"Unknown search strategy type: {strategy_type}")


DEFAULT_SEARCH_STRATEGY = HeapDijkstra()
