"""Statistics collection for search runs."""

from dataclasses import dataclass, field
from typing import List, Optional, NamedTuple

from .search_strategies import SearchResult


class SearchRun(NamedTuple):
    """Record of a completed search."""
    strategy: str
    start_id: int
    goal_id: int
    path_length: int
    visited_count: int
    cost: Optional[float]
    runtime: float


@dataclass
class SearchStats:
    """Collects and aggregates search run statistics."""

    runs: List[SearchRun] = field(default_factory=list)
    skipped_runs: int = 0  # Edits made while no goal was placed

    def record(self, result: SearchResult) -> None:
        """Record a completed search."""
        self.runs.append(SearchRun(
            strategy=result.strategy,
            start_id=result.start_id,
            goal_id=result.goal_id,
            path_length=len(result.path),
            visited_count=result.visited_count,
            cost=result.cost,
            runtime=result.runtime,
        ))

    def record_skip(self) -> None:
        """Record an edit that had no goal to search for."""
        self.skipped_runs += 1

    @property
    def total_runs(self) -> int:
        return len(self.runs)

    @property
    def unreachable_runs(self) -> int:
        """Runs whose goal could not be reached."""
        return sum(1 for r in self.runs if r.cost is None)

    @property
    def last_run(self) -> Optional[SearchRun]:
        return self.runs[-1] if self.runs else None

    @property
    def average_runtime(self) -> float:
        """Average runtime in seconds."""
        if not self.runs:
            return 0.0
        return sum(r.runtime for r in self.runs) / len(self.runs)

    @property
    def max_runtime(self) -> float:
        if not self.runs:
            return 0.0
        return max(r.runtime for r in self.runs)

    def compile(self) -> dict:
        """Compile all statistics into a summary dictionary."""
        last = self.last_run
        return {
            "total_runs": self.total_runs,
            "skipped_runs": self.skipped_runs,
            "unreachable_runs": self.unreachable_runs,
            "average_runtime": self.average_runtime,
            "max_runtime": self.max_runtime,
            "last_run": last._asdict() if last else None,
        }

    def reset(self) -> None:
        """Reset all statistics."""
        self.runs.clear()
        self.skipped_runs = 0
