"""Pydantic schemas for search statistics API."""

from pydantic import BaseModel
from typing import Optional


class SearchRunRecord(BaseModel):
    """Record of a completed search."""
    strategy: str
    start_id: int
    goal_id: int
    path_length: int
    visited_count: int
    cost: Optional[float]
    runtime: float


class SearchStatsSummary(BaseModel):
    """Aggregated statistics over all searches since the last reset."""
    total_runs: int
    skipped_runs: int
    unreachable_runs: int
    average_runtime: float
    max_runtime: float
    last_run: Optional[SearchRunRecord] = None
