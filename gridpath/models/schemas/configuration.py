"""Pydantic schemas for configuration API."""

from pydantic import BaseModel, Field
from typing import Optional

from gridpath.pathfinding import SearchStrategyType


class GridConfig(BaseModel):
    """Configuration for the editor grid."""
    width: int = Field(default=20, ge=1, le=30, description="Grid width")
    height: int = Field(default=20, ge=1, le=30, description="Grid height")


class EditorConfigRequest(BaseModel):
    """Request body for setting the editor configuration."""
    grid: GridConfig = Field(default_factory=GridConfig)
    start_index: int = Field(default=0, ge=0, description="Linear index of the start cell")
    search_strategy: SearchStrategyType = Field(
        default=SearchStrategyType.BINARY_HEAP,
        description="Minimum-extraction strategy for Dijkstra's algorithm"
    )
    random_seed: Optional[int] = Field(default=None, description="Seed for obstacle scattering")

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "grid": {"width": 20, "height": 20},
                "start_index": 0,
                "search_strategy": "binary_heap",
                "random_seed": 42
            }]
        }
    }


class EditorConfigResponse(BaseModel):
    """Current editor configuration."""
    grid: GridConfig
    start_index: int
    search_strategy: SearchStrategyType
    random_seed: Optional[int]
