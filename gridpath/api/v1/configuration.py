"""Configuration API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from gridpath.core.editor import EditorConfig
from gridpath.core.editor_manager import EditorManager, get_editor_manager
from gridpath.models.schemas.configuration import (
    EditorConfigRequest,
    EditorConfigResponse,
    GridConfig,
)
from gridpath.pathfinding import SearchStrategyType

router = APIRouter(prefix="/config", tags=["Configuration"])


@router.get("/", response_model=EditorConfigResponse)
async def get_configuration(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Get current editor configuration."""
    config = editor.config
    return EditorConfigResponse(
        grid=GridConfig(width=config.grid_width, height=config.grid_height),
        start_index=config.start_index,
        search_strategy=SearchStrategyType(editor.state.strategy.name),
        random_seed=config.random_seed,
    )


@router.put("/")
async def set_configuration(
    request: EditorConfigRequest,
    editor: EditorManager = Depends(get_editor_manager)
):
    """Set editor configuration. Replaces the grid with an empty one."""
    config = EditorConfig(
        grid_width=request.grid.width,
        grid_height=request.grid.height,
        start_index=request.start_index,
        search_strategy=request.search_strategy,
        random_seed=request.random_seed,
    )
    try:
        await editor.reconfigure(config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "Configuration updated", "status": "configured"}


@router.post("/validate")
async def validate_configuration(
    request: EditorConfigRequest,
):
    """Validate configuration without applying."""
    # Pydantic already validates field ranges
    errors = []

    cell_count = request.grid.width * request.grid.height
    if request.start_index >= cell_count:
        errors.append(
            f"Start index {request.start_index} exceeds grid of {cell_count} cells"
        )

    if errors:
        return {"valid": False, "errors": errors}

    return {"valid": True, "errors": []}
