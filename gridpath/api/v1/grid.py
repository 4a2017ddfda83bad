"""Grid editing API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from gridpath.core.editor import (
    SetDrawingMode,
    BeginDrag,
    EndDrag,
    ToggleCell,
    RunSearch,
    ClearGrid,
    ScatterObstacles,
)
from gridpath.core.editor_manager import EditorManager, get_editor_manager
from gridpath.models.schemas.editor import (
    GridSnapshot,
    SearchResultSchema,
    DrawingModeRequest,
    ScatterRequest,
    EditorControlResponse,
)

router = APIRouter(prefix="/grid", tags=["Grid Editing"])


@router.get("/", response_model=GridSnapshot)
async def get_grid(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Get the current grid projection."""
    return GridSnapshot(**editor.get_snapshot())


@router.get("/path", response_model=SearchResultSchema)
async def get_path(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Get the result of the most recent search."""
    info = editor.get_path_info()
    if not info:
        raise HTTPException(status_code=404, detail="No goal placed")
    return SearchResultSchema(**info)


@router.put("/mode", response_model=EditorControlResponse)
async def set_drawing_mode(
    request: DrawingModeRequest,
    editor: EditorManager = Depends(get_editor_manager)
):
    """Select the drawing brush."""
    needs_redraw = await editor.apply(SetDrawingMode(request.mode))
    return EditorControlResponse(
        message=f"Drawing mode set to {request.mode.value}",
        needs_redraw=needs_redraw
    )


@router.post("/drag/start", response_model=EditorControlResponse)
async def begin_drag(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Start painting; toggles are applied until the drag stops."""
    needs_redraw = await editor.apply(BeginDrag())
    return EditorControlResponse(message="Drag started", needs_redraw=needs_redraw)


@router.post("/drag/stop", response_model=EditorControlResponse)
async def end_drag(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Stop painting."""
    needs_redraw = await editor.apply(EndDrag())
    return EditorControlResponse(message="Drag stopped", needs_redraw=needs_redraw)


@router.post("/cells/{index}/toggle", response_model=EditorControlResponse)
async def toggle_cell(
    index: int,
    force: bool = Query(False, description="Apply even when not dragging"),
    editor: EditorManager = Depends(get_editor_manager)
):
    """Paint a cell with the current brush and recompute the path."""
    try:
        needs_redraw = await editor.apply(ToggleCell(index=index, force=force))
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return EditorControlResponse(
        message="Cell updated" if needs_redraw else "Not drawing, cell unchanged",
        needs_redraw=needs_redraw
    )


@router.post("/search", response_model=EditorControlResponse)
async def run_search(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Recompute the path without editing a cell."""
    needs_redraw = await editor.apply(RunSearch())
    message = "Path computed" if editor.state.last_result else "No goal placed, search skipped"
    return EditorControlResponse(message=message, needs_redraw=needs_redraw)


@router.post("/clear", response_model=EditorControlResponse)
async def clear_grid(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Reset every cell to default."""
    needs_redraw = await editor.apply(ClearGrid())
    return EditorControlResponse(message="Grid cleared", needs_redraw=needs_redraw)


@router.post("/scatter", response_model=EditorControlResponse)
async def scatter_obstacles(
    request: ScatterRequest,
    editor: EditorManager = Depends(get_editor_manager)
):
    """Cover a random fraction of free cells with obstacles."""
    needs_redraw = await editor.apply(
        ScatterObstacles(density=request.density, seed=request.seed)
    )
    return EditorControlResponse(message="Obstacles scattered", needs_redraw=needs_redraw)
