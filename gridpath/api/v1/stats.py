"""Search statistics API endpoints."""

from fastapi import APIRouter, Depends

from gridpath.core.editor_manager import EditorManager, get_editor_manager
from gridpath.models.schemas.stats import SearchStatsSummary

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/current", response_model=SearchStatsSummary)
async def get_current_stats(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Get aggregated search statistics."""
    return SearchStatsSummary(**editor.get_stats())


@router.post("/reset", response_model=SearchStatsSummary)
async def reset_stats(
    editor: EditorManager = Depends(get_editor_manager)
):
    """Clear recorded search statistics."""
    editor.reset_stats()
    return SearchStatsSummary(**editor.get_stats())
