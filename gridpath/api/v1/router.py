"""API router aggregator."""

from fastapi import APIRouter

from gridpath.api.v1 import grid, configuration, stats, websocket

api_router = APIRouter()

api_router.include_router(grid.router)
api_router.include_router(configuration.router)
api_router.include_router(stats.router)
api_router.include_router(websocket.router)
