"""FastAPI application entry point."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gridpath.api.v1.router import api_router
from gridpath.core.connection_manager import get_connection_manager
from gridpath.core.editor_manager import get_editor_manager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    editor = get_editor_manager()
    conn_manager = get_connection_manager()
    editor.add_observer(conn_manager.broadcast)
    logger.info("Editor manager initialized")

    yield

    # Shutdown
    editor.remove_observer(conn_manager.broadcast)
    logger.info("Editor manager stopped")


app = FastAPI(
    title="Grid Path Editor API",
    description="Interactive grid editor with Dijkstra shortest-path visualization",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware - allow all origins for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Grid Path Editor API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "connections": get_connection_manager().connection_count,
        "observers": get_editor_manager().observer_count,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
