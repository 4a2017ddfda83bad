"""WebSocket connection manager for real-time grid updates."""

import asyncio
from typing import Set
from fastapi import WebSocket
import json
import logging

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Tracks open editor sockets and fans grid updates out to them.

    Registered as an EditorManager observer, so every redraw-worthy
    command reaches all connected browsers.
    """

    def __init__(self):
        self._connections: Set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new WebSocket connection."""
        await websocket.accept()

        async with self._lock:
            self._connections.add(websocket)
        logger.info(f"Client connected, {self.connection_count} active")

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a WebSocket connection."""
        async with self._lock:
            self._connections.discard(websocket)
        logger.info(f"Client disconnected, {self.connection_count} active")

    async def broadcast(self, message: dict) -> None:
        """Send a grid update to every client, dropping sockets that fail."""
        if not self._connections:
            return

        json_message = json.dumps(message, default=str)

        stale = []
        for websocket in list(self._connections):
            try:
                await websocket.send_text(json_message)
            except Exception:
                stale.append(websocket)

        for ws in stale:
            await self.disconnect(ws)

    async def send_to(self, websocket: WebSocket, message: dict) -> None:
        """Send message to specific client."""
        try:
            await websocket.send_json(message)
        except Exception as e:
            logger.warning(f"WebSocket send error: {e}")
            await self.disconnect(websocket)

    @property
    def connection_count(self) -> int:
        return len(self._connections)


connection_manager = ConnectionManager()


def get_connection_manager() -> ConnectionManager:
    """Get the global connection manager instance."""
    return connection_manager
