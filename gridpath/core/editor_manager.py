"""Singleton manager for editor state and update broadcasting."""

import asyncio
from typing import Optional, Callable, List, Any, Tuple
from datetime import datetime
import logging

from gridpath.core.editor import (
    EditorConfig,
    EditorState,
    Command,
    create_editor_state,
    handle_command,
)

logger = logging.getLogger(__name__)


class EditorManager:
    """
    Singleton manager for the editor.

    Handles:
    - Configuration storage
    - Exclusive ownership of the editor state
    - Serialized command application
    - Update broadcasting
    """

    _instance: Optional["EditorManager"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._config: EditorConfig = EditorConfig()
        self._state: EditorState = create_editor_state(self._config)
        self._lock = asyncio.Lock()
        self._observers: List[Callable[[dict], Any]] = []

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def configure(self, config: EditorConfig) -> None:
        """Replace the configuration and start from an empty grid.

        Raises:
            ValueError: If the configuration cannot produce a valid grid
        """
        state = create_editor_state(config)
        self._config = config
        self._state = state
        logger.info(
            f"Editor configured: {config.grid_width}x{config.grid_height}, "
            f"start={config.start_index}, strategy={state.strategy.name}"
        )

    async def apply(self, command: Command) -> bool:
        """Apply a command and broadcast the new grid if it changed.

        Returns:
            Whether the grid needs to be redrawn
        """
        needs_redraw, _ = await self.apply_and_read(command)
        return needs_redraw

    async def apply_and_read(
        self,
        command: Command,
        read: Optional[Callable[[EditorState], Any]] = None
    ) -> Tuple[bool, Any]:
        """Apply a command and read from the resulting state under the same lock.

        Returns:
            (needs_redraw, read(state)), the second item None without a reader
        """
        async with self._lock:
            self._state, needs_redraw = handle_command(self._state, command)
            value = read(self._state) if read else None

        if needs_redraw:
            await self._broadcast_update()
        return needs_redraw, value

    async def reconfigure(self, config: EditorConfig) -> None:
        """Configure under the command lock and broadcast the empty grid."""
        async with self._lock:
            self.configure(config)
        await self._broadcast_update()

    async def _broadcast_update(self) -> None:
        """Broadcast grid update to all observers."""
        update = {
            "type": "grid_update",
            "timestamp": datetime.utcnow().isoformat(),
            **self.get_snapshot(),
        }

        logger.debug(f"Broadcasting to {len(self._observers)} observers")
        for observer in list(self._observers):
            try:
                await observer(update)
            except Exception as e:
                logger.warning(f"Observer error: {e}")

    def get_snapshot(self) -> dict:
        """Get current editor state snapshot."""
        return self._state.to_dict()

    def get_path_info(self) -> Optional[dict]:
        """Get the result of the most recent search, if any."""
        result = self._state.last_result
        return result.to_dict() if result else None

    def get_stats(self) -> dict:
        return self._state.stats.compile()

    def reset_stats(self) -> None:
        self._state.stats.reset()

    def add_observer(self, observer: Callable[[dict], Any]) -> None:
        """Register an observer for grid updates."""
        self._observers.append(observer)

    def remove_observer(self, observer: Callable[[dict], Any]) -> None:
        """Remove an observer."""
        if observer in self._observers:
            self._observers.remove(observer)


# Dependency for FastAPI
_manager_instance: Optional[EditorManager] = None


def get_editor_manager() -> EditorManager:
    """Get the singleton editor manager instance."""
    global _manager_instance
    if _manager_instance is None:
        _manager_instance = EditorManager()
    return _manager_instance
