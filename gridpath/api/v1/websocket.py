"""WebSocket endpoint for interactive grid editing."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from datetime import datetime
import logging

from gridpath.core.connection_manager import get_connection_manager
from gridpath.core.editor import (
    SetDrawingMode,
    BeginDrag,
    EndDrag,
    ToggleCell,
    RunSearch,
    ClearGrid,
)
from gridpath.core.editor_manager import get_editor_manager
from gridpath.models.entities import DrawingMode

router = APIRouter(tags=["WebSocket"])
logger = logging.getLogger(__name__)


@router.websocket("/ws/grid")
async def websocket_grid(
    websocket: WebSocket,
):
    """
    WebSocket endpoint for interactive editing.

    The server will broadcast:
    - grid_update: Full grid projection after every redraw-worthy command

    The client can send:
    - {"type": "set_mode", "mode": "default|obstacle|goal"}
    - {"type": "drag_start"} / {"type": "drag_stop"}
    - {"type": "toggle", "index": int, "force": bool}
    - {"type": "search"} / {"type": "clear"}
    - {"type": "ping"}
    """
    conn_manager = get_connection_manager()
    editor = get_editor_manager()

    await conn_manager.connect(websocket)

    try:
        await websocket.send_json({
            "type": "initial_state",
            "timestamp": datetime.utcnow().isoformat(),
            **editor.get_snapshot(),
        })

        while True:
            data = await websocket.receive_json()

            try:
                if not isinstance(data, dict):
                    raise ValueError("Message must be a JSON object")
                msg_type = data.get("type")

                if msg_type == "set_mode":
                    mode = DrawingMode(data.get("mode"))
                    await editor.apply(SetDrawingMode(mode))
                    await conn_manager.send_to(websocket, {
                        "type": "mode_ack",
                        "mode": mode.value,
                    })

                elif msg_type in ("drag_start", "drag_stop"):
                    command = BeginDrag() if msg_type == "drag_start" else EndDrag()
                    _, is_drawing = await editor.apply_and_read(
                        command, lambda state: state.is_drawing
                    )
                    await conn_manager.send_to(websocket, {
                        "type": "drag_ack",
                        "is_drawing": is_drawing,
                    })

                elif msg_type == "toggle":
                    index = int(data["index"])
                    needs_redraw = await editor.apply(ToggleCell(
                        index=index,
                        force=bool(data.get("force", False)),
                    ))
                    await conn_manager.send_to(websocket, {
                        "type": "toggle_ack",
                        "index": index,
                        "applied": needs_redraw,
                    })

                elif msg_type in ("search", "clear"):
                    command = RunSearch() if msg_type == "search" else ClearGrid()
                    _, path = await editor.apply_and_read(
                        command, lambda state: state.grid.path_ids()
                    )
                    await conn_manager.send_to(websocket, {
                        "type": f"{msg_type}_ack",
                        "path": path,
                    })

                elif msg_type == "ping":
                    await conn_manager.send_to(websocket, {
                        "type": "pong",
                        "timestamp": datetime.utcnow().isoformat(),
                    })

                else:
                    raise ValueError(f"Unknown message type: {msg_type}")

            except (KeyError, ValueError, IndexError, TypeError) as e:
                await conn_manager.send_to(websocket, {
                    "type": "error",
                    "message": str(e),
                })

    except WebSocketDisconnect:
        pass
    finally:
        await conn_manager.disconnect(websocket)
