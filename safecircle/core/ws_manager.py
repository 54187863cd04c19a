"""WebSocket connection manager for real-time events."""

import json
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks active WebSocket connections keyed by user_id."""

    def __init__(self) -> None:
        # user_id -> set of active websocket connections
        self._connections: dict[int, set[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, user_id: int) -> None:
        await websocket.accept()
        self._connections.setdefault(user_id, set()).add(websocket)
        logger.info("WS connected: user=%s (total=%s)", user_id, self.total_connections)

    def disconnect(self, websocket: WebSocket, user_id: int) -> None:
        conns = self._connections.get(user_id)
        if conns:
            conns.discard(websocket)
            if not conns:
                del self._connections[user_id]
        logger.info("WS disconnected: user=%s (total=%s)", user_id, self.total_connections)

    def is_connected(self, user_id: int) -> bool:
        return bool(self._connections.get(user_id))

    async def send_to_user(self, user_id: int, event: str, data: Any) -> int:
        """Send event to all connections for a user. Returns how many received it."""
        conns = self._connections.get(user_id)
        if not conns:
            return 0
        payload = json.dumps({"event": event, "data": data}, default=str)
        dead: list[WebSocket] = []
        delivered = 0
        for ws in list(conns):
            try:
                await ws.send_text(payload)
                delivered += 1
            except Exception:
                logger.warning("Dropping dead WS for user=%s", user_id)
                dead.append(ws)
        for ws in dead:
            self.disconnect(ws, user_id)
        return delivered

    @property
    def total_connections(self) -> int:
        return sum(len(c) for c in self._connections.values())
