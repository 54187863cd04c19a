"""WebSocket endpoint with JWT auth."""

from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from safecircle.core.errors import AuthError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint. Client connects with ?token=<jwt>.
    Server pushes events: notification.created
    """
    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=4001, reason="Missing token")
        return

    try:
        claims = websocket.app.state.token_service.verify(token)
    except AuthError as e:
        logger.info("WS rejected: %s", e.message)
        await websocket.close(code=4003, reason="Invalid or expired token")
        return

    manager = websocket.app.state.ws_manager
    await manager.connect(websocket, claims.user_id)
    try:
        while True:
            # Keep connection alive; client can send pings
            data = await websocket.receive_text()
            if data == "ping":
                await websocket.send_text('{"event":"pong"}')
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket, claims.user_id)
