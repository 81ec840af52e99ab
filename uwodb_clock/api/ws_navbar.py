"""Navbar WebSocket — pushes a phase snapshot to the frontend every tick.

Path: /ws/navbar

On connect the client immediately receives the current snapshot, then one
more per ticker interval.  The client only listens; "ping" is answered
with "pong".
"""

from __future__ import annotations

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from uwodb_clock.core.calculator import TimePhaseCalculator
from uwodb_clock.services.connection_manager import ConnectionManager


def create_navbar_router(
    manager: ConnectionManager,
    calculator: TimePhaseCalculator,
) -> APIRouter:
    """Factory that wires the navbar endpoint to a manager and calculator."""

    router = APIRouter()

    @router.websocket("/ws/navbar")
    async def navbar_ws(websocket: WebSocket) -> None:
        await manager.connect(websocket)
        try:
            await websocket.send_json(calculator.snapshot().to_payload())
            while True:
                data = await websocket.receive_text()
                if data.strip().lower() == "ping":
                    await websocket.send_text("pong")
        except WebSocketDisconnect:
            pass
        finally:
            await manager.disconnect(websocket)

    return router
