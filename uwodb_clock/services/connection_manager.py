"""Tracks navbar WebSocket clients and broadcasts snapshots to them."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import WebSocket

from uwodb_clock.domain.phase import NavbarSnapshot

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Lock-guarded set of connected navbar clients."""

    def __init__(self) -> None:
        self._clients: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def connect(self, ws: WebSocket) -> None:
        await ws.accept()
        async with self._lock:
            self._clients.add(ws)
        logger.info("Navbar client connected (%d total)", len(self._clients))

    async def disconnect(self, ws: WebSocket) -> None:
        async with self._lock:
            self._clients.discard(ws)
        logger.info("Navbar client disconnected (%d remaining)", len(self._clients))

    @property
    def active_count(self) -> int:
        return len(self._clients)

    async def on_tick(self, snapshot: NavbarSnapshot) -> None:
        """Ticker callback: push the snapshot if anyone is listening."""
        if not self._clients:
            return
        await self.broadcast_json(snapshot.to_payload())

    async def broadcast_json(self, payload: dict[str, Any]) -> None:
        """Send a JSON payload to every client, dropping the ones that fail."""
        message = json.dumps(payload, default=str)
        dead: set[WebSocket] = set()

        async with self._lock:
            clients = set(self._clients)

        for ws in clients:
            try:
                await ws.send_text(message)
            except Exception as exc:
                logger.debug("Navbar send failed, dropping client: %s", exc, exc_info=True)
                dead.add(ws)

        if dead:
            async with self._lock:
                self._clients -= dead
            logger.info("Removed %d dead navbar client(s)", len(dead))
