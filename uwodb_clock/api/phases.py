"""REST endpoints for one-shot phase readings.

Paths:
    GET /api/navbar   full navbar snapshot
    GET /api/season   season reading only
    GET /api/port     port reading only

Each accepts an optional ``at`` query parameter (ISO 8601 with offset) to
evaluate a specific instant instead of the server clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, HTTPException

from uwodb_clock.core.calculator import TimePhaseCalculator


def _require_aware(at: Optional[datetime]) -> None:
    if at is not None and (at.tzinfo is None or at.utcoffset() is None):
        raise HTTPException(status_code=400, detail="'at' must include a timezone offset")


def create_phases_router(calculator: TimePhaseCalculator) -> APIRouter:
    """Factory that wires the phase endpoints to a calculator."""

    router = APIRouter(prefix="/api", tags=["phases"])

    @router.get("/navbar")
    async def navbar(at: Optional[datetime] = None) -> dict[str, Any]:
        _require_aware(at)
        return calculator.snapshot(at).to_payload()

    @router.get("/season")
    async def season(at: Optional[datetime] = None) -> dict[str, Any]:
        _require_aware(at)
        reading = calculator.season(at)
        return {
            "label": reading.label.value,
            "progress": reading.progress,
            "remaining_seconds": reading.remaining.total_seconds(),
            "next_change": reading.next_change_label,
            "countdown": reading.remaining_countdown,
            "ring": reading.ring.model_dump(),
        }

    @router.get("/port")
    async def port(at: Optional[datetime] = None) -> dict[str, Any]:
        _require_aware(at)
        reading = calculator.port(at)
        return {
            "label": reading.label.value,
            "icon": reading.icon,
            "progress": reading.progress,
            "remaining_seconds": reading.remaining.total_seconds(),
            "countdown": reading.remaining_countdown,
            "ring": reading.ring.model_dump(),
        }

    return router
