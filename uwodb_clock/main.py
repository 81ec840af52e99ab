"""uwodb-clock — season and port phase service for the UWO Database navbar.

This is the application entry point.  It wires the TimePhaseCalculator,
the once-per-second PhaseTicker, and the HTTP/WebSocket endpoints together.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from uwodb_clock.api.phases import create_phases_router
from uwodb_clock.api.ws_navbar import create_navbar_router
from uwodb_clock.config import settings
from uwodb_clock.core.calculator import TimePhaseCalculator
from uwodb_clock.services.connection_manager import ConnectionManager
from uwodb_clock.services.ticker import PhaseTicker

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── Calculator (fails fast on bad season/timezone config) ────────────────────

calculator = TimePhaseCalculator.from_settings(settings)

# ── State ────────────────────────────────────────────────────────────────────

manager = ConnectionManager()
ticker = PhaseTicker(
    calculator,
    on_tick=manager.on_tick,
    interval=settings.tick_interval_seconds,
)

# ── App ──────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    ticker.start()
    try:
        yield
    finally:
        await ticker.stop()


app = FastAPI(
    title=settings.app_name,
    description="Season cycle and in-port day/night phases",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# ── Routes ───────────────────────────────────────────────────────────────────

app.include_router(create_phases_router(calculator))
app.include_router(create_navbar_router(manager, calculator))


# ── Health ───────────────────────────────────────────────────────────────────

@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "timezone": calculator.timezone,
        "navbar_clients": manager.active_count,
        "ticker_running": ticker.running,
        "ticks": ticker.ticks,
    }


def serve() -> None:
    """Run the service with uvicorn (``uwodb-clock`` console script)."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())
