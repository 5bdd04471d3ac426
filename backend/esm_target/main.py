"""ESM Target API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map EsmTargetError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Baseline table built on startup via lifespan, before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (ADR: ExMA import fan-out < 10)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from esm_target.api.error_handlers import register_error_handlers
from esm_target.api.routes import health, targets
from esm_target.config import get_settings
from esm_target.core.unsupported_features import baseline_table
from esm_target.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    baselines = baseline_table()
    logger.info(
        "ESM target API started — baselines: "
        + ", ".join(f"{e.target.value}={e.unsupported_count}" for e in baselines),
    )
    yield
    logger.info("ESM target API shutting down")


app = FastAPI(
    title="ESM Target API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes — explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(targets.router)

register_error_handlers(app)
