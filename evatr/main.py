"""FastAPI application entry point — wires logging, settings and routes.

Usage:
    python -m evatr.main
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from evatr import __version__
from evatr.config import settings
from evatr.decoders.vat_number import supported_country_codes
from evatr.web import router

# ── Logging setup ────────────────────────────────────────────────────

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = logging.getLogger(__name__)

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    logger.info(
        "Starting eVatR gateway (env=%s, endpoint=%s, timeout=%ss)",
        settings.environment,
        settings.evatr.evatr_base_url,
        settings.evatr.evatr_timeout,
    )
    try:
        yield
    finally:
        logger.info("eVatR gateway shutdown complete")


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="eVatR Gateway",
    description="VAT number confirmation via the BZSt eVatR service",
    version=__version__,
    lifespan=lifespan,
)
app.include_router(router)


@app.get("/health")
async def health_check() -> dict[str, str | int]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "supported_countries": len(supported_country_codes()),
    }


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    uvicorn.run(
        "evatr.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
