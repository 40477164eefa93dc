"""
api/main.py — FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
    python scripts/run_server.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from api.endpoints.classify_routes import router as classify_router
from api.schemas import ErrorOut, HealthOut

logger = logging.getLogger(__name__)


# ── Lifespan ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown logic."""
    logger.info("Lead classifier running on port %d", settings.port)
    yield
    logger.info("Lead classifier shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Lead Classifier",
    description=(
        "Scores inbound sales leads against fixed heuristic rules and returns "
        "a junk/valid verdict with an explanation and numeric score."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=ErrorOut().model_dump())


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(classify_router, tags=["Classification"])


# ── Health check ─────────────────────────────────────────────────────────────

@app.get("/", response_model=HealthOut, tags=["System"])
def root():
    """Returns service liveness status."""
    return HealthOut(service=settings.service_name)


@app.get("/health", response_model=HealthOut, tags=["System"])
def health_check():
    return HealthOut(service=settings.service_name)
