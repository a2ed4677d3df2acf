from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from thrivetrack.db import create_engine, create_session_factory, init_db

from .api.v1.routes import router as v1_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .insights import MoodInsightsEngine
from .middleware import RequestLoggingMiddleware
from .services.mood_source import MoodRecordSource, RemoteMoodSource, StorageMoodSource
from .services.storage import StorageService
from .services.visits import VisitRegistry

logger = logging.getLogger(__name__)


def build_mood_source(settings: Settings, storage: StorageService) -> MoodRecordSource:
    if settings.mood_source_url:
        return RemoteMoodSource(
            str(settings.mood_source_url),
            timeout=settings.request_timeout_seconds,
        )
    return StorageMoodSource(storage)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure application services during startup and ensure graceful shutdown."""

    configure_logging()
    settings: Settings = get_settings()

    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    await init_db(engine, session_factory, settings.version)
    storage_service = StorageService(session_factory)
    mood_source = build_mood_source(settings, storage_service)
    visit_registry = VisitRegistry(ttl_seconds=settings.visit_ttl_seconds)
    insights_engine = MoodInsightsEngine(
        mood_source,
        settings=settings,
        visits=visit_registry,
    )

    app.state.settings = settings
    app.state.storage_service = storage_service
    app.state.db_engine = engine
    app.state.db_session_factory = session_factory
    app.state.mood_source = mood_source
    app.state.visit_registry = visit_registry
    app.state.insights_engine = insights_engine

    logger.info(
        "Starting ThriveTrack %s source=%s tz=%s",
        settings.version,
        mood_source.name,
        settings.insights_timezone,
    )

    try:
        yield
    finally:
        await mood_source.close()
        await app.state.db_engine.dispose()


app = FastAPI(title="ThriveTrack", version=get_settings().version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(v1_router)


@app.get("/healthz")
async def healthz(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "version": settings.version}


@app.get("/readyz")
async def readyz(request: Request) -> dict[str, Any]:
    storage: StorageService = request.app.state.storage_service
    source: MoodRecordSource = request.app.state.mood_source

    db_ok = True
    db_detail = "ok"
    try:
        await storage.healthcheck()
    except Exception as exc:
        logger.warning("Database readiness check failed: %s", exc, exc_info=True)
        db_ok = False
        db_detail = str(exc)

    return {
        "ready": db_ok,
        "db": {"ok": db_ok, "detail": db_detail},
        "source": source.name,
    }


@app.get("/metrics")
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
