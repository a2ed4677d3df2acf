from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from ...core.security import resolve_user_id
from ...insights import MoodInsightsEngine, RangeKey
from ...metrics import MOOD_ENTRY_EVENTS
from ...schemas.insights import MoodInsightsResponse, VisitResponse
from ...schemas.mood import (
    MoodEntryCreate,
    MoodEntryDeleteResponse,
    MoodEntryModel,
    MoodEntryUpdate,
)
from ...schemas.resources import ResourcesResponse
from ...services.mood_source import MoodSourceError
from ...services.resources import support_resources
from ...services.storage import StorageService
from ...services.visits import VisitRegistry

logger = logging.getLogger(__name__)

LOAD_ERROR_DETAIL = "Could not load mood entries."

router = APIRouter(prefix="/api/v1", tags=["core"])


def get_storage_service(request: Request) -> StorageService:
    return request.app.state.storage_service


def get_insights_engine(request: Request) -> MoodInsightsEngine:
    return request.app.state.insights_engine


def get_visit_registry(request: Request) -> VisitRegistry:
    return request.app.state.visit_registry


def _entry_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not found")


@router.post(
    "/mood_entries",
    response_model=MoodEntryModel,
    status_code=status.HTTP_201_CREATED,
)
async def create_mood_entry(
    payload: MoodEntryCreate,
    storage: StorageService = Depends(get_storage_service),
    user_id: str = Depends(resolve_user_id),
) -> MoodEntryModel:
    entry = await storage.add_mood_entry(
        user_id=payload.user_id or user_id,
        mood=payload.mood,
        mood_value=payload.mood_value,
        notes=payload.notes,
    )
    MOOD_ENTRY_EVENTS.labels(action="create").inc()
    return MoodEntryModel.model_validate(entry)


@router.get("/mood_entries", response_model=list[MoodEntryModel])
async def list_mood_entries(
    storage: StorageService = Depends(get_storage_service),
    user_id: str = Depends(resolve_user_id),
    limit: int | None = Query(default=None, ge=1, le=1000),
) -> list[MoodEntryModel]:
    entries = await storage.list_mood_entries(user_id, limit=limit)
    return [MoodEntryModel.model_validate(entry) for entry in entries]


@router.get("/mood_entries/{entry_id}", response_model=MoodEntryModel)
async def read_mood_entry(
    entry_id: int,
    storage: StorageService = Depends(get_storage_service),
) -> MoodEntryModel:
    entry = await storage.get_mood_entry(entry_id)
    if entry is None:
        raise _entry_not_found()
    return MoodEntryModel.model_validate(entry)


@router.put("/mood_entries/{entry_id}", response_model=MoodEntryModel)
async def update_mood_entry(
    entry_id: int,
    payload: MoodEntryUpdate,
    storage: StorageService = Depends(get_storage_service),
) -> MoodEntryModel:
    entry = await storage.update_mood_entry(
        entry_id,
        mood=payload.mood,
        mood_value=payload.mood_value,
        notes=payload.notes,
    )
    if entry is None:
        raise _entry_not_found()
    MOOD_ENTRY_EVENTS.labels(action="update").inc()
    return MoodEntryModel.model_validate(entry)


@router.delete("/mood_entries/{entry_id}", response_model=MoodEntryDeleteResponse)
async def delete_mood_entry(
    entry_id: int,
    storage: StorageService = Depends(get_storage_service),
) -> MoodEntryDeleteResponse:
    deleted = await storage.delete_mood_entry(entry_id)
    if not deleted:
        raise _entry_not_found()
    MOOD_ENTRY_EVENTS.labels(action="delete").inc()
    return MoodEntryDeleteResponse()


@router.get("/mood/insights", response_model=MoodInsightsResponse)
async def read_mood_insights(
    range_key: RangeKey = Query(default=RangeKey.WEEK, alias="range"),
    visit_id: str | None = Query(default=None, max_length=64),
    engine: MoodInsightsEngine = Depends(get_insights_engine),
    user_id: str = Depends(resolve_user_id),
) -> MoodInsightsResponse:
    try:
        result = await engine.compute(user_id, range_key, visit_id=visit_id)
    except MoodSourceError as exc:
        logger.warning("mood snapshot fetch failed: %s", exc, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=LOAD_ERROR_DETAIL,
        ) from exc
    return MoodInsightsResponse.from_insights(result)


@router.post(
    "/mood/visits",
    response_model=VisitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_visit(
    visits: VisitRegistry = Depends(get_visit_registry),
) -> VisitResponse:
    visit = await visits.start()
    return VisitResponse(visit_id=visit.visit_id)


@router.delete("/mood/visits/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_visit(
    visit_id: str,
    visits: VisitRegistry = Depends(get_visit_registry),
) -> None:
    if not await visits.end(visit_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="visit not found")


@router.get("/resources", response_model=ResourcesResponse)
async def list_resources() -> ResourcesResponse:
    return support_resources()
