from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MoodRecord(BaseModel):
    """Raw mood check-in as stored or served by the entries API."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int | str | None = None
    user_id: str | None = None
    mood: str | None = None
    mood_value: float | None = Field(default=None, allow_inf_nan=False)
    notes: str | None = None
    created_at: datetime | None = None


class MoodEntryCreate(BaseModel):
    user_id: str | None = Field(default=None, max_length=100)
    mood: str = Field(..., min_length=1, max_length=50)
    mood_value: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = Field(default=None, max_length=2000)


class MoodEntryUpdate(BaseModel):
    mood: str = Field(..., min_length=1, max_length=50)
    mood_value: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = Field(default=None, max_length=2000)


class MoodEntryModel(BaseModel):
    id: int
    user_id: str
    mood: str
    mood_value: int | None
    notes: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MoodEntryDeleteResponse(BaseModel):
    ok: bool = True


__all__ = [
    "MoodEntryCreate",
    "MoodEntryDeleteResponse",
    "MoodEntryModel",
    "MoodEntryUpdate",
    "MoodRecord",
]
