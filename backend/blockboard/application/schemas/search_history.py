"""Pydantic DTOs (Data Transfer Objects) for the SearchHistory feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SearchHistoryCreate(BaseModel):
    """Schema for logging a search event: ``history`` is free-form JSON."""

    history: Any = Field(None, examples=[{"keyword": "coffee", "filters": ["nearby"]}])


class SearchHistoryResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    uid: str | None
    history: Any
    create_time: datetime
    update_time: datetime

    model_config = {"from_attributes": True}
