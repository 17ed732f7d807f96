"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for creating a user explicitly (administrative path).

    ``sex`` is accepted as text or number and parsed by the service.
    """

    name: str = Field(..., max_length=255, examples=["Alice"])
    sex: str | int = Field(..., examples=["1"])
    email: str = Field(..., max_length=255, examples=["alice@example.com"])
    phone: str = Field(..., max_length=64, examples=["13800000000"])
    birthday: datetime | None = None
    app_id: str = Field(..., min_length=1, max_length=255)


class UserUpdate(BaseModel):
    """Schema for replacing a user's profile.

    Every field is replaced: omitted fields are stored as null.
    """

    name: str | None = Field(None, max_length=255)
    sex: str | int | None = None
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=64)
    birthday: datetime | None = None


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str | None
    sex: int | None
    birthday: datetime | None
    phone: str | None
    email: str | None
    app_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
