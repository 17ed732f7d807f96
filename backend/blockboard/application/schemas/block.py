"""Pydantic DTOs (Data Transfer Objects) for the Block feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class BlockInput(BaseModel):
    """Schema for creating or replacing a block: all fields optional.

    On update every field is replaced, so omitted fields become null.
    """

    context: str | None = Field(None, examples=["hello"])
    imgs: list[str] | None = Field(None, examples=[["https://example.com/a.jpg"]])
    location: str | None = Field(None, max_length=255)
    latitude_and_longitude: str | None = Field(None, max_length=64, examples=["31.23,121.47"])
    draft: bool | None = None


class BlockResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    pid: str | None
    context: str | None
    imgs: list[str] | None
    location: str | None
    latitude_and_longitude: str | None
    draft: bool | None
    create_time: datetime
    update_time: datetime

    model_config = {"from_attributes": True}


class BlockDetail(BaseModel):
    block: BlockResponse
