"""Uniform response envelope wrapped around every API response."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseStatus(str, Enum):
    SUCCESS = "Success"
    ERROR = "Error"


class ResponseEnvelope(BaseModel, Generic[T]):
    """``{status, code, message, data}``: the single contract every client reads.

    ``code`` mirrors an HTTP status. ``data`` is always null on errors,
    including 404 lookups.
    """

    status: ResponseStatus
    code: int
    message: str | None = None
    data: T | None = None

    @classmethod
    def success(
        cls, data: Any = None, message: str | None = None, code: int = 200
    ) -> "ResponseEnvelope":
        return cls(status=ResponseStatus.SUCCESS, code=code, message=message, data=data)

    @classmethod
    def error(cls, code: int, message: str | None) -> "ResponseEnvelope":
        return cls(status=ResponseStatus.ERROR, code=code, message=message, data=None)


class PageResponse(BaseModel, Generic[T]):
    """One page of rows plus the total number of pages."""

    rows: list[T]
    num_pages: int = Field(..., ge=0)


class RowsResponse(BaseModel, Generic[T]):
    """Unpaginated rows."""

    rows: list[T]
