"""Pydantic DTOs for login and image endpoints."""

from pydantic import BaseModel, Field

from .user import UserResponse


class LoginRequest(BaseModel):
    """Authorization code obtained by the mini-program client (``wx.login``)."""

    js_code: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    user: UserResponse
    token: str
    session_key: str | None = None


class ImageUrlsResponse(BaseModel):
    """URLs of the objects uploaded or removed, in request order."""

    image_url: list[str]
