"""Login endpoint: exchanges a mini-program code for a session token."""

from fastapi import APIRouter, Depends

from blockboard.application.schemas import (
    LoginRequest,
    LoginResponse,
    ResponseEnvelope,
    UserResponse,
)
from blockboard.application.services import AuthService
from blockboard.infrastructure.dependencies import get_auth_service

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=ResponseEnvelope[LoginResponse])
async def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> ResponseEnvelope[LoginResponse]:
    """Exchange ``js_code`` for ``{user, token, session_key}``; creates the user on first login."""
    result = await service.login(payload.js_code)
    return ResponseEnvelope[LoginResponse].success(
        data=LoginResponse(
            user=UserResponse.model_validate(result.user, from_attributes=True),
            token=result.token,
            session_key=result.session_key,
        ),
        message="Login successful",
    )
