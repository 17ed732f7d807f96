"""User CRUD endpoints (bearer token required)."""

import uuid

from fastapi import APIRouter, Depends, status

from blockboard.application.schemas import (
    PageResponse,
    ResponseEnvelope,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from blockboard.application.services import UserService
from blockboard.domain.exceptions import EntityNotFoundError
from blockboard.infrastructure.dependencies import (
    PageParams,
    get_current_user,
    get_page_params,
    get_user_service,
)

router = APIRouter(
    prefix="/user",
    tags=["Users"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=ResponseEnvelope[PageResponse[UserResponse]])
async def list_users(
    paging: PageParams = Depends(get_page_params),
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[PageResponse[UserResponse]]:
    """Retrieve one page of users, oldest first."""
    users, num_pages = await service.list_users(paging.page, paging.per_page)
    return ResponseEnvelope[PageResponse[UserResponse]].success(
        data=PageResponse[UserResponse](
            rows=[UserResponse.model_validate(u, from_attributes=True) for u in users],
            num_pages=num_pages,
        ),
        message="Users retrieved successfully",
    )


@router.get("/email/{email}", response_model=ResponseEnvelope[UserResponse])
async def get_user_by_email(
    email: str,
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[UserResponse]:
    """Retrieve the first user registered with ``email``."""
    user = await service.find_by_email(email)
    if user is None:
        raise EntityNotFoundError("User", email)
    return ResponseEnvelope[UserResponse].success(
        data=UserResponse.model_validate(user, from_attributes=True),
        message="User retrieved successfully",
    )


@router.get("/{user_id}", response_model=ResponseEnvelope[UserResponse])
async def get_user(
    user_id: uuid.UUID,
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[UserResponse]:
    """Retrieve a single user by ID."""
    user = await service.find_user(str(user_id))
    if user is None:
        raise EntityNotFoundError("User", str(user_id))
    return ResponseEnvelope[UserResponse].success(
        data=UserResponse.model_validate(user, from_attributes=True),
        message="User retrieved successfully",
    )


@router.post(
    "/new",
    response_model=ResponseEnvelope[None],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[None]:
    """Create a user explicitly."""
    await service.create_user(data)
    return ResponseEnvelope[None].success(
        code=status.HTTP_201_CREATED, message="User created successfully"
    )


@router.post("/update/{user_id}", response_model=ResponseEnvelope[None])
async def update_user(
    user_id: uuid.UUID,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[None]:
    """Replace a user's profile fields."""
    await service.update_user(str(user_id), data)
    return ResponseEnvelope[None].success(message="User updated successfully")


@router.delete("/delete/{user_id}", response_model=ResponseEnvelope[None])
async def delete_user(
    user_id: uuid.UUID,
    service: UserService = Depends(get_user_service),
) -> ResponseEnvelope[None]:
    """Delete a user by ID. Unknown ids are reported as success."""
    await service.delete_user(str(user_id))
    return ResponseEnvelope[None].success(message="User deleted successfully")
