"""Search history endpoints: records are always scoped to an owner."""

import uuid

from fastapi import APIRouter, Depends, status

from blockboard.application.schemas import (
    ResponseEnvelope,
    RowsResponse,
    SearchHistoryCreate,
    SearchHistoryResponse,
)
from blockboard.application.services import SearchHistoryService
from blockboard.domain.entities import User
from blockboard.domain.exceptions import EntityNotFoundError
from blockboard.infrastructure.dependencies import get_current_user, get_search_history_service

router = APIRouter(prefix="/search_history", tags=["Search History"])


@router.get("", response_model=ResponseEnvelope[RowsResponse[SearchHistoryResponse]])
async def list_search_history(
    current_user: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[RowsResponse[SearchHistoryResponse]]:
    """Every search record of the caller, oldest first."""
    records = await service.list_for_owner(current_user.id)
    return ResponseEnvelope[RowsResponse[SearchHistoryResponse]].success(
        data=RowsResponse[SearchHistoryResponse](
            rows=[SearchHistoryResponse.model_validate(r, from_attributes=True) for r in records],
        ),
        message="Search history retrieved successfully",
    )


@router.post(
    "/new",
    response_model=ResponseEnvelope[None],
    status_code=status.HTTP_201_CREATED,
)
async def create_search_history(
    data: SearchHistoryCreate,
    current_user: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[None]:
    await service.create_record(data, current_user.id)
    return ResponseEnvelope[None].success(
        code=status.HTTP_201_CREATED, message="Search history created successfully"
    )


@router.delete("/delete/{owner_id}", response_model=ResponseEnvelope[None])
async def delete_search_history(
    owner_id: uuid.UUID,
    _: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[None]:
    """Delete every search record belonging to ``owner_id``."""
    await service.delete_all_for_owner(str(owner_id))
    return ResponseEnvelope[None].success(message="Search history deleted successfully")


# ── Record-level administration ──


@router.get("/record/{history_id}", response_model=ResponseEnvelope[SearchHistoryResponse])
async def get_search_history_record(
    history_id: uuid.UUID,
    _: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[SearchHistoryResponse]:
    record = await service.find_record(str(history_id))
    if record is None:
        raise EntityNotFoundError("SearchHistory", str(history_id))
    return ResponseEnvelope[SearchHistoryResponse].success(
        data=SearchHistoryResponse.model_validate(record, from_attributes=True),
        message="Search history retrieved successfully",
    )


@router.post("/record/update/{history_id}", response_model=ResponseEnvelope[None])
async def update_search_history_record(
    history_id: uuid.UUID,
    data: SearchHistoryCreate,
    _: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[None]:
    """Replace the ``history`` payload of one record."""
    await service.update_record(str(history_id), data)
    return ResponseEnvelope[None].success(message="Search history updated successfully")


@router.delete("/record/delete/{history_id}", response_model=ResponseEnvelope[None])
async def delete_search_history_record(
    history_id: uuid.UUID,
    _: User = Depends(get_current_user),
    service: SearchHistoryService = Depends(get_search_history_service),
) -> ResponseEnvelope[None]:
    """Delete one record by ID. Unknown ids are reported as success."""
    await service.delete_record(str(history_id))
    return ResponseEnvelope[None].success(message="Search history deleted successfully")
