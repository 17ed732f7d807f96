"""Block CRUD endpoints (bearer token required)."""

import uuid

import pydantic
from fastapi import APIRouter, Depends, Query, Request, status

from blockboard.application.schemas import (
    BlockDetail,
    BlockInput,
    BlockResponse,
    PageResponse,
    ResponseEnvelope,
)
from blockboard.application.services import BlockService
from blockboard.domain.entities import User
from blockboard.domain.exceptions import EntityNotFoundError, ValidationError
from blockboard.infrastructure.dependencies import (
    PageParams,
    get_block_service,
    get_current_user,
    get_page_params,
)
from blockboard.presentation.api.forms import read_image_parts, text_fields

router = APIRouter(prefix="/block", tags=["Blocks"])

_BLOCK_TEXT_FIELDS = ("context", "location", "latitude_and_longitude", "draft")


@router.get("", response_model=ResponseEnvelope[PageResponse[BlockResponse]])
async def list_blocks(
    paging: PageParams = Depends(get_page_params),
    pid: str | None = Query(None, description="Only blocks owned by this user id"),
    _: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[PageResponse[BlockResponse]]:
    """Retrieve one page of blocks, oldest first."""
    blocks, num_pages = await service.list_blocks(paging.page, paging.per_page, owner_id=pid)
    return ResponseEnvelope[PageResponse[BlockResponse]].success(
        data=PageResponse[BlockResponse](
            rows=[BlockResponse.model_validate(b, from_attributes=True) for b in blocks],
            num_pages=num_pages,
        ),
        message="Blocks retrieved successfully",
    )


@router.get("/{block_id}", response_model=ResponseEnvelope[BlockDetail])
async def get_block(
    block_id: uuid.UUID,
    _: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[BlockDetail]:
    """Retrieve a single block by ID."""
    block = await service.find_block(str(block_id))
    if block is None:
        raise EntityNotFoundError("Block", str(block_id))
    return ResponseEnvelope[BlockDetail].success(
        data=BlockDetail(block=BlockResponse.model_validate(block, from_attributes=True)),
        message="Block retrieved successfully",
    )


@router.post(
    "/new",
    response_model=ResponseEnvelope[None],
    status_code=status.HTTP_201_CREATED,
)
async def create_block(
    data: BlockInput,
    current_user: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[None]:
    """Create a block owned by the caller."""
    await service.create_block(data, current_user.id)
    return ResponseEnvelope[None].success(
        code=status.HTTP_201_CREATED, message="Block created successfully"
    )


@router.post(
    "/new_with_images",
    response_model=ResponseEnvelope[BlockDetail],
    status_code=status.HTTP_201_CREATED,
)
async def create_block_with_images(
    request: Request,
    current_user: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[BlockDetail]:
    """Create a block from a multipart form.

    ``image`` parts are uploaded first and their URLs become ``imgs``; the
    text fields ``context``, ``location``, ``latitude_and_longitude`` and
    ``draft`` fill in the rest.
    """
    async with request.form() as form:
        fields = text_fields(form, _BLOCK_TEXT_FIELDS)
        images = await read_image_parts(form)
    try:
        data = BlockInput.model_validate(fields)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"{field}: {first.get('msg', 'invalid')}", field=field) from None

    block = await service.create_block_with_images(data, current_user.id, images)
    return ResponseEnvelope[BlockDetail].success(
        data=BlockDetail(block=BlockResponse.model_validate(block, from_attributes=True)),
        code=status.HTTP_201_CREATED,
        message="Block created successfully",
    )


@router.post("/update/{block_id}", response_model=ResponseEnvelope[None])
async def update_block(
    block_id: uuid.UUID,
    data: BlockInput,
    _: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[None]:
    """Replace a block's content. Omitted fields become null."""
    await service.update_block(str(block_id), data)
    return ResponseEnvelope[None].success(message="Block updated successfully")


@router.delete("/delete/{block_id}", response_model=ResponseEnvelope[None])
async def delete_block(
    block_id: uuid.UUID,
    _: User = Depends(get_current_user),
    service: BlockService = Depends(get_block_service),
) -> ResponseEnvelope[None]:
    """Delete a block by ID. Unknown ids are reported as success."""
    await service.delete_block(str(block_id))
    return ResponseEnvelope[None].success(message="Block deleted successfully")
