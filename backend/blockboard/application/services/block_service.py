"""Application service (use case) for Block operations."""

import logging
import uuid
from datetime import datetime, timezone

from blockboard.application.interfaces import BlockRepository
from blockboard.application.schemas import BlockInput
from blockboard.application.services.image_service import ImageService, ImageUpload
from blockboard.application.services.pagination import PageRequest, count_pages
from blockboard.domain.entities import Block
from blockboard.domain.exceptions import DomainError, EntityNotFoundError

logger = logging.getLogger(__name__)


class BlockService:
    """Orchestrates block CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: BlockRepository, image_service: ImageService | None = None):
        self._repository = repository
        self._image_service = image_service

    async def find_block(self, block_id: str) -> Block | None:
        return await self._repository.get_by_id(block_id)

    async def list_blocks(
        self, page: int, per_page: int, owner_id: str | None = None
    ) -> tuple[list[Block], int]:
        """One page of blocks, oldest first, optionally limited to one owner."""
        request = PageRequest.of(page, per_page)
        blocks, total = await self._repository.get_page(
            skip=request.skip, limit=request.per_page, pid=owner_id
        )
        return blocks, count_pages(total, request.per_page)

    async def create_block(self, data: BlockInput, owner_id: str) -> Block:
        now = datetime.now(timezone.utc)
        block = Block(
            id=str(uuid.uuid4()),
            pid=owner_id,
            context=data.context,
            imgs=list(data.imgs) if data.imgs is not None else None,
            location=data.location,
            latitude_and_longitude=data.latitude_and_longitude,
            draft=data.draft,
            create_time=now,
            update_time=now,
        )
        return await self._repository.create(block)

    async def create_block_with_images(
        self, data: BlockInput, owner_id: str, images: list[ImageUpload]
    ) -> Block:
        """Upload ``images`` and create a block whose ``imgs`` are their URLs.

        If the block cannot be stored, the objects this call created are removed.
        """
        if self._image_service is None:
            raise RuntimeError("BlockService was built without an ImageService")

        uploaded = await self._image_service.upload_batch(owner_id, images)
        imgs = (data.imgs or []) + uploaded.urls
        if data.imgs is None and not uploaded.urls:
            imgs = None
        payload = data.model_copy(update={"imgs": imgs})
        try:
            return await self.create_block(payload, owner_id)
        except DomainError:
            logger.warning(
                "Block insert failed, removing %d new image(s)", len(uploaded.created_keys)
            )
            await self._image_service.discard(uploaded)
            raise

    async def update_block(self, block_id: str, data: BlockInput) -> Block:
        block = await self._repository.get_by_id(block_id)
        if block is None:
            raise EntityNotFoundError("Block", block_id)
        block.replace_content(
            context=data.context,
            imgs=data.imgs,
            location=data.location,
            latitude_and_longitude=data.latitude_and_longitude,
            draft=data.draft,
        )
        return await self._repository.update(block)

    async def delete_block(self, block_id: str) -> int:
        return await self._repository.delete(block_id)
