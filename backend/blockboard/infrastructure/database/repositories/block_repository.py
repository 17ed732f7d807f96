"""Concrete repository implementation for Block backed by SQLAlchemy."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blockboard.application.interfaces import BlockRepository
from blockboard.domain.entities import Block
from blockboard.infrastructure.database.models import BlockModel
from blockboard.infrastructure.database.repositories.errors import storage_errors


class SQLAlchemyBlockRepository(BlockRepository):
    """Implements the BlockRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BlockModel) -> Block:
        """Map ORM model → domain entity."""
        return Block(
            id=model.id,
            pid=model.pid,
            context=model.context,
            imgs=list(model.imgs) if model.imgs is not None else None,
            location=model.location,
            latitude_and_longitude=model.latitude_and_longitude,
            draft=model.draft,
            create_time=model.create_time,
            update_time=model.update_time,
        )

    def _to_model(self, entity: Block) -> BlockModel:
        """Map domain entity → ORM model (for creation)."""
        return BlockModel(
            id=entity.id,
            pid=entity.pid,
            context=entity.context,
            imgs=entity.imgs,
            location=entity.location,
            latitude_and_longitude=entity.latitude_and_longitude,
            draft=entity.draft,
            create_time=entity.create_time,
            update_time=entity.update_time,
        )

    async def get_by_id(self, block_id: str) -> Block | None:
        with storage_errors("load block"):
            result = await self._session.get(BlockModel, block_id)
        return self._to_entity(result) if result else None

    async def get_page(
        self,
        *,
        skip: int,
        limit: int,
        pid: str | None = None,
    ) -> tuple[list[Block], int]:
        stmt = select(BlockModel)
        count_stmt = select(func.count()).select_from(BlockModel)
        if pid is not None:
            stmt = stmt.where(BlockModel.pid == pid)
            count_stmt = count_stmt.where(BlockModel.pid == pid)

        stmt = stmt.order_by(
            BlockModel.create_time.asc(), BlockModel.id.asc()
        ).offset(skip).limit(limit)
        with storage_errors("list blocks"):
            total = (await self._session.execute(count_stmt)).scalar_one()
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows], total

    async def create(self, block: Block) -> Block:
        model = self._to_model(block)
        with storage_errors("create block"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, block: Block) -> Block:
        with storage_errors("update block"):
            model = await self._session.get(BlockModel, block.id)
            if model is None:
                raise ValueError(f"Block {block.id} not found in database")
            model.context = block.context
            model.imgs = block.imgs
            model.location = block.location
            model.latitude_and_longitude = block.latitude_and_longitude
            model.draft = block.draft
            model.update_time = block.update_time
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, block_id: str) -> int:
        with storage_errors("delete block"):
            result = await self._session.execute(
                delete(BlockModel).where(BlockModel.id == block_id)
            )
            await self._session.flush()
        return result.rowcount
