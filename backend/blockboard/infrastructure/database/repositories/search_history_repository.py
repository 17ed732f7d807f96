"""Concrete repository implementation for SearchHistory backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blockboard.application.interfaces import SearchHistoryRepository
from blockboard.domain.entities import SearchHistory
from blockboard.infrastructure.database.models import SearchHistoryModel
from blockboard.infrastructure.database.repositories.errors import storage_errors


class SQLAlchemySearchHistoryRepository(SearchHistoryRepository):
    """Implements the SearchHistoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SearchHistoryModel) -> SearchHistory:
        return SearchHistory(
            id=model.id,
            uid=model.uid,
            history=model.history,
            create_time=model.create_time,
            update_time=model.update_time,
        )

    async def get_by_id(self, history_id: str) -> SearchHistory | None:
        with storage_errors("load search history"):
            result = await self._session.get(SearchHistoryModel, history_id)
        return self._to_entity(result) if result else None

    async def list_by_uid(self, uid: str) -> list[SearchHistory]:
        stmt = (
            select(SearchHistoryModel)
            .where(SearchHistoryModel.uid == uid)
            .order_by(SearchHistoryModel.create_time.asc(), SearchHistoryModel.id.asc())
        )
        with storage_errors("list search history"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows]

    async def create(self, record: SearchHistory) -> SearchHistory:
        model = SearchHistoryModel(
            id=record.id,
            uid=record.uid,
            history=record.history,
            create_time=record.create_time,
            update_time=record.update_time,
        )
        with storage_errors("create search history"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, record: SearchHistory) -> SearchHistory:
        with storage_errors("update search history"):
            model = await self._session.get(SearchHistoryModel, record.id)
            if model is None:
                raise ValueError(f"SearchHistory {record.id} not found in database")
            model.history = record.history
            model.update_time = record.update_time
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, history_id: str) -> int:
        with storage_errors("delete search history"):
            result = await self._session.execute(
                delete(SearchHistoryModel).where(SearchHistoryModel.id == history_id)
            )
            await self._session.flush()
        return result.rowcount

    async def delete_by_uid(self, uid: str) -> int:
        with storage_errors("delete search history by uid"):
            result = await self._session.execute(
                delete(SearchHistoryModel).where(SearchHistoryModel.uid == uid)
            )
            await self._session.flush()
        return result.rowcount
