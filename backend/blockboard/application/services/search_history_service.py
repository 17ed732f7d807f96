"""Application service (use case) for SearchHistory operations."""

import uuid
from datetime import datetime, timezone

from blockboard.application.interfaces import SearchHistoryRepository
from blockboard.application.schemas import SearchHistoryCreate
from blockboard.domain.entities import SearchHistory
from blockboard.domain.exceptions import EntityNotFoundError


class SearchHistoryService:
    """Orchestrates search history logging. One record per search event."""

    def __init__(self, repository: SearchHistoryRepository):
        self._repository = repository

    async def create_record(self, data: SearchHistoryCreate, uid: str) -> SearchHistory:
        now = datetime.now(timezone.utc)
        record = SearchHistory(
            id=str(uuid.uuid4()),
            uid=uid,
            history=data.history,
            create_time=now,
            update_time=now,
        )
        return await self._repository.create(record)

    async def find_record(self, history_id: str) -> SearchHistory | None:
        return await self._repository.get_by_id(history_id)

    async def list_for_owner(self, uid: str) -> list[SearchHistory]:
        return await self._repository.list_by_uid(uid)

    async def update_record(self, history_id: str, data: SearchHistoryCreate) -> SearchHistory:
        """Replace the payload of one record (administrative use only)."""
        record = await self._repository.get_by_id(history_id)
        if record is None:
            raise EntityNotFoundError("SearchHistory", history_id)
        record.replace_history(data.history)
        return await self._repository.update(record)

    async def delete_record(self, history_id: str) -> int:
        return await self._repository.delete(history_id)

    async def delete_all_for_owner(self, uid: str) -> int:
        return await self._repository.delete_by_uid(uid)
