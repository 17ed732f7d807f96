"""Abstract repository interface (port) for SearchHistory persistence."""

from abc import ABC, abstractmethod

from blockboard.domain.entities import SearchHistory


class SearchHistoryRepository(ABC):
    """Port for search history persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, history_id: str) -> SearchHistory | None:
        ...

    @abstractmethod
    async def list_by_uid(self, uid: str) -> list[SearchHistory]:
        """All records of one user, oldest first."""
        ...

    @abstractmethod
    async def create(self, record: SearchHistory) -> SearchHistory:
        ...

    @abstractmethod
    async def update(self, record: SearchHistory) -> SearchHistory:
        ...

    @abstractmethod
    async def delete(self, history_id: str) -> int:
        """Delete one record. Returns the number of deleted rows."""
        ...

    @abstractmethod
    async def delete_by_uid(self, uid: str) -> int:
        """Delete every record of one user. Returns the number of deleted rows."""
        ...
