from .user_repository import SQLAlchemyUserRepository
from .block_repository import SQLAlchemyBlockRepository
from .search_history_repository import SQLAlchemySearchHistoryRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyBlockRepository",
    "SQLAlchemySearchHistoryRepository",
]
