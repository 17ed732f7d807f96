from .user import UserModel
from .block import BlockModel
from .search_history import SearchHistoryModel

__all__ = [
    "UserModel",
    "BlockModel",
    "SearchHistoryModel",
]
