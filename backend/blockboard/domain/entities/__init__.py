from .user import User
from .block import Block
from .search_history import SearchHistory

__all__ = [
    "User",
    "Block",
    "SearchHistory",
]
