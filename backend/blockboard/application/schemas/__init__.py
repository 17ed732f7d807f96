from .envelope import PageResponse, ResponseEnvelope, ResponseStatus, RowsResponse
from .user import UserCreate, UserUpdate, UserResponse
from .block import BlockInput, BlockResponse, BlockDetail
from .search_history import SearchHistoryCreate, SearchHistoryResponse
from .auth import ImageUrlsResponse, LoginRequest, LoginResponse

__all__ = [
    "PageResponse",
    "ResponseEnvelope",
    "ResponseStatus",
    "RowsResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "BlockInput",
    "BlockResponse",
    "BlockDetail",
    "SearchHistoryCreate",
    "SearchHistoryResponse",
    "ImageUrlsResponse",
    "LoginRequest",
    "LoginResponse",
]
