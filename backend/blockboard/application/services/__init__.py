from .pagination import PageRequest, count_pages
from .image_service import ImageService, ImageUpload, UploadedImages, image_key
from .user_service import UserService
from .block_service import BlockService
from .search_history_service import SearchHistoryService
from .auth_service import AuthService, LoginResult

__all__ = [
    "PageRequest",
    "count_pages",
    "ImageService",
    "ImageUpload",
    "UploadedImages",
    "image_key",
    "UserService",
    "BlockService",
    "SearchHistoryService",
    "AuthService",
    "LoginResult",
]
