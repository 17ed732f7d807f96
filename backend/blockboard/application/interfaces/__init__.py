from .user_repository import UserRepository
from .block_repository import BlockRepository
from .search_history_repository import SearchHistoryRepository
from .object_storage import ObjectStorage
from .identity_provider import ExternalIdentity, IdentityProvider
from .token_issuer import TokenIssuer

__all__ = [
    "UserRepository",
    "BlockRepository",
    "SearchHistoryRepository",
    "ObjectStorage",
    "ExternalIdentity",
    "IdentityProvider",
    "TokenIssuer",
]
