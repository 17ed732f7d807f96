"""In-memory fakes for the application ports, shared by every test suite."""

from dataclasses import replace

import pytest

from blockboard.application.interfaces import (
    BlockRepository,
    ExternalIdentity,
    IdentityProvider,
    ObjectStorage,
    SearchHistoryRepository,
    TokenIssuer,
    UserRepository,
)
from blockboard.domain.entities import Block, SearchHistory, User
from blockboard.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    StorageError,
)


class FakeUserRepository(UserRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def get_by_app_id(self, app_id: str) -> User | None:
        for user in self._users.values():
            if user.app_id == app_id:
                return replace(user)
        return None

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    async def get_page(self, *, skip: int, limit: int) -> tuple[list[User], int]:
        users = sorted(self._users.values(), key=lambda u: (u.created_at, u.id))
        return [replace(u) for u in users[skip : skip + limit]], len(users)

    async def create(self, user: User) -> User:
        if any(u.app_id == user.app_id for u in self._users.values()):
            raise DuplicateEntityError("User", "app_id", user.app_id)
        self._users[user.id] = replace(user)
        return user

    async def update(self, user: User) -> User:
        self._users[user.id] = replace(user)
        return user

    async def delete(self, user_id: str) -> int:
        return 1 if self._users.pop(user_id, None) else 0

    def __len__(self) -> int:
        return len(self._users)


class FakeBlockRepository(BlockRepository):
    def __init__(self):
        self._blocks: dict[str, Block] = {}
        self.fail_on_create = False

    async def get_by_id(self, block_id: str) -> Block | None:
        block = self._blocks.get(block_id)
        return replace(block) if block else None

    async def get_page(
        self, *, skip: int, limit: int, pid: str | None = None
    ) -> tuple[list[Block], int]:
        blocks = [b for b in self._blocks.values() if pid is None or b.pid == pid]
        blocks.sort(key=lambda b: (b.create_time, b.id))
        return [replace(b) for b in blocks[skip : skip + limit]], len(blocks)

    async def create(self, block: Block) -> Block:
        if self.fail_on_create:
            raise StorageError("insert block")
        self._blocks[block.id] = replace(block)
        return block

    async def update(self, block: Block) -> Block:
        self._blocks[block.id] = replace(block)
        return block

    async def delete(self, block_id: str) -> int:
        return 1 if self._blocks.pop(block_id, None) else 0


class FakeSearchHistoryRepository(SearchHistoryRepository):
    def __init__(self):
        self._records: dict[str, SearchHistory] = {}

    async def get_by_id(self, history_id: str) -> SearchHistory | None:
        record = self._records.get(history_id)
        return replace(record) if record else None

    async def list_by_uid(self, uid: str) -> list[SearchHistory]:
        records = [r for r in self._records.values() if r.uid == uid]
        return sorted(records, key=lambda r: (r.create_time, r.id))

    async def create(self, record: SearchHistory) -> SearchHistory:
        self._records[record.id] = replace(record)
        return record

    async def update(self, record: SearchHistory) -> SearchHistory:
        self._records[record.id] = replace(record)
        return record

    async def delete(self, history_id: str) -> int:
        return 1 if self._records.pop(history_id, None) else 0

    async def delete_by_uid(self, uid: str) -> int:
        doomed = [key for key, r in self._records.items() if r.uid == uid]
        for key in doomed:
            del self._records[key]
        return len(doomed)


class FakeObjectStorage(ObjectStorage):
    """Dict-backed bucket. Keys listed in ``fail_on`` raise StorageError on put."""

    def __init__(self, base_url: str = "http://minio.test", bucket: str = "collection"):
        self.objects: dict[str, bytes] = {}
        self.fail_on: set[str] = set()
        self.fail_deletes = False
        self.deleted: list[str] = []
        self._base_url = base_url
        self._bucket = bucket

    async def ensure_bucket(self) -> None:
        return None

    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        if key in self.fail_on:
            raise StorageError(f"upload object {key}")
        self.objects[key] = content
        return self.public_url(key)

    async def delete(self, key: str) -> None:
        if self.fail_deletes:
            raise StorageError(f"delete object {key}")
        self.deleted.append(key)
        self.objects.pop(key, None)

    async def exists(self, key: str) -> bool:
        return key in self.objects

    def public_url(self, key: str) -> str:
        return f"{self._base_url}/{self._bucket}/{key}"


class FakeIdentityProvider(IdentityProvider):
    """Maps codes to openids; unknown codes get ``openid-<code>``."""

    def __init__(self, identities: dict[str, ExternalIdentity] | None = None):
        self.identities = identities or {}
        self.calls: list[str] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def exchange_code(self, code: str) -> ExternalIdentity:
        self.calls.append(code)
        return self.identities.get(
            code, ExternalIdentity(openid=f"openid-{code}", session_key=f"session-{code}")
        )


class FakeTokenIssuer(TokenIssuer):
    """Tokens are the subject with a fixed prefix."""

    PREFIX = "token:"

    def issue(self, subject: str) -> str:
        return f"{self.PREFIX}{subject}"

    def verify(self, token: str) -> str:
        if not token.startswith(self.PREFIX):
            raise AuthenticationError("Invalid token")
        return token[len(self.PREFIX) :]


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def block_repository() -> FakeBlockRepository:
    return FakeBlockRepository()


@pytest.fixture
def search_history_repository() -> FakeSearchHistoryRepository:
    return FakeSearchHistoryRepository()


@pytest.fixture
def object_storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def token_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()
