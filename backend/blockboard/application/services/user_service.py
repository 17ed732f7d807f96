"""Application service (use case) for User operations."""

import logging
import uuid
from datetime import datetime, timezone

from blockboard.application.interfaces import UserRepository
from blockboard.application.schemas import UserCreate, UserUpdate
from blockboard.application.services.pagination import PageRequest, count_pages
from blockboard.domain.entities import User
from blockboard.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def parse_sex(raw: str | int | None) -> int | None:
    """Parse the coded ``sex`` field; raises ValidationError for non-numeric input."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValidationError("sex must be a number", field="sex")
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError("sex must be a number", field="sex") from None


class UserService:
    """Orchestrates user CRUD and the find-or-create used at login."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def find_user(self, user_id: str) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def find_by_app_id(self, app_id: str) -> User | None:
        return await self._repository.get_by_app_id(app_id)

    async def find_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def list_users(self, page: int, per_page: int) -> tuple[list[User], int]:
        request = PageRequest.of(page, per_page)
        users, total = await self._repository.get_page(skip=request.skip, limit=request.per_page)
        return users, count_pages(total, request.per_page)

    async def create_user(self, data: UserCreate) -> User:
        """Create a user and return it as re-read from storage."""
        sex = parse_sex(data.sex)
        now = datetime.now(timezone.utc)
        user = User(
            id=str(uuid.uuid4()),
            app_id=data.app_id,
            name=data.name,
            sex=sex,
            email=data.email,
            phone=data.phone,
            birthday=data.birthday,
            created_at=now,
            updated_at=now,
        )
        await self._repository.create(user)
        return await self._reload(user.id)

    async def find_or_create_by_app_id(self, app_id: str) -> User:
        """Return the user bound to ``app_id``, creating a minimal one on first sight.

        A concurrent login for the same new ``app_id`` makes one insert fail on
        the unique constraint; that caller re-reads the winner's row instead.
        """
        existing = await self._repository.get_by_app_id(app_id)
        if existing is not None:
            return existing

        now = datetime.now(timezone.utc)
        user = User(id=str(uuid.uuid4()), app_id=app_id, sex=0, created_at=now, updated_at=now)
        try:
            await self._repository.create(user)
            logger.info("Created user %s for new app_id", user.id)
        except DuplicateEntityError:
            logger.warning("Concurrent first login for app_id %s, re-reading", app_id)

        created = await self._repository.get_by_app_id(app_id)
        if created is None:
            raise StorageError("reload user by app_id")
        return created

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        user.replace_profile(
            name=data.name,
            sex=parse_sex(data.sex),
            email=data.email,
            phone=data.phone,
            birthday=data.birthday,
        )
        return await self._repository.update(user)

    async def delete_user(self, user_id: str) -> int:
        return await self._repository.delete(user_id)

    async def _reload(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise StorageError("reload created user")
        return user
