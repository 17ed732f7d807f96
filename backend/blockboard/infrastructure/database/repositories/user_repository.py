"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blockboard.application.interfaces import UserRepository
from blockboard.domain.entities import User
from blockboard.domain.exceptions import DuplicateEntityError, StorageError
from blockboard.infrastructure.database.models import UserModel
from blockboard.infrastructure.database.repositories.errors import storage_errors


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            app_id=model.app_id,
            name=model.name,
            sex=model.sex,
            birthday=model.birthday,
            phone=model.phone,
            email=model.email,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            id=entity.id,
            app_id=entity.app_id,
            name=entity.name,
            sex=entity.sex,
            birthday=entity.birthday,
            phone=entity.phone,
            email=entity.email,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, user_id: str) -> User | None:
        with storage_errors("load user"):
            result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_app_id(self, app_id: str) -> User | None:
        with storage_errors("load user by app_id"):
            result = await self._session.execute(
                select(UserModel).where(UserModel.app_id == app_id)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        with storage_errors("load user by email"):
            result = await self._session.execute(
                select(UserModel).where(UserModel.email == email).limit(1)
            )
            model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_page(self, *, skip: int, limit: int) -> tuple[list[User], int]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.asc(), UserModel.id.asc())
            .offset(skip)
            .limit(limit)
        )
        with storage_errors("list users"):
            total = (
                await self._session.execute(select(func.count()).select_from(UserModel))
            ).scalar_one()
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows], total

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # The failed flush leaves the session unusable until rolled back
            await self._session.rollback()
            raise DuplicateEntityError("User", "app_id", user.app_id) from exc
        except SQLAlchemyError as exc:
            raise StorageError("create user") from exc
        with storage_errors("create user"):
            await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        with storage_errors("update user"):
            model = await self._session.get(UserModel, user.id)
            if model is None:
                raise ValueError(f"User {user.id} not found in database")
            model.name = user.name
            model.sex = user.sex
            model.email = user.email
            model.phone = user.phone
            model.birthday = user.birthday
            model.updated_at = user.updated_at
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, user_id: str) -> int:
        with storage_errors("delete user"):
            result = await self._session.execute(
                delete(UserModel).where(UserModel.id == user_id)
            )
            await self._session.flush()
        return result.rowcount
