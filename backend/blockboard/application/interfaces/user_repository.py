"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from blockboard.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a single user by its UUID."""
        ...

    @abstractmethod
    async def get_by_app_id(self, app_id: str) -> User | None:
        """Retrieve a user by the identifier issued by the identity provider."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_page(self, *, skip: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users in creation order and the total count."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises DuplicateEntityError when ``app_id`` is already taken.
        """
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update an existing user."""
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> int:
        """Delete a user. Returns the number of deleted rows (0 or 1)."""
        ...
