"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from dataclasses import dataclass

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blockboard.application.services import (
    AuthService,
    BlockService,
    ImageService,
    SearchHistoryService,
    UserService,
)
from blockboard.domain.entities import User
from blockboard.domain.exceptions import AuthenticationError
from blockboard.infrastructure.container import AppContainer
from blockboard.infrastructure.database.session import get_db_session
from blockboard.infrastructure.database.repositories import (
    SQLAlchemyBlockRepository,
    SQLAlchemySearchHistoryRepository,
    SQLAlchemyUserRepository,
)

_bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    yield UserService(SQLAlchemyUserRepository(session))


def get_image_service(container: AppContainer = Depends(get_container)) -> ImageService:
    """Provides an ImageService bound to the shared object storage client."""
    return ImageService(container.object_storage)


async def get_block_service(
    session: AsyncSession = Depends(get_db_session),
    image_service: ImageService = Depends(get_image_service),
) -> AsyncGenerator[BlockService, None]:
    """Provides a BlockService with its repository and image service wired up."""
    yield BlockService(SQLAlchemyBlockRepository(session), image_service=image_service)


async def get_search_history_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SearchHistoryService, None]:
    yield SearchHistoryService(SQLAlchemySearchHistoryRepository(session))


def get_auth_service(
    container: AppContainer = Depends(get_container),
    user_service: UserService = Depends(get_user_service),
) -> AuthService:
    """Provides an AuthService wired to the identity provider and token issuer."""
    return AuthService(
        identity_provider=container.identity_provider,
        user_service=user_service,
        token_issuer=container.token_issuer,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the caller from ``Authorization: Bearer <token>``."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")
    return await auth_service.authenticate(credentials.credentials)


@dataclass(frozen=True)
class PageParams:
    page: int
    per_page: int


def get_page_params(
    page: int = Query(1, description="1-indexed page number"),
    posts_per_page: int | None = Query(None, description="Rows per page"),
    container: AppContainer = Depends(get_container),
) -> PageParams:
    """Paging query parameters; ``posts_per_page`` falls back to the configured default."""
    if posts_per_page is None:
        posts_per_page = container.settings.default_page_size
    return PageParams(page=page, per_page=posts_per_page)
