"""Unit tests for login and bearer-token authentication."""

import pytest

from blockboard.application.interfaces import ExternalIdentity
from blockboard.application.services import AuthService, UserService
from blockboard.domain.exceptions import AuthenticationError, ValidationError


@pytest.fixture
def service(identity_provider, user_repository, token_issuer) -> AuthService:
    return AuthService(
        identity_provider=identity_provider,
        user_service=UserService(user_repository),
        token_issuer=token_issuer,
    )


@pytest.mark.asyncio
async def test_login_creates_user_on_first_sight(service: AuthService, user_repository):
    result = await service.login("code-1")

    assert result.user.app_id == "openid-code-1"
    assert result.user.sex == 0
    assert result.token == "token:openid-code-1"
    assert result.session_key == "session-code-1"
    assert len(user_repository) == 1


@pytest.mark.asyncio
async def test_login_twice_returns_same_user(service: AuthService, user_repository):
    first = await service.login("code-1")
    second = await service.login("code-1")

    assert first.user.id == second.user.id
    assert len(user_repository) == 1


@pytest.mark.asyncio
async def test_login_without_openid_is_rejected(
    service: AuthService, identity_provider, user_repository
):
    identity_provider.identities["bad"] = ExternalIdentity(openid=None, session_key="s")

    with pytest.raises(ValidationError):
        await service.login("bad")
    assert len(user_repository) == 0


@pytest.mark.asyncio
async def test_authenticate_resolves_token_owner(service: AuthService):
    result = await service.login("code-1")

    user = await service.authenticate(result.token)

    assert user.id == result.user.id


@pytest.mark.asyncio
async def test_authenticate_rejects_bad_token(service: AuthService):
    with pytest.raises(AuthenticationError):
        await service.authenticate("garbage")


@pytest.mark.asyncio
async def test_authenticate_rejects_deleted_user(service: AuthService, user_repository):
    result = await service.login("code-1")
    await user_repository.delete(result.user.id)

    with pytest.raises(AuthenticationError):
        await service.authenticate(result.token)
