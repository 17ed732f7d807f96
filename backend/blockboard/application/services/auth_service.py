"""Login via the external identity provider and bearer-token authentication."""

import logging
from dataclasses import dataclass

from blockboard.application.interfaces import IdentityProvider, TokenIssuer
from blockboard.application.services.user_service import UserService
from blockboard.domain.entities import User
from blockboard.domain.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    token: str
    session_key: str | None


class AuthService:
    """Exchanges authorization codes for users + session tokens."""

    def __init__(
        self,
        identity_provider: IdentityProvider,
        user_service: UserService,
        token_issuer: TokenIssuer,
    ):
        self._identity_provider = identity_provider
        self._user_service = user_service
        self._token_issuer = token_issuer

    async def login(self, code: str) -> LoginResult:
        """Exchange ``code``, find or create the bound user, and issue a token."""
        identity = await self._identity_provider.exchange_code(code)
        if not identity.openid:
            raise ValidationError("Missing openid", field="js_code")

        user = await self._user_service.find_or_create_by_app_id(identity.openid)
        token = self._token_issuer.issue(user.app_id)
        logger.info("User %s logged in via %s", user.id, self._identity_provider.provider_name)
        return LoginResult(user=user, token=token, session_key=identity.session_key)

    async def authenticate(self, token: str) -> User:
        """Resolve the user a bearer token was issued for."""
        app_id = self._token_issuer.verify(token)
        user = await self._user_service.find_by_app_id(app_id)
        if user is None:
            raise AuthenticationError("User for token no longer exists")
        return user
