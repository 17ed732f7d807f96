"""HS256 session tokens signed with PyJWT."""

from datetime import datetime, timedelta, timezone

import jwt
from jwt import InvalidTokenError

from blockboard.application.interfaces.token_issuer import TokenIssuer
from blockboard.domain.exceptions import AuthenticationError


class JwtTokenIssuer(TokenIssuer):
    """Issues ``{sub, iat, exp}`` tokens; ``sub`` is the user's app_id."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24 * 7):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expire_minutes)

    def issue(self, subject: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": subject, "iat": now, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError as exc:
            raise AuthenticationError("Invalid or expired token") from exc
        return claims["sub"]
