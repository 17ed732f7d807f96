"""Unit tests for the PyJWT-backed token issuer."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blockboard.domain.exceptions import AuthenticationError
from blockboard.infrastructure.security.jwt_token_issuer import JwtTokenIssuer

SECRET = "test-secret-with-enough-length-for-hs256"


def test_issue_then_verify_returns_subject():
    issuer = JwtTokenIssuer(SECRET)
    assert issuer.verify(issuer.issue("openid-1")) == "openid-1"


def test_token_carries_standard_claims():
    token = JwtTokenIssuer(SECRET, expire_minutes=30).issue("openid-1")

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert claims["sub"] == "openid-1"
    assert claims["exp"] - claims["iat"] == 30 * 60


def test_wrong_secret_is_rejected():
    token = JwtTokenIssuer(SECRET).issue("openid-1")
    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(SECRET + "-other").verify(token)


def test_expired_token_is_rejected():
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": "openid-1", "iat": past, "exp": past + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(SECRET).verify(token)


def test_token_without_subject_is_rejected():
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}, SECRET, algorithm="HS256"
    )
    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(SECRET).verify(token)


def test_malformed_token_is_rejected():
    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(SECRET).verify("not-a-jwt")


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JwtTokenIssuer("")
