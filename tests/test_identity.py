from datetime import datetime, timedelta, timezone

import jwt
import pytest

from tubely.thumbnails.domain.errors import UnauthenticatedError
from tubely.thumbnails.infrastructure.identity import JWTIdentityVerifier, get_bearer_token

from conftest import TEST_SECRET


def test_issued_token_round_trips_to_user(verifier):
    assert verifier.verify(verifier.issue("u1")) == "u1"


def test_missing_token_is_rejected(verifier):
    with pytest.raises(UnauthenticatedError):
        verifier.verify(None)


def test_expired_token_is_rejected(verifier):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = verifier.issue("u1", expires_in=timedelta(hours=1), issued_at=issued)

    with pytest.raises(UnauthenticatedError, match="expired"):
        verifier.verify(token)


def test_token_signed_with_other_secret_is_rejected(verifier):
    other = JWTIdentityVerifier(secret="another-secret-of-reasonable-length-xyz")
    with pytest.raises(UnauthenticatedError):
        verifier.verify(other.issue("u1"))


def test_wrong_issuer_is_rejected(verifier):
    other = JWTIdentityVerifier(secret=TEST_SECRET, issuer="somebody-else")
    with pytest.raises(UnauthenticatedError):
        verifier.verify(other.issue("u1"))


def test_token_without_subject_is_rejected(verifier):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"iss": "tubely-access", "iat": now, "exp": now + timedelta(minutes=5)}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(UnauthenticatedError):
        verifier.verify(token)


def test_garbage_token_is_rejected(verifier):
    with pytest.raises(UnauthenticatedError):
        verifier.verify("not-a-jwt")


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JWTIdentityVerifier(secret="")


@pytest.mark.parametrize(
    "headers, expected",
    [
        ({"authorization": "Bearer abc.def.ghi"}, "abc.def.ghi"),
        ({"authorization": "bearer token"}, "token"),
        ({"authorization": "Basic dXNlcjpwYXNz"}, None),
        ({"authorization": "Bearer"}, None),
        ({}, None),
    ],
)
def test_get_bearer_token(headers, expected):
    assert get_bearer_token(headers) == expected
