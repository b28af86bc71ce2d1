"""
Identity Verifier Implementations.

Bearer token handling backed by signed JWTs (PyJWT).
"""

import logging
from datetime import datetime, timedelta
from typing import Mapping, Optional

import jwt

from ..domain.errors import UnauthenticatedError
from ..domain.interfaces import IdentityVerifier
from ...core.timezone_utils import now_utc


def get_bearer_token(headers: Mapping[str, str]) -> Optional[str]:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns None when the header is absent or not a bearer credential; the
    verifier rejects None, so both cases end up as UnauthenticatedError.
    """
    auth_header = headers.get("authorization")
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


class JWTIdentityVerifier(IdentityVerifier):
    """Validates HMAC-signed access tokens and returns their subject"""

    def __init__(self, secret: str, issuer: str = "tubely-access", algorithm: str = "HS256"):
        if not secret:
            raise ValueError("JWT secret cannot be empty")
        self.secret = secret
        self.issuer = issuer
        self.algorithm = algorithm
        self.logger = logging.getLogger(__name__)

    def verify(self, credential: Optional[str]) -> str:
        """Return the user ID carried by the token"""
        if not credential:
            raise UnauthenticatedError("Missing access token")

        try:
            claims = jwt.decode(
                credential,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["sub", "exp", "iss"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthenticatedError("Access token has expired")
        except jwt.InvalidTokenError as e:
            self.logger.debug(f"Rejected access token: {e}")
            raise UnauthenticatedError("Invalid access token")

        user_id = claims.get("sub")
        if not user_id:
            raise UnauthenticatedError("Access token has no subject")
        return str(user_id)

    def issue(self, user_id: str, expires_in: timedelta = timedelta(hours=1),
              issued_at: Optional[datetime] = None) -> str:
        """Create a signed access token for a user"""
        issued_at = issued_at or now_utc()
        claims = {
            "iss": self.issuer,
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + expires_in,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)
