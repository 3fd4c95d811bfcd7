"""
Medsite Backend — Session Token Issuer/Verifier
================================================

What:  Issues signed, time-limited admin tokens and decodes them on
       protected requests.
How:   PyJWT with HS256 and the server-held JWT_SECRET. Claims carry the
       admin's id and username plus `iat`/`exp`.

Verification is a plain call returning AdminClaims or raising:
    InvalidTokenError  → bad signature, malformed token, missing claims
    ExpiredTokenError  → signature valid but past `exp`
Both are reported to clients identically (403).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from medsite.config import settings
from medsite.exceptions import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminClaims:
    """Identity embedded in an admin token."""

    id: int
    username: str


class TokenService:
    """Signs and verifies admin bearer tokens."""

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
    ):
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def issue(self, claims: AdminClaims) -> str:
        """Returns a token for `claims` expiring `expires_in` from now."""
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "id": claims.id,
            "username": claims.username,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> AdminClaims:
        """
        Decodes `token` and returns its claims.

        Raises:
            ExpiredTokenError: Token is past its expiry
            InvalidTokenError: Signature, format or claims are invalid
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(reason=type(e).__name__)

        try:
            return AdminClaims(id=int(payload["id"]), username=str(payload["username"]))
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenError(reason="missing_claims")


token_service = TokenService(
    secret=settings.jwt_secret,
    expires_in=timedelta(hours=settings.jwt_expires_hours),
)
