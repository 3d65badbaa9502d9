"""
Inkpost Backend — Token Service
=================================

What:  Issues and validates the bearer tokens returned by POST /login.
Why:   Stateless authentication: a protected request is authorized by
       checking a signature, not by looking up a server-side session.
How:   HS256 JSON Web Tokens via PyJWT. The payload carries the claim
       (`sub` = user id, `email`) plus `iat` and an absolute `exp`.

Token lifecycle:
    login ──issue()──▶ token (valid for TOKEN_TTL_DAYS from issuance)
    every protected request ──validate()──▶ TokenClaim | InvalidTokenError

There is no revocation list. A leaked token stays valid until `exp`; the
only global kill switch is rotating JWT_SECRET, which invalidates every
outstanding token.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.config import settings
from app.exceptions import InvalidTokenError
from app.schemas.auth import TokenClaim

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class TokenService:
    """
    Signs and verifies identity claims.

    The secret, algorithm and lifetime are injected at construction and never
    change afterwards; the module-level `token_service` is built from settings.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)):
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, claim: TokenClaim, issued_at: Optional[datetime] = None) -> str:
        """
        Mint a signed token for `claim`.

        Args:
            claim:     Identity to embed.
            issued_at: Issuance time (defaults to now, UTC). Expiry is
                       `issued_at + ttl`.
        """
        iat = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": str(claim.user_id),
            "email": claim.email,
            "iat": iat,
            "exp": iat + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaim:
        """
        Verify signature, shape and expiry and return the embedded claim.

        Raises:
            InvalidTokenError: tampered or foreign signature, malformed token,
                               missing claims, non-UUID subject, or expired.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError(context={"reason": "expired"})
        except jwt.PyJWTError as e:
            raise InvalidTokenError(context={"reason": type(e).__name__})

        try:
            return TokenClaim(user_id=uuid.UUID(payload["sub"]), email=payload["email"])
        except (ValueError, TypeError, AttributeError):
            raise InvalidTokenError(context={"reason": "bad_subject"})


token_service = TokenService(
    secret=settings.jwt_secret,
    algorithm=settings.jwt_algorithm,
    ttl=timedelta(days=settings.token_ttl_days),
)
