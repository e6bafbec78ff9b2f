"""
Password hashing and session tokens.

Passwords are hashed with bcrypt; sessions are stateless HS256 JWTs that carry
the user id in ``sub`` and expire ``ttl`` after issue. There is no server-side
session table, so expiry is the only way a token stops working.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

import bcrypt
import jwt

from app.exceptions import ServiceValidationError, UnauthorizedError

logger = logging.getLogger("dailydiet.security")

BCRYPT_MAX_BYTES = 72


def _encode_password(password: str) -> bytes:
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ServiceValidationError(
            f"Password must be at most {BCRYPT_MAX_BYTES} bytes",
            code="PASSWORD_TOO_LONG",
        )
    return raw


def hash_password(password: str, rounds: int = 12) -> str:
    """Return a salted bcrypt hash of password."""
    hashed = bcrypt.hashpw(_encode_password(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check password against a stored bcrypt hash.

    Comparison is done by bcrypt.checkpw, never by comparing strings.
    Malformed hashes and over-long passwords count as a mismatch.
    """
    try:
        return bcrypt.checkpw(
            _encode_password(password), password_hash.encode("ascii")
        )
    except (ValueError, ServiceValidationError):
        return False


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionAuthority:
    """Issues and verifies bearer tokens signed with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl
        self._clock = clock or _utc_now

    def expiry_for(self, issued_at: datetime) -> datetime:
        return issued_at + self.ttl

    def issue_with_expiry(self, user_id: int) -> Tuple[str, datetime]:
        """Mint a token for user_id and return it with its ``exp`` instant."""
        issued_at = self._clock()
        exp = int(self.expiry_for(issued_at).timestamp())
        payload = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": exp,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return token, datetime.fromtimestamp(exp, tz=timezone.utc)

    def issue(self, user_id: int) -> str:
        """Mint a token for user_id valid for ``ttl``."""
        token, _ = self.issue_with_expiry(user_id)
        return token

    def verify(self, token: str) -> int:
        """Return the user id embedded in token.

        Expiry is checked against this authority's clock, the same one
        ``issue`` stamps tokens with.

        Raises:
            UnauthorizedError: signature invalid, token malformed or expired
        """
        if not token:
            raise UnauthorizedError("Not authenticated", code="MISSING_TOKEN")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp", "sub"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as e:
            logger.debug(f"token_rejected reason={e}")
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN") from e

        exp = payload["exp"]
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")
        if self._clock().timestamp() >= exp:
            raise UnauthorizedError("Token expired", code="TOKEN_EXPIRED")

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise UnauthorizedError("Invalid token", code="INVALID_TOKEN") from e
