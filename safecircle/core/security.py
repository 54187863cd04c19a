"""Password hashing and JWT utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from safecircle.core.errors import InvalidToken, TokenExpired

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a plain password."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plain password against a hash."""
    return bcrypt.checkpw(plain.encode(), hashed.encode())


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    email: str


class TokenService:
    """Issues and verifies signed, time-bounded access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user_id: int, email: str, now: datetime | None = None) -> str:
        """Create a JWT access token for a user."""
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a JWT.

        Raises TokenExpired once ``exp`` has passed and InvalidToken for any
        signature, format or claim problem.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpired()
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidToken()

        try:
            return TokenClaims(user_id=int(payload["sub"]), email=payload["email"])
        except (KeyError, TypeError, ValueError):
            raise InvalidToken()
