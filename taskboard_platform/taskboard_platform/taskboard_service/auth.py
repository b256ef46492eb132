from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence
import logging

import jwt
from passlib.context import CryptContext

from .errors import InvalidToken

logger = logging.getLogger(__name__)

ACCESS_TOKEN_EXPIRE_MINUTES = 60


class PasswordHasher:
    """Salted one-way password hashing backed by a passlib CryptContext."""

    # pbkdf2_sha256 avoids external bcrypt backend issues in some environments
    def __init__(self, schemes: Sequence[str] = ("pbkdf2_sha256",)):
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            # Unknown or malformed hash format
            logger.warning("Password hash could not be identified")
            return False


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens are JWTs carrying ``sub`` (user id), ``iat`` and ``exp``. There is
    no refresh and no revocation: a token is valid until ``exp``.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self.lifetime = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        self._clock = clock or _utcnow

    def issue(self, user_id: str) -> str:
        issued_at = self._clock().replace(microsecond=0)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Verify the signature and expiry of a token and return its claims.

        Raises:
            InvalidToken: bad signature, malformed token, missing claims or expired
        """
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidToken("Token has expired") from exc
        except jwt.PyJWTError as exc:
            raise InvalidToken() from exc

        user_id = data["sub"]
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken()
        return TokenClaims(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(data["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
        )

    def verify(self, token: str) -> str:
        return self.decode(token).user_id
