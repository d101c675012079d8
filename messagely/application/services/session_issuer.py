"""Session issuer — signs and verifies bearer JWTs."""

import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

import structlog
from jose import JWTError, jwt

from messagely.config import Settings
from messagely.core.exceptions import ConfigurationError
from messagely.core.security import utcnow

logger = structlog.get_logger(__name__)

PLACEHOLDER_SECRETS = {"change-me"}


class SessionIssuer:
    """Mint stateless tokens for users who passed a credential check.

    Tokens carry the ``username`` claim plus ``iat``, ``exp`` and a random
    ``jti``, so two logins never produce the same token. Any holder of the
    secret can verify them.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 60,
        clock: Callable[[], datetime] = utcnow,
    ):
        if not secret_key:
            raise ConfigurationError("SECRET_KEY is not set; cannot sign tokens")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionIssuer":
        if settings.SECRET_KEY in PLACEHOLDER_SECRETS:
            if settings.ENVIRONMENT == "production":
                raise ConfigurationError("SECRET_KEY still has its placeholder value")
            logger.warning("SECRET_KEY has its placeholder value; tokens are insecure")
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expiration_minutes=settings.JWT_EXPIRATION_MINUTES,
        )

    def issue(self, username: str) -> str:
        now = self.clock()
        claims = {
            "username": username,
            "iat": now,
            "exp": now + self.expiration,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[dict]:
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None
