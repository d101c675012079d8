"""Credential store — registration, password checks and user lookups."""

from datetime import datetime
from typing import Callable, List

import structlog
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from sqlalchemy.exc import IntegrityError

from messagely.core.exceptions import DuplicateIdentityError, NotFoundError
from messagely.core.security import password_problem, utcnow
from messagely.domain.repositories.user_repository import UserRepository
from messagely.domain.schemas.auth import RegisterRequest
from messagely.domain.schemas.user import (
    LoginTimestamp,
    UserRead,
    UserRegistered,
    UserSummary,
)

logger = structlog.get_logger(__name__)


class CredentialStore:
    """Sole owner of User persistence, username uniqueness and password hashes.

    The store holds no state of its own beyond what is injected: the
    repository (one request-scoped session), the password context carrying the
    configured bcrypt cost, and a clock.
    """

    def __init__(
        self,
        repo: UserRepository,
        pwd_context: CryptContext,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repo = repo
        self.pwd_context = pwd_context
        self.clock = clock

    def register(self, candidate: RegisterRequest) -> UserRegistered:
        """Store a new user with a hashed password.

        Raises DuplicateIdentityError if the username is taken. The pre-check is
        not atomic with the insert; a concurrent registration that wins the race
        surfaces as an IntegrityError on commit and is reported the same way.
        """
        username = candidate.username
        if self.repo.exists(username):
            logger.warning("Registration rejected: username taken", username=username)
            raise DuplicateIdentityError(f"Username {username} is already taken.")

        now = self.clock()
        try:
            user = self.repo.create({
                "username": username,
                "password": self.pwd_context.hash(candidate.password),
                "first_name": candidate.first_name,
                "last_name": candidate.last_name,
                "phone": candidate.phone,
                "join_at": now,
                "last_login_at": now,
            })
        except IntegrityError as exc:
            logger.warning("Registration lost insert race", username=username)
            raise DuplicateIdentityError(f"Username {username} is already taken.") from exc

        logger.info("User registered", username=username)
        return UserRegistered.model_validate(user)

    def authenticate(self, username: str, password: str) -> bool:
        """Is username/password valid?

        Unknown usernames and wrong passwords both return False so callers
        cannot probe which accounts exist. An unknown username still pays for
        one hash verification. Passwords registration would have refused (NUL
        bytes, longer than bcrypt reads) never match.
        """
        hashed = self.repo.get_password_hash(username)
        if hashed is None or password_problem(password):
            self.pwd_context.dummy_verify()
            return False
        try:
            return self.pwd_context.verify(password, hashed)
        except PasswordValueError:
            return False

    def update_login_timestamp(self, username: str) -> LoginTimestamp:
        """Set last_login_at to now. Call only after a successful authenticate()."""
        row = self.repo.update_last_login(username, self.clock())
        if row is None:
            raise NotFoundError(f"No such user: {username}")
        logger.info("Login timestamp updated", username=username)
        return LoginTimestamp.model_validate(row)

    def get(self, username: str) -> UserRead:
        user = self.repo.get(username)
        if user is None:
            raise NotFoundError(f"No such user: {username}")
        return UserRead.model_validate(user)

    def all(self) -> List[UserSummary]:
        """Basic info on every user, ordered by username."""
        return [UserSummary.model_validate(u) for u in self.repo.list()]
