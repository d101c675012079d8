"""
API dependencies for repositories and services, one set per request.
"""

from functools import lru_cache

from fastapi import Depends
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from messagely.config import get_settings
from messagely.core.security import build_password_context
from messagely.infrastructure.database import get_db
from messagely.domain.models.user import User
from messagely.domain.repositories.user_repository import UserRepository
from messagely.domain.repositories.message_repository import MessageRepository
from messagely.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from messagely.infrastructure.repositories.message_repository import SQLAlchemyMessageRepository
from messagely.application.services.credential_store import CredentialStore
from messagely.application.services.session_issuer import SessionIssuer


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_message_repository(db: Session = Depends(get_db)) -> MessageRepository:
    """Get message repository instance."""
    return SQLAlchemyMessageRepository(db)


@lru_cache
def get_password_context() -> CryptContext:
    return build_password_context(get_settings().BCRYPT_WORK_FACTOR)


@lru_cache
def get_session_issuer() -> SessionIssuer:
    """Process-wide issuer; first built during startup so a bad secret fails fast."""
    return SessionIssuer.from_settings(get_settings())


def get_credential_store(
    repo: UserRepository = Depends(get_user_repository),
    pwd_context: CryptContext = Depends(get_password_context),
) -> CredentialStore:
    return CredentialStore(repo, pwd_context)
