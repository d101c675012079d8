"""Bearer token dependencies."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from messagely.application.services.session_issuer import SessionIssuer
from messagely.core.exceptions import AuthenticationFailedError, ForbiddenError
from messagely.interfaces.deps import get_session_issuer

security = HTTPBearer(auto_error=False)


def get_current_username(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: SessionIssuer = Depends(get_session_issuer),
) -> str:
    """Extract the username claim from a valid bearer token."""
    if credentials is None:
        raise AuthenticationFailedError("Missing bearer token")

    payload = issuer.decode(credentials.credentials)
    if payload is None or not payload.get("username"):
        raise AuthenticationFailedError("Invalid or expired token")

    return payload["username"]


def ensure_correct_user(
    username: str,
    current_username: str = Depends(get_current_username),
) -> str:
    """Only the user named in the path may read it."""
    if username != current_username:
        raise ForbiddenError("You may only access your own account")
    return current_username
