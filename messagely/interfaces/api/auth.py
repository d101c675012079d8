"""Auth API routes — login and register."""

from fastapi import APIRouter, Depends, status

from messagely.application.services.credential_store import CredentialStore
from messagely.application.services.session_issuer import SessionIssuer
from messagely.core.exceptions import AuthenticationFailedError
from messagely.domain.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from messagely.interfaces.deps import get_credential_store, get_session_issuer

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    issuer: SessionIssuer = Depends(get_session_issuer),
):
    if not store.authenticate(body.username, body.password):
        raise AuthenticationFailedError("Invalid user/password")

    store.update_login_timestamp(body.username)
    return TokenResponse(token=issuer.issue(body.username))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    store: CredentialStore = Depends(get_credential_store),
    issuer: SessionIssuer = Depends(get_session_issuer),
):
    """Register a user, log them in and return a token."""
    user = store.register(body)
    return TokenResponse(token=issuer.issue(user.username))
