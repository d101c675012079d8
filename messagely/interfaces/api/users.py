"""User routes: directory, own profile, and message listings."""

from typing import List

from fastapi import APIRouter, Depends

from messagely.application.services.credential_store import CredentialStore
from messagely.application.services.message_service import messages_from, messages_to
from messagely.domain.repositories.message_repository import MessageRepository
from messagely.domain.schemas.message import ReceivedMessage, SentMessage
from messagely.domain.schemas.user import UserRead, UserSummary
from messagely.interfaces.api.deps import ensure_correct_user, get_current_username
from messagely.interfaces.deps import get_credential_store, get_message_repository

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserSummary])
def list_users(
    store: CredentialStore = Depends(get_credential_store),
    current_username: str = Depends(get_current_username),
):
    return store.all()


@router.get("/{username}", response_model=UserRead)
def get_user(
    username: str,
    store: CredentialStore = Depends(get_credential_store),
    current_username: str = Depends(ensure_correct_user),
):
    return store.get(username)


@router.get("/{username}/from", response_model=List[SentMessage])
def list_sent_messages(
    username: str,
    repo: MessageRepository = Depends(get_message_repository),
    current_username: str = Depends(ensure_correct_user),
):
    """Messages this user sent."""
    return messages_from(repo, username)


@router.get("/{username}/to", response_model=List[ReceivedMessage])
def list_received_messages(
    username: str,
    repo: MessageRepository = Depends(get_message_repository),
    current_username: str = Depends(ensure_correct_user),
):
    """Messages this user received."""
    return messages_to(repo, username)
