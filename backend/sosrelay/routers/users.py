"""User API routes."""
import logging
from fastapi import APIRouter, Depends, status

from sosrelay.dependencies import get_store
from sosrelay.errors import ConflictError, NotFoundError
from sosrelay.schemas.emergency_request import EmergencyRequestOut
from sosrelay.schemas.user import UserCreate, UserOut
from sosrelay.storage.base import EmergencyRequestStore, UsernameTaken

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, store: EmergencyRequestStore = Depends(get_store)):
    """Register a user. Usernames are unique."""
    try:
        user = store.create_user(payload)
    except UsernameTaken:
        raise ConflictError("Username already taken")
    logger.info("Created user %d (%s)", user.id, user.username)
    return user


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, store: EmergencyRequestStore = Depends(get_store)):
    """Fetch a single user by ID."""
    user = store.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/{user_id}/emergency-requests", response_model=list[EmergencyRequestOut])
def list_user_requests(user_id: int, store: EmergencyRequestStore = Depends(get_store)):
    """Requests submitted with this user's ID, oldest first."""
    return store.get_emergency_requests_by_user_id(user_id)
