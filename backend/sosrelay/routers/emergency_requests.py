"""EmergencyRequest API routes — delegates to emergency_service for lifecycle rules."""
import logging
from typing import Any, Optional
from fastapi import APIRouter, BackgroundTasks, Body, Depends, Query, status

from sosrelay.dependencies import get_notifier, get_store
from sosrelay.models.emergency_request import RequestStatus
from sosrelay.schemas.emergency_request import EmergencyRequestOut, StatusUpdate
from sosrelay.services import emergency_service
from sosrelay.services.notifier import Notifier
from sosrelay.storage.base import EmergencyRequestStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=EmergencyRequestOut, status_code=status.HTTP_201_CREATED)
def create_emergency_request(
    background_tasks: BackgroundTasks,
    payload: dict[str, Any] = Body(...),
    store: EmergencyRequestStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
):
    """Validate and store a new request; relay its coordinates once stored."""
    record = emergency_service.create_request(store, payload)
    if emergency_service.has_location(record):
        background_tasks.add_task(emergency_service.relay_location, notifier, record)
    return record


@router.get("", response_model=list[EmergencyRequestOut])
def list_emergency_requests(
    user_id: Optional[int] = Query(None, alias="userId"),
    status_filter: Optional[RequestStatus] = Query(None, alias="status"),
    store: EmergencyRequestStore = Depends(get_store),
):
    """List requests in creation order, optionally filtered."""
    return emergency_service.list_requests(store, user_id=user_id, status=status_filter)


@router.get("/{request_id}", response_model=EmergencyRequestOut)
def get_emergency_request(request_id: int, store: EmergencyRequestStore = Depends(get_store)):
    """Fetch a single request by ID."""
    return emergency_service.get_request(store, request_id)


@router.patch("/{request_id}/status", response_model=EmergencyRequestOut)
def update_emergency_request_status(
    request_id: int,
    payload: StatusUpdate,
    store: EmergencyRequestStore = Depends(get_store),
):
    """Move a request along its lifecycle (pending -> processed | cancelled)."""
    return emergency_service.update_status(store, request_id, payload.status)
