"""Emergency request lifecycle — create, fetch and status transitions.

Status moves only along the lifecycle table below:

    pending -> processed
    pending -> cancelled

``processed`` and ``cancelled`` are terminal. Re-applying the status a
request already has is accepted and changes nothing; any other move out of
a terminal state is a conflict. The store applies each transition as a
compare-and-set against the status read here, so two racing callers cannot
both leave ``pending``.
"""
import logging
from typing import Any, Optional

from sosrelay.errors import ConflictError, NotFoundError
from sosrelay.models.emergency_request import RequestStatus
from sosrelay.schemas.emergency_request import EmergencyRequestOut
from sosrelay.services.notifier import Notifier
from sosrelay.services.validation import validate_submission
from sosrelay.storage.base import EmergencyRequestStore, StatusMismatch

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    RequestStatus.pending.value: frozenset({RequestStatus.processed.value, RequestStatus.cancelled.value}),
    RequestStatus.processed.value: frozenset(),
    RequestStatus.cancelled.value: frozenset(),
}


def create_request(store: EmergencyRequestStore, payload: Any) -> EmergencyRequestOut:
    """Validate a raw submission and store it as a new pending request."""
    request = validate_submission(payload)
    record = store.create_emergency_request(request)
    logger.info("Created emergency request %d (type %d)", record.id, record.emergency_type)
    return record


def get_request(store: EmergencyRequestStore, request_id: int) -> EmergencyRequestOut:
    record = store.get_emergency_request(request_id)
    if record is None:
        raise NotFoundError("Emergency request not found")
    return record


def list_requests(
    store: EmergencyRequestStore,
    user_id: Optional[int] = None,
    status: Optional[RequestStatus] = None,
) -> list[EmergencyRequestOut]:
    """List requests in creation order, optionally by user and/or status."""
    if user_id is not None:
        records = store.get_emergency_requests_by_user_id(user_id)
        if status is not None:
            records = [r for r in records if r.status == status.value]
        return records
    return store.list_emergency_requests(status.value if status is not None else None)


def update_status(
    store: EmergencyRequestStore,
    request_id: int,
    new_status: RequestStatus,
) -> EmergencyRequestOut:
    """Apply a lifecycle transition, enforcing the transition table."""
    record = get_request(store, request_id)
    current = record.status
    target = new_status.value

    if current == target:
        logger.info("Emergency request %d already %s", request_id, target)
        return record

    if target not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise ConflictError(f"Emergency request is already {current} and cannot become {target}")

    try:
        updated = store.update_emergency_request_status(request_id, target, expected_status=current)
    except StatusMismatch as exc:
        # Another caller moved the request between our read and our write
        if exc.actual == target:
            return get_request(store, request_id)
        raise ConflictError(f"Emergency request is already {exc.actual} and cannot become {target}")
    if updated is None:
        raise NotFoundError("Emergency request not found")
    logger.info("Emergency request %d moved %s -> %s", request_id, current, target)
    return updated


def has_location(record: EmergencyRequestOut) -> bool:
    return bool(record.latitude and record.longitude)


def relay_location(notifier: Notifier, record: EmergencyRequestOut) -> None:
    """Hand a stored request's coordinates to the notifier.

    Runs after the request is committed. Errors are logged, never raised.
    """
    if not has_location(record):
        return
    try:
        notifier.notify(record.latitude, record.longitude, record.id)
    except Exception:
        logger.exception("Beacon relay failed for emergency request %d", record.id)
