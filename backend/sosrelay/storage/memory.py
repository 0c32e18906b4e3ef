"""Process-lifetime store backed by dicts.

All mutations run under one lock, so id assignment and insert are a single
step even when FastAPI serves requests from its threadpool.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from sosrelay.models.emergency_request import RequestStatus
from sosrelay.schemas.emergency_request import EmergencyRequestCreate, EmergencyRequestOut
from sosrelay.schemas.user import UserCreate, UserRecord
from sosrelay.storage.base import EmergencyRequestStore, StatusMismatch, UsernameTaken

logger = logging.getLogger(__name__)


class MemoryStore(EmergencyRequestStore):

    def __init__(self):
        self._lock = threading.Lock()
        self._requests: dict[int, EmergencyRequestOut] = {}
        self._users: dict[int, UserRecord] = {}
        self._next_request_id = 1
        self._next_user_id = 1

    def create_emergency_request(self, request: EmergencyRequestCreate) -> EmergencyRequestOut:
        with self._lock:
            record = EmergencyRequestOut(
                id=self._next_request_id,
                status=RequestStatus.pending.value,
                created_at=datetime.now(timezone.utc),
                **request.model_dump(),
            )
            self._next_request_id += 1
            self._requests[record.id] = record
        logger.debug("Stored emergency request %d", record.id)
        return record.model_copy(deep=True)

    def get_emergency_request(self, request_id: int) -> Optional[EmergencyRequestOut]:
        record = self._requests.get(request_id)
        return record.model_copy(deep=True) if record else None

    def update_emergency_request_status(
        self,
        request_id: int,
        status: str,
        expected_status: Optional[str] = None,
    ) -> Optional[EmergencyRequestOut]:
        with self._lock:
            record = self._requests.get(request_id)
            if record is None:
                return None
            if expected_status is not None and record.status != expected_status:
                raise StatusMismatch(request_id, expected_status, record.status)
            updated = record.model_copy(update={"status": status})
            self._requests[request_id] = updated
        return updated.model_copy(deep=True)

    def get_emergency_requests_by_user_id(self, user_id: int) -> list[EmergencyRequestOut]:
        with self._lock:
            records = list(self._requests.values())
        return [r.model_copy(deep=True) for r in records if r.user_id == user_id]

    def list_emergency_requests(self, status: Optional[str] = None) -> list[EmergencyRequestOut]:
        with self._lock:
            records = list(self._requests.values())
        if status is not None:
            records = [r for r in records if r.status == status]
        return [r.model_copy(deep=True) for r in records]

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._lock:
            users = list(self._users.values())
        for user in users:
            if user.username == username:
                return user.model_copy()
        return None

    def create_user(self, user: UserCreate) -> UserRecord:
        with self._lock:
            if any(u.username == user.username for u in self._users.values()):
                raise UsernameTaken(user.username)
            record = UserRecord(id=self._next_user_id, **user.model_dump())
            self._next_user_id += 1
            self._users[record.id] = record
        return record.model_copy()
