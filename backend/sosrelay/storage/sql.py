"""SQLAlchemy-backed store (SQLite for development, PostgreSQL in production)."""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from sosrelay.models.emergency_request import EmergencyRequest, RequestStatus
from sosrelay.models.user import User
from sosrelay.schemas.emergency_request import EmergencyRequestCreate, EmergencyRequestOut
from sosrelay.schemas.user import UserCreate, UserRecord
from sosrelay.storage.base import EmergencyRequestStore, StatusMismatch, UsernameTaken

logger = logging.getLogger(__name__)


def _to_record(row: EmergencyRequest) -> EmergencyRequestOut:
    created_at = row.created_at
    # SQLite hands timestamps back naive; they were written as UTC
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return EmergencyRequestOut(
        id=row.id,
        user_id=row.user_id,
        emergency_type=row.emergency_type,
        latitude=row.latitude,
        longitude=row.longitude,
        location_description=row.location_description,
        symptoms=row.symptoms,
        details=row.details or {},
        status=row.status,
        created_at=created_at,
    )


def _to_user(row: User) -> UserRecord:
    return UserRecord(id=row.id, username=row.username, password=row.password)


class SqlStore(EmergencyRequestStore):

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def create_emergency_request(self, request: EmergencyRequestCreate) -> EmergencyRequestOut:
        with self._session() as db:
            row = EmergencyRequest(
                **request.model_dump(),
                status=RequestStatus.pending.value,
                created_at=datetime.now(timezone.utc),
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.debug("Stored emergency request %d", row.id)
            return _to_record(row)

    def get_emergency_request(self, request_id: int) -> Optional[EmergencyRequestOut]:
        with self._session() as db:
            row = db.get(EmergencyRequest, request_id)
            return _to_record(row) if row else None

    def update_emergency_request_status(
        self,
        request_id: int,
        status: str,
        expected_status: Optional[str] = None,
    ) -> Optional[EmergencyRequestOut]:
        with self._session() as db:
            # Compare-and-set in one UPDATE so concurrent transitions serialize
            query = db.query(EmergencyRequest).filter(EmergencyRequest.id == request_id)
            if expected_status is not None:
                query = query.filter(EmergencyRequest.status == expected_status)
            changed = query.update({EmergencyRequest.status: status}, synchronize_session=False)
            db.commit()
            row = db.get(EmergencyRequest, request_id)
            if row is None:
                return None
            if not changed:
                raise StatusMismatch(request_id, expected_status, row.status)
            return _to_record(row)

    def get_emergency_requests_by_user_id(self, user_id: int) -> list[EmergencyRequestOut]:
        with self._session() as db:
            rows = (
                db.query(EmergencyRequest)
                .filter(EmergencyRequest.user_id == user_id)
                .order_by(EmergencyRequest.id)
                .all()
            )
            return [_to_record(row) for row in rows]

    def list_emergency_requests(self, status: Optional[str] = None) -> list[EmergencyRequestOut]:
        with self._session() as db:
            query = db.query(EmergencyRequest)
            if status is not None:
                query = query.filter(EmergencyRequest.status == status)
            return [_to_record(row) for row in query.order_by(EmergencyRequest.id).all()]

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        with self._session() as db:
            row = db.get(User, user_id)
            return _to_user(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._session() as db:
            row = db.query(User).filter(User.username == username).first()
            return _to_user(row) if row else None

    def create_user(self, user: UserCreate) -> UserRecord:
        with self._session() as db:
            row = User(**user.model_dump())
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise UsernameTaken(user.username)
            db.refresh(row)
            return _to_user(row)
