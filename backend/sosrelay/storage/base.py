"""Storage port for emergency requests and users.

The lifecycle API only talks to this interface, so the in-memory backend
can be swapped for the SQL one (or anything else) through configuration.
Stores are permissive about status values; transition rules live in
``sosrelay.services.emergency_service``.
"""
from abc import ABC, abstractmethod
from typing import Optional

from sosrelay.schemas.emergency_request import EmergencyRequestCreate, EmergencyRequestOut
from sosrelay.schemas.user import UserCreate, UserRecord


class StatusMismatch(Exception):
    """The stored status was not the one the caller expected to replace."""

    def __init__(self, request_id: int, expected: str, actual: str):
        self.request_id = request_id
        self.expected = expected
        self.actual = actual
        super().__init__(f"request {request_id} is {actual}, expected {expected}")


class UsernameTaken(Exception):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"username {username!r} already exists")


class EmergencyRequestStore(ABC):

    @abstractmethod
    def create_emergency_request(self, request: EmergencyRequestCreate) -> EmergencyRequestOut:
        """Assign the next id, status ``pending`` and ``created_at``; store and return."""

    @abstractmethod
    def get_emergency_request(self, request_id: int) -> Optional[EmergencyRequestOut]:
        ...

    @abstractmethod
    def update_emergency_request_status(
        self,
        request_id: int,
        status: str,
        expected_status: Optional[str] = None,
    ) -> Optional[EmergencyRequestOut]:
        """Replace only the status. Returns ``None`` when the id is unknown.

        With ``expected_status`` the check and the write are one atomic step;
        ``StatusMismatch`` is raised when the stored status differs.
        """

    @abstractmethod
    def get_emergency_requests_by_user_id(self, user_id: int) -> list[EmergencyRequestOut]:
        ...

    @abstractmethod
    def list_emergency_requests(self, status: Optional[str] = None) -> list[EmergencyRequestOut]:
        ...

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def create_user(self, user: UserCreate) -> UserRecord:
        """Raises ``UsernameTaken`` when the username is already stored."""
