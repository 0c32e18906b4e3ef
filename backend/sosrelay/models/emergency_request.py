"""EmergencyRequest ORM model."""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sosrelay.database import Base


class RequestStatus(str, enum.Enum):
    pending = "pending"
    processed = "processed"
    cancelled = "cancelled"


class EmergencyRequest(Base):
    __tablename__ = "emergency_requests"
    # Ids are never handed out twice, even after a row disappears
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True, index=True)  # not a foreign key
    emergency_type = Column(Integer, nullable=False)
    latitude = Column(String(32), nullable=True)
    longitude = Column(String(32), nullable=True)
    location_description = Column(Text, nullable=True)
    symptoms = Column(Text, nullable=True)
    details = Column(JSON, nullable=False, default=dict)
    status = Column(String(20), nullable=False, default=RequestStatus.pending.value)
    created_at = Column(DateTime(timezone=True), nullable=False)
