"""Pydantic schemas for EmergencyRequests."""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from sosrelay.models.emergency_request import RequestStatus

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class EmergencyRequestPayload(BaseModel):
    """Base fields every submission is checked against, whatever its type."""

    emergency_type: int = Field(strict=True, ge=1, le=5)
    user_id: Optional[int] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location_description: Optional[str] = None
    symptoms: Optional[str] = None
    details: Optional[dict[str, Any]] = None

    model_config = {**CAMEL_CONFIG, "coerce_numbers_to_str": True}


class EmergencyRequestCreate(BaseModel):
    """A validated submission, ready to be handed to the store."""

    emergency_type: int
    user_id: Optional[int] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location_description: Optional[str] = None
    symptoms: Optional[str] = None
    details: dict[str, Any] = {}

    model_config = CAMEL_CONFIG


class EmergencyRequestOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    emergency_type: int
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location_description: Optional[str] = None
    symptoms: Optional[str] = None
    details: dict[str, Any] = {}
    status: str
    created_at: datetime

    model_config = CAMEL_CONFIG


class StatusUpdate(BaseModel):
    status: RequestStatus
