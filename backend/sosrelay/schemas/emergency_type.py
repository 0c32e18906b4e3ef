"""Pydantic schemas for the emergency type catalog."""
from pydantic import BaseModel

from sosrelay.schemas.emergency_request import CAMEL_CONFIG


class EmergencyTypeOut(BaseModel):
    id: int
    title: str
    description: str
    estimated_response: str

    model_config = CAMEL_CONFIG
