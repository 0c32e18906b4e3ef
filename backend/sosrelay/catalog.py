"""Catalog of the emergency types a client can pick from."""
from typing import Optional

from sosrelay.schemas.emergency_type import EmergencyTypeOut

EMERGENCY_TYPES: list[EmergencyTypeOut] = [
    EmergencyTypeOut(
        id=1,
        title="Medical Consultation",
        description="Get professional medical advice for minor issues like cough, fever, or general health concerns.",
        estimated_response="5-15 minutes",
    ),
    EmergencyTypeOut(
        id=2,
        title="Location-Based Finder",
        description="Find the nearest medical facility while traveling in unfamiliar locations for non-urgent care.",
        estimated_response="1-5 minutes",
    ),
    EmergencyTypeOut(
        id=3,
        title="Medicine Delivery",
        description="Request medicine delivery to remote locations via drone for situations where travel is difficult.",
        estimated_response="1-3 hours",
    ),
    EmergencyTypeOut(
        id=4,
        title="Emergency Personnel",
        description="Dispatch emergency medical personnel to your location using smart navigation in disaster zones.",
        estimated_response="15-60 minutes",
    ),
    EmergencyTypeOut(
        id=5,
        title="Helicopter Evacuation",
        description="Request helicopter evacuation for life-threatening emergencies in inaccessible terrain.",
        estimated_response="1-4 hours",
    ),
]


def get_emergency_type(type_id: int) -> Optional[EmergencyTypeOut]:
    return next((t for t in EMERGENCY_TYPES if t.id == type_id), None)
