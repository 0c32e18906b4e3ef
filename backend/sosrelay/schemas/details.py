"""Type-specific request details, one closed model per emergency type.

Each model names the fields its emergency type needs and the message shown
to the caller when one of them is missing or too short.  Validated details
are dumped back into the open ``details`` mapping of the stored record, so
keys the client added on its own survive untouched (``extra="allow"``).
"""
from typing import Any, ClassVar, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DetailsBase(BaseModel):
    emergency_type: ClassVar[int]
    messages: ClassVar[dict[str, str]] = {}

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
        "coerce_numbers_to_str": True,
    }

    def to_details(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Conditions(BaseModel):
    fever: Optional[bool] = None
    breathing: Optional[bool] = None
    pain: Optional[bool] = None
    dizziness: Optional[bool] = None


class MedicalConsultation(DetailsBase):
    emergency_type: ClassVar[int] = 1
    messages: ClassVar[dict[str, str]] = {
        "symptoms": "Please describe your symptoms (minimum 5 characters)",
        "duration": "Please select duration",
        "severity": "Please rate severity (1-10)",
    }

    symptoms: str = Field(min_length=5)
    duration: str = Field(min_length=1)
    severity: int = Field(strict=True, ge=1, le=10)
    conditions: Optional[Conditions] = None


class FacilityFinder(DetailsBase):
    emergency_type: ClassVar[int] = 2
    messages: ClassVar[dict[str, str]] = {
        "medicalNeed": "Please describe what you're looking for",
        "urgency": "Please select urgency level",
        "travelMode": "Please select how you're traveling",
    }

    medical_need: str = Field(min_length=5)
    urgency: str = Field(min_length=1)
    travel_mode: str = Field(min_length=1)


class MedicineDelivery(DetailsBase):
    emergency_type: ClassVar[int] = 3
    messages: ClassVar[dict[str, str]] = {
        "medications": "Please list the medications you need",
    }

    medications: str = Field(min_length=5)
    prescription: Optional[bool] = None
    medical_condition: Optional[str] = None


class EmergencyPersonnel(DetailsBase):
    emergency_type: ClassVar[int] = 4
    messages: ClassVar[dict[str, str]] = {
        "emergencyDescription": "Please describe the emergency situation",
        "numberOfPeople": "Please indicate how many people need help",
    }

    emergency_description: str = Field(min_length=10)
    number_of_people: str = Field(min_length=1)
    hazards: Optional[str] = None


class HelicopterEvacuation(DetailsBase):
    emergency_type: ClassVar[int] = 5
    messages: ClassVar[dict[str, str]] = {
        "emergencyDescription": "Please describe the emergency in detail",
        "numberOfPeople": "Please indicate how many people need evacuation",
        "terrainDescription": "Please describe the terrain",
    }

    emergency_description: str = Field(min_length=10)
    number_of_people: str = Field(min_length=1)
    terrain_description: str = Field(min_length=5)
    landing_zone: Optional[str] = None


DETAIL_MODELS: dict[int, type[DetailsBase]] = {
    model.emergency_type: model
    for model in (
        MedicalConsultation,
        FacilityFinder,
        MedicineDelivery,
        EmergencyPersonnel,
        HelicopterEvacuation,
    )
}

# Type-specific keys a client may send at the top level of the payload
DETAIL_FIELDS = frozenset({
    "symptoms", "duration", "severity", "conditions",
    "medicalNeed", "urgency", "travelMode",
    "medications", "prescription", "medicalCondition",
    "emergencyDescription", "numberOfPeople", "hazards",
    "terrainDescription", "landingZone",
})
