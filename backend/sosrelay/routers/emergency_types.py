"""Emergency type catalog routes."""
from fastapi import APIRouter

from sosrelay.catalog import EMERGENCY_TYPES, get_emergency_type
from sosrelay.errors import NotFoundError
from sosrelay.schemas.emergency_type import EmergencyTypeOut

router = APIRouter()


@router.get("", response_model=list[EmergencyTypeOut])
def list_emergency_types():
    return EMERGENCY_TYPES


@router.get("/{type_id}", response_model=EmergencyTypeOut)
def read_emergency_type(type_id: int):
    emergency_type = get_emergency_type(type_id)
    if emergency_type is None:
        raise NotFoundError("Emergency type not found")
    return emergency_type
