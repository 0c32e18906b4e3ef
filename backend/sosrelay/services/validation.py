"""Submission validator — base rules plus the rules of the emergency type.

A raw payload is checked in one pass:

1. The base fields (``emergencyType`` in 1..5, optional location text,
   ``userId``, ``details``) via ``EmergencyRequestPayload``.
2. The type-specific fields via the details model registered for the
   payload's ``emergencyType``. Type-specific keys may be sent at the top
   level or inside ``details``; a top-level value wins.

Violations from both steps are collected together and raised as a single
``ValidationError``. The type-specific step only runs when the discriminant
itself is valid.
"""
import logging
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError as PydanticValidationError

from sosrelay.errors import ValidationError, field_error
from sosrelay.schemas.details import DETAIL_FIELDS, DETAIL_MODELS, DetailsBase
from sosrelay.schemas.emergency_request import EmergencyRequestCreate, EmergencyRequestPayload

logger = logging.getLogger(__name__)

_DISCRIMINANT = TypeAdapter(Annotated[int, Field(strict=True, ge=1, le=5)])


def _base_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [field_error(err["loc"], err["msg"]) for err in exc.errors()]


def _detail_errors(model: type[DetailsBase], exc: PydanticValidationError) -> list[dict[str, Any]]:
    """Translate errors on type-specific fields into the caller-facing messages."""
    errors = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else ""
        message = model.messages.get(field, err["msg"])
        errors.append(field_error(err["loc"], message))
    return errors


def _collect_details(raw: dict[str, Any]) -> dict[str, Any]:
    details = raw.get("details")
    merged = dict(details) if isinstance(details, dict) else {}
    for key in DETAIL_FIELDS:
        if key in raw:
            merged[key] = raw[key]
    return merged


def _blank_to_none(value: str | None) -> str | None:
    """Clients send empty text when they have nothing; store it as null."""
    if value is None or not value.strip():
        return None
    return value


def _emergency_type(raw: dict[str, Any]) -> int | None:
    """Return the discriminant on its own when the rest of the base failed."""
    value = raw.get("emergencyType", raw.get("emergency_type"))
    try:
        return _DISCRIMINANT.validate_python(value)
    except PydanticValidationError:
        return None


def validate_submission(raw: Any) -> EmergencyRequestCreate:
    """Validate a raw submission and return a normalized request.

    Raises ``ValidationError`` listing every failing field.
    """
    if not isinstance(raw, dict):
        raise ValidationError([field_error((), "Request body must be a JSON object")])

    errors: list[dict[str, Any]] = []
    base = None
    try:
        base = EmergencyRequestPayload.model_validate(raw)
    except PydanticValidationError as exc:
        errors.extend(_base_errors(exc))

    emergency_type = base.emergency_type if base else _emergency_type(raw)
    details: dict[str, Any] = {}
    if emergency_type is not None:
        model = DETAIL_MODELS[emergency_type]
        try:
            details = model.model_validate(_collect_details(raw)).to_details()
        except PydanticValidationError as exc:
            errors.extend(_detail_errors(model, exc))

    if errors:
        logger.info("Rejected submission (type=%s) with %d error(s)", emergency_type, len(errors))
        raise ValidationError(errors)

    symptoms = _blank_to_none(base.symptoms)
    if symptoms is None and isinstance(details.get("symptoms"), str):
        symptoms = details["symptoms"]

    return EmergencyRequestCreate(
        emergency_type=base.emergency_type,
        user_id=base.user_id,
        latitude=_blank_to_none(base.latitude),
        longitude=_blank_to_none(base.longitude),
        location_description=_blank_to_none(base.location_description),
        symptoms=symptoms,
        details=details,
    )
