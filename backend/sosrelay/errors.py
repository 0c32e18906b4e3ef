"""Error taxonomy surfaced to API callers.

Each error is an ``HTTPException`` so services can raise it directly and
FastAPI renders it as ``{"detail": ...}`` with the matching status code.
"""
from typing import Any

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """One or more fields failed validation; every violation is listed."""

    def __init__(self, errors: list[dict[str, Any]], message: str = "Validation failed"):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": message, "errors": errors},
        )


class BadRequestError(HTTPException):
    def __init__(self, detail: Any = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: Any = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: Any = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: Any = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def field_error(loc: tuple, message: str) -> dict[str, Any]:
    """Shape one violation as ``{"field", "path", "message"}``."""
    path = [part for part in loc if part not in ("body", "path", "query")]
    return {
        "field": ".".join(str(part) for part in path),
        "path": path,
        "message": message,
    }
