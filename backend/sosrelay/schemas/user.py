"""Pydantic schemas for Users."""
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class UserRecord(UserOut):
    """A stored user, password included. Never returned on the wire."""

    password: str
