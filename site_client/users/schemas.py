"""User API schemas."""

from enum import StrEnum

from pydantic import BaseModel


class UserRole(StrEnum):
    """Access roles."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class UserProfile(BaseModel):
    """Caller-editable profile."""

    name: str
    email: str = ""
