"""User model for newsroom staff accounts."""

from enum import Enum

from pydantic import Field

from .base import APIModel, DBModel


class Role(str, Enum):
    """Staff roles."""

    ADMIN = "admin"
    EDITOR = "editor"


class User(DBModel):
    """User model. The password hash never leaves the process."""

    username: str = Field(..., min_length=1, description="Unique login name")
    password_hash: str = Field(..., exclude=True, repr=False, description="bcrypt hash")
    role: Role = Field(Role.EDITOR, description="Staff role")


class UserCreate(APIModel):
    """Fields for a new user. The password is hashed before storage."""

    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., min_length=1, repr=False, description="Raw password")
    role: Role = Field(Role.EDITOR, description="Staff role")
