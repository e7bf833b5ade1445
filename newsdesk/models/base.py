"""Base model class for all stored entities."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base model exposing camelCase aliases at the JSON boundary."""

    class Config:
        """Pydantic config."""

        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class DBModel(APIModel):
    """Base model for all stored entities."""

    id: int = Field(..., description="Primary key, assigned by the repository")
    created_at: datetime = Field(..., description="Creation timestamp")


class TimestampedModel(DBModel):
    """Stored entity that tracks its last mutation."""

    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
