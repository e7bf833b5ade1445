"""Newsletter subscription models."""

import re

from pydantic import Field, field_validator

from .base import APIModel, DBModel

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(value: str) -> str:
    """Trim and lower-case an address, rejecting obviously malformed ones."""
    value = value.strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError(f"invalid email address: {value!r}")
    return value


class NewsletterSubscription(DBModel):
    """Newsletter subscription model."""

    email: str = Field(..., description="Subscriber address, lower-cased")
    subscribed: bool = Field(True, description="Whether mail should be sent")


class NewsletterSignup(APIModel):
    """Signup form payload."""

    email: str = Field(..., description="Subscriber address")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize the address so upserts match regardless of case."""
        return normalize_email(v)
