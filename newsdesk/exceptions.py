"""Errors raised by the newsdesk repositories and services."""

from typing import Any, Optional


class NewsdeskError(Exception):
    """Base error for all newsdesk failures."""

    status_code = 500

    def __init__(self, detail: str = "") -> None:
        self.detail = detail or self.__class__.__name__
        super().__init__(self.detail)


class NotFoundError(NewsdeskError):
    """An identifier did not resolve to a stored entity."""

    status_code = 404

    def __init__(self, entity: str, key: Any, field: str = "id") -> None:
        self.entity = entity
        self.key = key
        self.field = field
        super().__init__(f"{entity} with {field} {key!r} not found")


class ConflictError(NewsdeskError):
    """A uniqueness rule would be broken."""

    status_code = 409


class InvalidError(NewsdeskError):
    """Arguments are well-typed but out of range."""

    status_code = 400


class AuthenticationError(NewsdeskError):
    """Credentials did not match a known user."""

    status_code = 401

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or "Invalid username or password")
