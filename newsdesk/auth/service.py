"""Credential checks for the admin login."""

import secrets
from typing import TYPE_CHECKING, Tuple

from ..exceptions import AuthenticationError, NotFoundError
from ..models import User
from .passwords import verify_password

if TYPE_CHECKING:
    from ..db.users import UserRepository


def authenticate(users: "UserRepository", username: str, password: str) -> User:
    """
    Return the user whose credentials match.

    Unknown usernames and wrong passwords raise the same AuthenticationError
    so the response does not reveal which accounts exist.
    """
    try:
        user = users.get_by_username(username)
    except NotFoundError:
        raise AuthenticationError()

    if not verify_password(user.password_hash, password):
        raise AuthenticationError()
    return user


def login(users: "UserRepository", username: str, password: str) -> Tuple[User, str]:
    """Authenticate and issue an opaque session token."""
    user = authenticate(users, username, password)
    return user, secrets.token_urlsafe(32)
