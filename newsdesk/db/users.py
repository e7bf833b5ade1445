"""User account storage."""

import logging
from typing import Optional

from ..auth.passwords import hash_password
from ..exceptions import ConflictError, NotFoundError
from ..models import User, UserCreate
from .store import Clock, MemoryTable, utc_now

logger = logging.getLogger(__name__)


class UserRepository:
    """Manage staff accounts."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize an empty user repository."""
        self.clock = clock or utc_now
        self.table: MemoryTable[User] = MemoryTable("users")

    def get(self, user_id: int) -> User:
        """Get user by ID."""
        user = self.table.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_by_username(self, username: str) -> User:
        """Get user by exact username."""
        matches = self.table.select(lambda u: u.username == username)
        if not matches:
            raise NotFoundError("User", username, field="username")
        return matches[0]

    def create(self, data: UserCreate) -> User:
        """Create a user, storing only a bcrypt hash of the password."""
        password_hash = hash_password(data.password)

        with self.table.lock:
            if any(u.username == data.username for u in self.table.scan()):
                raise ConflictError(f"Username {data.username!r} is already taken")
            user = User(
                id=self.table.next_id(),
                username=data.username,
                password_hash=password_hash,
                role=data.role,
                created_at=self.clock(),
            )
            stored = self.table.put(user)

        logger.info("Created %s user %s", stored.role.value, stored.username)
        return stored
