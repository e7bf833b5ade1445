"""Staff authentication."""

from .passwords import hash_password, verify_password
from .service import authenticate, login

__all__ = ["authenticate", "hash_password", "login", "verify_password"]
