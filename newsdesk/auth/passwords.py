"""bcrypt password hashing."""

import bcrypt


def hash_password(raw_password: str) -> str:
    """Hash a raw password using bcrypt and return the utf-8 string."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(raw_password.encode(), salt)
    return hashed.decode()


def verify_password(password_hash: str, raw_password: str) -> bool:
    """Verify a raw password against a stored bcrypt hash."""
    if not password_hash:
        return False
    return bcrypt.checkpw(raw_password.encode(), password_hash.encode("utf-8"))
