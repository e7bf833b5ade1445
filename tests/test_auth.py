import pytest

from newsdesk.auth import authenticate, hash_password, login, verify_password
from newsdesk.exceptions import AuthenticationError
from newsdesk.models import UserCreate


def test_hash_and_verify():
    hashed = hash_password("hunter2")
    assert hashed != "hunter2"
    assert hashed != hash_password("hunter2")
    assert verify_password(hashed, "hunter2")
    assert not verify_password(hashed, "hunter3")
    assert not verify_password("", "hunter2")


def test_authenticate(storage):
    storage.users.create(UserCreate(username="admin", password="right", role="admin"))

    assert authenticate(storage.users, "admin", "right").username == "admin"
    with pytest.raises(AuthenticationError):
        authenticate(storage.users, "admin", "wrong")
    with pytest.raises(AuthenticationError):
        authenticate(storage.users, "nobody", "right")


def test_login_issues_distinct_tokens(storage):
    storage.users.create(UserCreate(username="admin", password="right"))
    _, first = login(storage.users, "admin", "right")
    _, second = login(storage.users, "admin", "right")
    assert first and second and first != second
