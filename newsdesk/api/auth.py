"""Admin login endpoint."""

from fastapi import APIRouter, Depends

from ..auth import login as login_user
from ..db import Storage
from .deps import get_storage
from .schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, storage: Storage = Depends(get_storage)):
    """Check credentials and issue a session token."""
    user, token = login_user(storage.users, body.username, body.password)
    return LoginResponse(user=user, token=token)
