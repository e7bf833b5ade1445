"""Request dependencies."""

from fastapi import Request

from ..config import ConfigModel
from ..db import Storage


def get_storage(request: Request) -> Storage:
    """Storage instance attached to the running app."""
    return request.app.state.storage


def get_config(request: Request) -> ConfigModel:
    """Configuration the app was built with."""
    return request.app.state.config
