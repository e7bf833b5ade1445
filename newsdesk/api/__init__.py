"""HTTP API for newsdesk."""

from .app import create_app

__all__ = ["create_app"]
