"""newsdesk - content management and publishing backend for a news site."""

__version__ = "0.1.0"
