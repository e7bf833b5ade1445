"""In-memory storage for newsdesk."""

from .articles import ArticleRepository
from .comments import CommentRepository
from .init import create_storage, seed_storage
from .newsletter import NewsletterRepository
from .storage import Storage
from .users import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "NewsletterRepository",
    "Storage",
    "UserRepository",
    "create_storage",
    "seed_storage",
]
