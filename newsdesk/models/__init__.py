"""Data models for the newsdesk content platform."""

from .article import (
    RESERVED_SLUGS,
    Article,
    ArticleCreate,
    ArticleStatus,
    ArticleUpdate,
    Category,
)
from .comment import Comment, CommentCreate
from .newsletter import NewsletterSignup, NewsletterSubscription
from .user import Role, User, UserCreate

__all__ = [
    "Article",
    "ArticleCreate",
    "ArticleStatus",
    "ArticleUpdate",
    "Category",
    "Comment",
    "CommentCreate",
    "NewsletterSignup",
    "NewsletterSubscription",
    "RESERVED_SLUGS",
    "Role",
    "User",
    "UserCreate",
]
