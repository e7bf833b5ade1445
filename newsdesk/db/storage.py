"""Aggregate of the repositories that make up one newsdesk instance."""

from typing import Optional

from .articles import ArticleRepository
from .comments import CommentRepository
from .newsletter import NewsletterRepository
from .store import Clock, utc_now
from .users import UserRepository


class Storage:
    """
    One independent set of in-memory repositories.

    Construct one per process (or per test) and pass it to whatever needs
    it. Nothing is shared between instances and nothing outlives them.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize empty repositories sharing one clock."""
        self.clock = clock or utc_now
        self.articles = ArticleRepository(self.clock)
        self.users = UserRepository(self.clock)
        self.comments = CommentRepository(self.clock)
        self.newsletters = NewsletterRepository(self.clock)
