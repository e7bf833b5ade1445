"""Comment storage and moderation."""

import logging
from typing import List, Optional

from ..exceptions import NotFoundError
from ..models import Comment, CommentCreate
from .store import Clock, MemoryTable, utc_now

logger = logging.getLogger(__name__)


class CommentRepository:
    """Manage reader comments."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize an empty comment repository."""
        self.clock = clock or utc_now
        self.table: MemoryTable[Comment] = MemoryTable("comments")

    def create(self, data: CommentCreate) -> Comment:
        """Store a comment awaiting moderation."""
        with self.table.lock:
            comment = Comment(
                **data.model_dump(),
                id=self.table.next_id(),
                approved=False,
                created_at=self.clock(),
            )
            stored = self.table.put(comment)

        logger.debug("Comment %s queued for article %s", stored.id, stored.article_id)
        return stored

    def list_for_article(self, article_id: int) -> List[Comment]:
        """Approved comments on an article, oldest first."""
        comments = self.table.select(
            lambda c: c.article_id == article_id and c.approved
        )
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    def approve(self, comment_id: int) -> Comment:
        """Mark a comment as approved so it becomes visible."""
        with self.table.lock:
            comment = self.table.peek(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            comment.approved = True
            return comment.model_copy(deep=True)
