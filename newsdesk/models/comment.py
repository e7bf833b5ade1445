"""Reader comment models."""

from pydantic import Field

from .base import APIModel, DBModel


class Comment(DBModel):
    """Comment attached to an article. Hidden until approved."""

    article_id: int = Field(..., description="Article the comment belongs to")
    author_name: str = Field(..., min_length=1, description="Display name of the commenter")
    content: str = Field(..., min_length=1, description="Comment body")
    approved: bool = Field(False, description="Whether a moderator approved it")


class CommentCreate(APIModel):
    """Fields for a new comment."""

    article_id: int = Field(..., description="Article the comment belongs to")
    author_name: str = Field(..., min_length=1, description="Display name of the commenter")
    content: str = Field(..., min_length=1, description="Comment body")
