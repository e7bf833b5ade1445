"""Comment endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..db import Storage
from ..models import Comment, CommentCreate
from .deps import get_storage
from .schemas import CommentInput

router = APIRouter(tags=["comments"])


@router.get("/api/articles/{article_id}/comments", response_model=List[Comment])
def list_comments(article_id: int, storage: Storage = Depends(get_storage)):
    """Approved comments on an article, oldest first."""
    return storage.comments.list_for_article(article_id)


@router.post(
    "/api/articles/{article_id}/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    article_id: int,
    body: CommentInput,
    storage: Storage = Depends(get_storage),
):
    """Leave a comment; it stays hidden until approved."""
    # 404 for comments on articles that do not exist
    storage.articles.get(article_id)
    return storage.comments.create(
        CommentCreate(article_id=article_id, author_name=body.author_name, content=body.content)
    )


@router.post("/api/comments/{comment_id}/approve", response_model=Comment)
def approve_comment(comment_id: int, storage: Storage = Depends(get_storage)):
    """Publish a pending comment."""
    return storage.comments.approve(comment_id)
