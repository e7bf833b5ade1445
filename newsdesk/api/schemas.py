"""Request and response bodies that are not stored entities."""

from typing import List, Optional

from pydantic import Field

from ..content import estimate_read_time, extract_excerpt, slugify
from ..models import ArticleCreate, ArticleStatus, Category, User
from ..models.article import SLUG_PATTERN
from ..models.base import APIModel


class ArticleInput(APIModel):
    """
    Article form as submitted by the editor.

    Slug, excerpt and read time may be left out and are derived from the
    title and content.
    """

    title: str = Field(..., description="Headline")
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: str = ""
    category: Category
    author: str
    featured_image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: ArticleStatus = ArticleStatus.DRAFT
    read_time: Optional[int] = Field(None, ge=1)

    def to_create(self) -> ArticleCreate:
        """Fill in derived fields and validate as a new article."""
        return ArticleCreate(
            title=self.title,
            slug=self.slug or slugify(self.title),
            excerpt=self.excerpt if self.excerpt is not None else extract_excerpt(self.content),
            content=self.content,
            category=self.category,
            author=self.author,
            featured_image=self.featured_image,
            tags=self.tags,
            status=self.status,
            read_time=self.read_time or estimate_read_time(self.content),
        )


class CommentInput(APIModel):
    """Comment form payload."""

    author_name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class LoginRequest(APIModel):
    """Admin login form."""

    username: str
    password: str = Field(..., repr=False)


class LoginResponse(APIModel):
    """Successful login."""

    user: User
    token: str


class MessageResponse(APIModel):
    """Plain acknowledgement."""

    message: str
