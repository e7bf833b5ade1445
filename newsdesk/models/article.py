"""Article models for authored news stories."""

from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .base import APIModel, TimestampedModel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Path segments under /api/articles that are routes of their own.
RESERVED_SLUGS = frozenset({"featured", "search"})


class Category(str, Enum):
    """Sections of the site an article can be filed under."""

    POLITICS = "politics"
    EDUCATION = "education"
    ENTERTAINMENT = "entertainment"
    GOSSIP = "gossip"
    FOOTBALL = "football"


class ArticleStatus(str, Enum):
    """Publication state. Only published articles reach the public surface."""

    DRAFT = "draft"
    PUBLISHED = "published"


def _clean_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class Article(TimestampedModel):
    """Article model."""

    title: str = Field(..., min_length=1, description="Headline")
    slug: str = Field(..., pattern=SLUG_PATTERN, description="URL-safe identifier")
    excerpt: str = Field("", description="Short summary shown on cards")
    content: str = Field("", description="Markdown body")
    category: Category = Field(..., description="Site section")
    author: str = Field(..., description="Byline")
    featured_image: Optional[str] = Field(None, description="Hero image URL")
    tags: List[str] = Field(default_factory=list, description="Ordered tag list")
    status: ArticleStatus = Field(ArticleStatus.DRAFT, description="draft or published")
    read_time: int = Field(..., ge=1, description="Estimated read time in minutes")
    view_count: int = Field(0, ge=0, description="Number of public views")

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatus.PUBLISHED

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over the searchable text fields."""
        term = term.lower()
        return (
            term in self.title.lower()
            or term in self.excerpt.lower()
            or term in self.content.lower()
            or any(term in tag.lower() for tag in self.tags)
        )


class ArticleCreate(APIModel):
    """Caller-supplied fields for a new article."""

    title: str = Field(..., description="Headline")
    slug: str = Field(..., pattern=SLUG_PATTERN, description="URL-safe identifier")
    excerpt: str = Field("", description="Short summary shown on cards")
    content: str = Field("", description="Markdown body")
    category: Category = Field(..., description="Site section")
    author: str = Field(..., min_length=1, description="Byline")
    featured_image: Optional[str] = Field(None, description="Hero image URL")
    tags: List[str] = Field(default_factory=list, description="Ordered tag list")
    status: ArticleStatus = Field(ArticleStatus.DRAFT, description="draft or published")
    read_time: int = Field(..., ge=1, description="Estimated read time in minutes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank headlines and trim surrounding whitespace."""
        return _clean_title(v)


class ArticleUpdate(APIModel):
    """Partial update. Only explicitly supplied fields are applied."""

    title: Optional[str] = None
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[Category] = None
    author: Optional[str] = Field(None, min_length=1)
    featured_image: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ArticleStatus] = None
    read_time: Optional[int] = Field(None, ge=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank headlines and trim surrounding whitespace."""
        return _clean_title(v)

    def changes(self) -> dict:
        """Fields the caller actually set, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
