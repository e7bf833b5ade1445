"""Article endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import ValidationError

from ..config import ConfigModel
from ..db import Storage
from ..exceptions import InvalidError, NotFoundError
from ..models import Article, ArticleStatus, ArticleUpdate
from .deps import get_config, get_storage
from .schemas import ArticleInput

router = APIRouter(tags=["articles"])


@router.get("/api/articles", response_model=List[Article])
def list_articles(
    category: Optional[str] = Query(None, description="Category, or 'all'"),
    status_filter: ArticleStatus = Query(ArticleStatus.PUBLISHED, alias="status"),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    storage: Storage = Depends(get_storage),
    config: ConfigModel = Depends(get_config),
):
    """List articles newest first, capped at the configured page size."""
    limit = min(limit or config.api.default_limit, config.api.max_limit)
    return storage.articles.list(
        limit=limit, offset=offset, category=category, status=status_filter
    )


@router.get("/api/articles/featured", response_model=List[Article])
def featured_articles(
    limit: Optional[int] = Query(None, ge=1),
    storage: Storage = Depends(get_storage),
    config: ConfigModel = Depends(get_config),
):
    """Most viewed published articles."""
    limit = min(limit or config.api.featured_limit, config.api.max_limit)
    return storage.articles.featured(limit)


@router.get("/api/articles/search", response_model=List[Article])
def search_articles(
    q: str = Query("", description="Search text"),
    storage: Storage = Depends(get_storage),
    config: ConfigModel = Depends(get_config),
):
    """Search published articles by title, excerpt, content and tags."""
    query = q.strip()
    if len(query) < config.api.search_min_length:
        raise InvalidError(
            f"Search query must be at least {config.api.search_min_length} characters"
        )
    return storage.articles.search(query)


@router.get("/api/articles/{slug}", response_model=Article)
def read_article(slug: str, storage: Storage = Depends(get_storage)):
    """Public article page. Drafts are hidden and every hit counts as a view."""
    article = storage.articles.get_by_slug(slug)
    if not article.is_published:
        raise NotFoundError("Article", slug, field="slug")
    article.view_count = storage.articles.increment_view_count(article.id)
    return article


@router.get("/api/admin/articles/{article_id}", response_model=Article)
def admin_get_article(article_id: int, storage: Storage = Depends(get_storage)):
    """Article by id, drafts included."""
    return storage.articles.get(article_id)


@router.post("/api/articles", response_model=Article, status_code=status.HTTP_201_CREATED)
def create_article(body: ArticleInput, storage: Storage = Depends(get_storage)):
    """Create an article, deriving slug, excerpt and read time when missing."""
    try:
        data = body.to_create()
    except ValidationError as e:
        raise InvalidError(f"Invalid article: {e}")
    return storage.articles.create(data)


@router.patch("/api/articles/{article_id}", response_model=Article)
@router.put("/api/articles/{article_id}", response_model=Article)
def update_article(
    article_id: int,
    body: ArticleUpdate,
    storage: Storage = Depends(get_storage),
):
    """Apply the supplied fields to an article."""
    return storage.articles.update(article_id, body)


@router.delete("/api/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_article(article_id: int, storage: Storage = Depends(get_storage)):
    """Delete an article."""
    if not storage.articles.delete(article_id):
        raise NotFoundError("Article", article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
