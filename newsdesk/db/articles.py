"""Article storage and queries."""

import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from ..exceptions import ConflictError, InvalidError, NotFoundError
from ..models import (
    RESERVED_SLUGS,
    Article,
    ArticleCreate,
    ArticleStatus,
    ArticleUpdate,
    Category,
)
from .store import Clock, MemoryTable, utc_now

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class ArticleRepository:
    """Own the canonical set of articles and answer queries over it."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize an empty article repository."""
        self.clock = clock or utc_now
        self.table: MemoryTable[Article] = MemoryTable("articles")

    def __len__(self) -> int:
        """Number of stored articles, drafts included."""
        return len(self.table)

    def _slug_owner(self, slug: str) -> Optional[int]:
        """Id of the article using slug. Callers must hold the lock."""
        for article in self.table.scan():
            if article.slug == slug:
                return article.id
        return None

    def _check_slug(self, slug: str, article_id: Optional[int] = None) -> None:
        """Reject reserved slugs and slugs owned by another article. Callers must hold the lock."""
        if slug in RESERVED_SLUGS:
            raise ConflictError(f"Slug {slug!r} is reserved")
        owner = self._slug_owner(slug)
        if owner is not None and owner != article_id:
            raise ConflictError(f"Slug {slug!r} is already in use")

    def list(
        self,
        limit: int = 20,
        offset: int = 0,
        category: Optional[Union[Category, str]] = None,
        status: Union[ArticleStatus, str] = ArticleStatus.PUBLISHED,
    ) -> List[Article]:
        """
        List articles newest first.

        Filters by exact status, and by category unless it is None or "all".
        Pagination is applied after sorting; an offset past the end yields [].
        """
        if limit < 1:
            raise InvalidError(f"limit must be a positive integer, got {limit}")
        if offset < 0:
            raise InvalidError(f"offset must not be negative, got {offset}")

        try:
            wanted_status = ArticleStatus(status)
            wanted_category = None
            if category is not None and category != ALL_CATEGORIES:
                wanted_category = Category(category)
        except ValueError as e:
            raise InvalidError(str(e))

        articles = self.table.select(
            lambda a: a.status == wanted_status
            and (wanted_category is None or a.category == wanted_category)
        )
        articles.sort(key=lambda a: (a.created_at, a.id), reverse=True)
        return articles[offset:offset + limit]

    def get(self, article_id: int) -> Article:
        """Get article by ID regardless of status."""
        article = self.table.get(article_id)
        if article is None:
            raise NotFoundError("Article", article_id)
        return article

    def get_by_slug(self, slug: str) -> Article:
        """Get article by slug regardless of status."""
        with self.table.lock:
            article_id = self._slug_owner(slug)
            if article_id is None:
                raise NotFoundError("Article", slug, field="slug")
            return self.table.get(article_id)

    def create(self, data: ArticleCreate) -> Article:
        """
        Store a new article.

        Returns:
            The stored article with its id, zero views and creation timestamps
        """
        with self.table.lock:
            self._check_slug(data.slug)

            now = self.clock()
            article = Article(
                **data.model_dump(),
                id=self.table.next_id(),
                view_count=0,
                created_at=now,
                updated_at=now,
            )
            stored = self.table.put(article)

        logger.debug("Created article %s (%s)", stored.id, stored.slug)
        return stored

    def update(self, article_id: int, changes: ArticleUpdate) -> Article:
        """
        Merge the explicitly supplied fields over an existing article.

        Lists such as tags are replaced wholesale. The id, creation time
        and view count are never touched.
        """
        fields = changes.changes()

        with self.table.lock:
            current = self.table.peek(article_id)
            if current is None:
                raise NotFoundError("Article", article_id)

            if fields.get("slug") is not None:
                self._check_slug(fields["slug"], article_id)

            merged = current.model_dump()
            merged.update(fields)
            merged["updated_at"] = self.clock()
            try:
                updated = Article.model_validate(merged)
            except ValidationError as e:
                raise InvalidError(f"Invalid article update: {e}")

            stored = self.table.put(updated)

        logger.debug("Updated article %s fields=%s", article_id, sorted(fields))
        return stored

    def delete(self, article_id: int) -> bool:
        """Hard-delete an article. Returns False when there was nothing to delete."""
        removed = self.table.remove(article_id)
        if removed:
            logger.debug("Deleted article %s", article_id)
        return removed

    def increment_view_count(self, article_id: int) -> int:
        """
        Add one view to an article.

        Returns:
            The new view count
        """
        with self.table.lock:
            article = self.table.peek(article_id)
            if article is None:
                raise NotFoundError("Article", article_id)
            article.view_count += 1
            return article.view_count

    def featured(self, limit: int = 3) -> List[Article]:
        """Most viewed published articles, ties broken by ascending id."""
        if limit < 1:
            raise InvalidError(f"limit must be a positive integer, got {limit}")
        articles = self.table.select(lambda a: a.is_published)
        articles.sort(key=lambda a: (-a.view_count, a.id))
        return articles[:limit]

    def search(self, query: str) -> List[Article]:
        """
        Published articles whose title, excerpt, content or any tag contains query.

        Matching is a case-insensitive substring test. Results keep ascending
        id order and are not paginated.
        """
        return self.table.select(lambda a: a.is_published and a.matches(query))
