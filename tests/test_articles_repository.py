import threading

import pytest

from newsdesk.db import ArticleRepository
from newsdesk.exceptions import ConflictError, InvalidError, NotFoundError
from newsdesk.models import RESERVED_SLUGS, ArticleStatus, ArticleUpdate, Category


def _views(repo, article_id, count):
    for _ in range(count):
        repo.increment_view_count(article_id)


def test_create_assigns_identity_and_timestamps(storage, make_article):
    repo = storage.articles
    data = make_article(title="Hello", slug="hello", tags=["a", "b"])

    created = repo.create(data)

    assert created.id == 1
    assert created.view_count == 0
    assert created.created_at == created.updated_at
    assert created.model_dump(include=set(type(data).model_fields)) == data.model_dump()

    fetched = repo.get(created.id)
    assert fetched == created


def test_ids_increase_and_are_never_reused(storage, make_article):
    repo = storage.articles
    ids = [repo.create(make_article()).id for _ in range(3)]
    assert ids == [1, 2, 3]

    assert repo.delete(3) is True
    assert repo.create(make_article()).id == 4


def test_returned_articles_are_detached_copies(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article(title="Original", tags=["x"]))

    created.title = "Changed"
    created.tags.append("y")

    stored = repo.get(created.id)
    assert stored.title == "Original"
    assert stored.tags == ["x"]


def test_create_rejects_duplicate_slug(storage, make_article):
    repo = storage.articles
    repo.create(make_article(slug="same"))
    with pytest.raises(ConflictError):
        repo.create(make_article(slug="same"))
    assert len(repo) == 1


def test_list_returns_published_newest_first(storage, make_article):
    repo = storage.articles
    first = repo.create(make_article())
    repo.create(make_article(status="draft"))
    third = repo.create(make_article())

    result = repo.list()

    assert [a.id for a in result] == [third.id, first.id]
    for newer, older in zip(result, result[1:]):
        assert newer.created_at >= older.created_at


def test_list_applies_limit_and_offset_after_sorting(storage, make_article):
    repo = storage.articles
    for _ in range(5):
        repo.create(make_article())

    assert [a.id for a in repo.list(limit=2)] == [5, 4]
    assert [a.id for a in repo.list(limit=2, offset=2)] == [3, 2]
    assert [a.id for a in repo.list(limit=10, offset=4)] == [1]
    assert repo.list(limit=3, offset=50) == []


def test_list_filters_by_category(storage, make_article):
    repo = storage.articles
    repo.create(make_article(category="football"))
    repo.create(make_article(category="politics"))
    repo.create(make_article(category="football", status="draft"))

    football = repo.list(category="football")
    assert [a.category for a in football] == [Category.FOOTBALL]

    assert len(repo.list(category="all")) == 2
    assert len(repo.list()) == 2
    assert [a.id for a in repo.list(category="football", status="draft")] == [3]


def test_list_rejects_bad_arguments(storage):
    repo = storage.articles
    with pytest.raises(InvalidError):
        repo.list(limit=0)
    with pytest.raises(InvalidError):
        repo.list(offset=-1)
    with pytest.raises(InvalidError):
        repo.list(category="weather")
    with pytest.raises(InvalidError):
        repo.list(status="archived")


def test_list_breaks_timestamp_ties_by_newest_id(clock, make_article):
    instant = clock()
    repo = ArticleRepository(clock=lambda: instant)
    a = repo.create(make_article())
    b = repo.create(make_article())

    assert a.created_at == b.created_at
    assert [x.id for x in repo.list()] == [b.id, a.id]


def test_get_ignores_status(storage, make_article):
    repo = storage.articles
    draft = repo.create(make_article(status="draft"))
    assert repo.get(draft.id).status == ArticleStatus.DRAFT


def test_get_missing_raises(storage):
    with pytest.raises(NotFoundError) as exc:
        storage.articles.get(42)
    assert exc.value.key == 42


def test_get_by_slug(storage, make_article):
    repo = storage.articles
    draft = repo.create(make_article(slug="hidden-story", status="draft"))

    assert repo.get_by_slug("hidden-story").id == draft.id
    with pytest.raises(NotFoundError):
        repo.get_by_slug("no-such-story")


def test_update_merges_supplied_fields(storage, clock, make_article):
    repo = storage.articles
    created = repo.create(make_article(title="Old", tags=["a", "b"], excerpt="keep me"))

    updated = repo.update(created.id, ArticleUpdate(title="New", tags=["c"]))

    assert updated.title == "New"
    assert updated.tags == ["c"]
    assert updated.excerpt == "keep me"
    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert repo.get(created.id) == updated


def test_update_cannot_change_identity_fields(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article())
    changes = ArticleUpdate.model_validate(
        {"id": 99, "createdAt": "2000-01-01T00:00:00Z", "viewCount": 500, "author": "Editor"}
    )

    updated = repo.update(created.id, changes)

    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.view_count == 0
    assert updated.author == "Editor"


def test_update_missing_raises(storage):
    with pytest.raises(NotFoundError):
        storage.articles.update(7, ArticleUpdate(title="Nothing"))


def test_update_slug_conflict(storage, make_article):
    repo = storage.articles
    repo.create(make_article(slug="taken"))
    other = repo.create(make_article(slug="free"))

    with pytest.raises(ConflictError):
        repo.update(other.id, ArticleUpdate(slug="taken"))
    assert repo.update(other.id, ArticleUpdate(slug="free")).slug == "free"


@pytest.mark.parametrize("slug", sorted(RESERVED_SLUGS))
def test_reserved_slugs_are_rejected(storage, make_article, slug):
    repo = storage.articles
    with pytest.raises(ConflictError):
        repo.create(make_article(slug=slug))

    created = repo.create(make_article())
    with pytest.raises(ConflictError):
        repo.update(created.id, ArticleUpdate(slug=slug))
    assert repo.get(created.id).slug == created.slug


def test_update_rejects_clearing_required_field(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article())
    with pytest.raises(InvalidError):
        repo.update(created.id, ArticleUpdate(title=None))
    assert repo.get(created.id).title == created.title


def test_status_transitions_keep_view_count(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article(status="published"))
    _views(repo, created.id, 4)

    unpublished = repo.update(created.id, ArticleUpdate(status="draft"))
    assert unpublished.status == ArticleStatus.DRAFT
    assert unpublished.view_count == 4

    republished = repo.update(created.id, ArticleUpdate(status="published"))
    assert republished.view_count == 4


def test_delete_is_idempotent_signal(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article())

    assert repo.delete(created.id) is True
    with pytest.raises(NotFoundError):
        repo.get(created.id)
    assert repo.delete(created.id) is False
    assert repo.delete(created.id) is False


def test_increment_view_count(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article())

    _views(repo, created.id, 5)

    stored = repo.get(created.id)
    assert stored.view_count == 5
    assert stored.updated_at == created.updated_at
    assert repo.increment_view_count(created.id) == 6


def test_increment_view_count_missing_raises(storage):
    with pytest.raises(NotFoundError):
        storage.articles.increment_view_count(404)


def test_concurrent_increments_do_not_lose_updates(storage, make_article):
    repo = storage.articles
    created = repo.create(make_article())
    workers, per_worker = 8, 250

    def hammer():
        _views(repo, created.id, per_worker)

    threads = [threading.Thread(target=hammer) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert repo.get(created.id).view_count == workers * per_worker


def test_featured_orders_by_views(storage, make_article):
    repo = storage.articles
    a = repo.create(make_article())
    b = repo.create(make_article())
    c = repo.create(make_article())
    _views(repo, a.id, 5)
    _views(repo, b.id, 20)
    _views(repo, c.id, 10)

    featured = repo.featured(limit=2)

    assert [x.id for x in featured] == [b.id, c.id]
    assert [x.view_count for x in featured] == [20, 10]


def test_featured_ties_break_by_ascending_id_and_skip_drafts(storage, make_article):
    repo = storage.articles
    draft = repo.create(make_article(status="draft"))
    first = repo.create(make_article())
    second = repo.create(make_article())
    _views(repo, draft.id, 50)

    assert [x.id for x in repo.featured(limit=5)] == [first.id, second.id]


def test_search_is_case_insensitive_substring(storage, make_article):
    repo = storage.articles
    kenya = repo.create(make_article(title="Kenya wins the cup"))
    repo.create(make_article(title="Unrelated", content="Nothing here."))

    assert [a.id for a in repo.search("kenya")] == [kenya.id]
    assert [a.id for a in repo.search("KEN")] == [kenya.id]


def test_search_covers_excerpt_content_and_tags(storage, make_article):
    repo = storage.articles
    by_excerpt = repo.create(make_article(excerpt="Nairobi traffic update"))
    by_content = repo.create(make_article(content="Heavy rain in nairobi today"))
    by_tag = repo.create(make_article(tags=["Nairobi County"]))
    repo.create(make_article(status="draft", title="Nairobi draft"))

    assert [a.id for a in repo.search("nairobi")] == [by_excerpt.id, by_content.id, by_tag.id]


def test_search_returns_everything_published_for_empty_query(storage, make_article):
    repo = storage.articles
    repo.create(make_article())
    repo.create(make_article(status="draft"))
    assert len(repo.search("")) == 1
