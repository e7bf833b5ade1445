from newsdesk.config import Config, ConfigModel
from newsdesk.db import create_storage
from newsdesk.exceptions import NotFoundError
from newsdesk.models import Role

import pytest


def test_sample_articles_are_seeded(monkeypatch, clock):
    monkeypatch.delenv("NEWSDESK_ADMIN_PASSWORD", raising=False)
    storage = create_storage(Config.from_model(ConfigModel()), clock=clock)

    assert [a.id for a in storage.articles.list()] == [3, 2, 1]
    assert storage.articles.get_by_slug("harambee-stars-qualify-afcon-2024").category == "football"
    assert [a.id for a in storage.articles.search("kenya")] == [1, 2, 3]

    with pytest.raises(NotFoundError):
        storage.users.get_by_username("admin")


def test_admin_is_seeded_from_environment(monkeypatch):
    monkeypatch.setenv("NEWSDESK_ADMIN_PASSWORD", "from-env")
    config = Config.from_model(ConfigModel(seed={"sample_articles": False}))

    storage = create_storage(config)

    admin = storage.users.get_by_username("admin")
    assert admin.role == Role.ADMIN
    assert len(storage.articles) == 0


def test_admin_password_falls_back_to_config(monkeypatch):
    monkeypatch.delenv("NEWSDESK_ADMIN_PASSWORD", raising=False)
    config = Config.from_model(ConfigModel(seed={"admin_password": "from-file"}))
    assert config.get_admin_password() == "from-file"
