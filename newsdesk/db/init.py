"""Storage construction and seeding."""

import logging
from typing import Optional

from ..config import Config
from ..models import Role, UserCreate
from .seed import create_sample_articles
from .storage import Storage
from .store import Clock

logger = logging.getLogger(__name__)


def seed_storage(storage: Storage, config: Config) -> None:
    """Load sample articles and the admin account according to config."""
    seed = config.config.seed

    if seed.sample_articles:
        for article in create_sample_articles():
            storage.articles.create(article)
        logger.info("Seeded %d sample articles", len(storage.articles))

    password = config.get_admin_password()
    if password:
        storage.users.create(
            UserCreate(username=seed.admin_username, password=password, role=Role.ADMIN)
        )
    else:
        logger.warning(
            "No admin password configured (set %s); admin login is disabled",
            seed.admin_password_env or "seed.admin_password",
        )


def create_storage(config: Optional[Config] = None, clock: Optional[Clock] = None) -> Storage:
    """Build a fresh storage and seed it."""
    if config is None:
        config = Config()
        config.load_or_default()
    storage = Storage(clock)
    seed_storage(storage, config)
    return storage
