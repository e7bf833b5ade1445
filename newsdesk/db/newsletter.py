"""Newsletter subscription storage."""

import logging
from typing import List, Optional

from ..exceptions import InvalidError
from ..models.newsletter import NewsletterSubscription, normalize_email
from .store import Clock, MemoryTable, utc_now

logger = logging.getLogger(__name__)


class NewsletterRepository:
    """Manage newsletter subscribers, one record per address."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize an empty subscriber list."""
        self.clock = clock or utc_now
        self.table: MemoryTable[NewsletterSubscription] = MemoryTable("newsletters")

    @staticmethod
    def _normalize(email: str) -> str:
        try:
            return normalize_email(email)
        except ValueError as e:
            raise InvalidError(str(e))

    def _find(self, email: str) -> Optional[NewsletterSubscription]:
        """Stored record for email. Callers must hold the lock."""
        for subscription in self.table.scan():
            if subscription.email == email:
                return subscription
        return None

    def subscribe(self, email: str) -> NewsletterSubscription:
        """
        Upsert a subscription by email.

        An existing record is reactivated in place; its id and creation
        time are kept and no duplicate is created.
        """
        email = self._normalize(email)

        with self.table.lock:
            existing = self._find(email)
            if existing is not None:
                existing.subscribed = True
                return existing.model_copy(deep=True)

            subscription = NewsletterSubscription(
                id=self.table.next_id(),
                email=email,
                subscribed=True,
                created_at=self.clock(),
            )
            stored = self.table.put(subscription)

        logger.info("New newsletter subscriber %s", stored.id)
        return stored

    def unsubscribe(self, email: str) -> bool:
        """Deactivate a subscription. Returns False for unknown addresses."""
        email = self._normalize(email)

        with self.table.lock:
            existing = self._find(email)
            if existing is None:
                return False
            existing.subscribed = False
            return True

    def subscribers(self) -> List[NewsletterSubscription]:
        """Active subscriptions in signup order."""
        return self.table.select(lambda s: s.subscribed)
