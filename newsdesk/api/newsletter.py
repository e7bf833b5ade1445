"""Newsletter endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..db import Storage
from ..exceptions import NotFoundError
from ..models import NewsletterSignup, NewsletterSubscription
from .deps import get_storage
from .schemas import MessageResponse

router = APIRouter(prefix="/api/newsletter", tags=["newsletter"])


@router.post(
    "/subscribe",
    response_model=NewsletterSubscription,
    status_code=status.HTTP_201_CREATED,
)
def subscribe(body: NewsletterSignup, storage: Storage = Depends(get_storage)):
    """Subscribe an address, reactivating it if it was unsubscribed."""
    return storage.newsletters.subscribe(body.email)


@router.post("/unsubscribe", response_model=MessageResponse)
def unsubscribe(body: NewsletterSignup, storage: Storage = Depends(get_storage)):
    """Stop sending the newsletter to an address."""
    if not storage.newsletters.unsubscribe(body.email):
        raise NotFoundError("Subscription", body.email, field="email")
    return MessageResponse(message="Unsubscribed")


@router.get("/subscribers", response_model=List[NewsletterSubscription])
def subscribers(storage: Storage = Depends(get_storage)):
    """Active subscribers in signup order."""
    return storage.newsletters.subscribers()
