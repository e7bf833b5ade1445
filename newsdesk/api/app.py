"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Config, ConfigModel
from ..db import Storage, create_storage
from ..exceptions import NewsdeskError
from . import articles, auth, comments, newsletter

logger = logging.getLogger(__name__)


def create_app(
    storage: Optional[Storage] = None,
    config: Optional[ConfigModel] = None,
) -> FastAPI:
    """
    Build the API around a storage instance.

    Args:
        storage: Repositories to serve. A seeded one is built when omitted.
        config: Settings; built-in defaults when omitted.
    """
    if config is None:
        config = ConfigModel()
    if storage is None:
        storage = create_storage(Config.from_model(config))

    app = FastAPI(
        title="Newsdesk",
        description="Article publishing API for the newsdesk site",
        version=__version__,
    )
    app.state.storage = storage
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NewsdeskError)
    async def handle_newsdesk_error(request: Request, exc: NewsdeskError):
        logger.info(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.get("/health")
    async def health_check():
        """Liveness check."""
        return {"status": "healthy"}

    app.include_router(articles.router)
    app.include_router(comments.router)
    app.include_router(newsletter.router)
    app.include_router(auth.router)

    return app
