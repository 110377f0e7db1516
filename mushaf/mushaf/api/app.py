"""
FastAPI application factory.

The corpus is loaded once in the lifespan hook before the app accepts
requests. A CorpusLoadError there propagates and the server never starts.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mushaf import __version__
from mushaf.api.errors import register_error_handlers
from mushaf.api.routes import router
from mushaf.config import MushafSettings, get_settings
from mushaf.core import CorpusStore, QueryResolver
from mushaf.data import load_corpus

logger = logging.getLogger(__name__)


def create_app(
    store: CorpusStore | None = None,
    settings: MushafSettings | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Preloaded corpus. If omitted, the corpus is loaded from
            settings.corpus_path at startup.
        settings: Settings to use instead of the default instance

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "resolver", None) is None:
            logger.info("Loading corpus from %s", settings.corpus_path)
            app.state.resolver = QueryResolver(load_corpus(settings.corpus_path))
        logger.info("Mushaf API ready")
        yield
        logger.info("Mushaf API shutting down")

    app = FastAPI(
        title="Mushaf API",
        description="A public Quran API with Arabic text and metadata",
        version=__version__,
        lifespan=lifespan,
    )
    if store is not None:
        app.state.resolver = QueryResolver(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)
    register_error_handlers(app)
    return app
