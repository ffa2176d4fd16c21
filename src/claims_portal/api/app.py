"""FastAPI application factory for the development claims backend.

``create_app`` builds a ``FastAPI`` instance with:

* CORS middleware (the Streamlit origin)
* Request-logging / exception-handling middleware
* The ``/api/claims`` routes
* A lifespan that seeds the in-memory store from the sample data file
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from claims_portal.api.middleware import ExceptionHandlerMiddleware, RequestLoggingMiddleware
from claims_portal.api.routes.claims import router as claims_router
from claims_portal.api.store import ClaimStore
from claims_portal.logging.setup import setup_logging

if TYPE_CHECKING:
    from omegaconf import DictConfig


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    cfg: DictConfig = app.state.cfg

    if getattr(app.state, "store", None) is None:
        app.state.store = ClaimStore.from_json(cfg.data.sample_claims)

    logger.info("Dev backend ready with {n} claims", n=len(app.state.store))
    yield
    logger.info("Dev backend shutting down")


def create_app(cfg: DictConfig, store: ClaimStore | None = None) -> FastAPI:
    """Build and return the development backend.

    Parameters
    ----------
    cfg:
        The merged Hydra configuration.
    store:
        Pre-built store; when omitted the lifespan loads
        ``cfg.data.sample_claims``.
    """
    setup_logging(cfg.logging, component="backend")

    app = FastAPI(
        title="Expense Claims (dev backend)",
        description="In-memory stand-in for the expense claims REST API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.cfg = cfg
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Outermost = first to run
    app.add_middleware(ExceptionHandlerMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(claims_router, prefix="/api")

    return app
