"""Process startup and per-operation container scoping."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from learnpath.config import Settings, configure_logging, get_settings
from learnpath.core import Container, container
from learnpath.database import dispose_engine, get_db, initialize_database

logger = structlog.get_logger(__name__)


def init_app(settings: Settings | None = None) -> None:
    """Configure logging and the database engine once at startup."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(
        "app_initialized",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )


def shutdown_app() -> None:
    dispose_engine()
    logger.info("app_shutdown")


@contextmanager
def container_scope() -> Iterator[Container]:
    """
    Bind the container to a fresh session for the duration of the block.

    Use cases resolved inside the block share that session, each committing
    through its own unit of work.
    """
    sessions = get_db()
    db = next(sessions)
    container.db.override(db)
    try:
        yield container
    finally:
        container.db.reset_override()
        sessions.close()
