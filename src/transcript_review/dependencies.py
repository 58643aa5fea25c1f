"""
Dependency injection configuration.

The FastAPI routes depend on `get_repository`. A front end that drives the
screen models directly builds them with `get_dashboard_screen` and
`get_review_screen`, which apply the configured timers.
"""

from contextlib import contextmanager
from functools import lru_cache
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from transcript_review.config import AppConfig, load_config
from transcript_review.exceptions import ConfigurationError
from transcript_review.logging import setup_logging
from transcript_review.repositories import TranscriptRepository
from transcript_review.screens import DashboardScreen, ReviewScreen

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache
def get_engine():
    """
    Creates the database engine and the transcript table.

    Raises:
        ConfigurationError: If settings are missing or the database is unreachable.
    """
    config = get_config()
    missing = config.database.missing_settings()
    if missing:
        raise ConfigurationError(
            f"Missing database configuration: {', '.join(missing)}"
        )

    engine = create_engine(config.database.url)
    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed")
        raise ConfigurationError(
            "Unable to reach the transcript database. "
            "Check POSTGRES_HOST and POSTGRES_PASSWORD.",
            cause=e,
        ) from e
    logger.info("Database initialized", extra={"host": config.database.host})
    return engine


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(get_engine()) as session:
        yield session


def get_repository() -> TranscriptRepository:
    """Returns the repository over the configured database."""
    return TranscriptRepository(_session_factory)


def get_dashboard_screen(origin: str, alert: Callable[[str], None]) -> DashboardScreen:
    """Returns a dashboard screen bound to the configured repository."""
    return DashboardScreen(
        get_repository(),
        origin,
        alert,
        feedback_seconds=get_config().screens.feedback_seconds,
    )


def get_review_screen(transcript_id: str) -> ReviewScreen:
    """Returns a review screen bound to the configured repository."""
    return ReviewScreen(
        get_repository(),
        transcript_id,
        autosave_seconds=get_config().screens.autosave_seconds,
    )
