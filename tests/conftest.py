import os
from contextlib import contextmanager
from datetime import date

import pytest

os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("DD_INSTRUMENTATION_TELEMETRY_ENABLED", "false")

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from transcript_review.dependencies import get_repository
from transcript_review.domain.models import TranscriptCreate
from transcript_review.main import app
from transcript_review.repositories import TranscriptRepository


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    @contextmanager
    def session_factory():
        with Session(engine) as session:
            yield session

    return TranscriptRepository(session_factory)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ada_form():
    return {
        "speaker_name": "Ada",
        "talk_title": "Talk",
        "talk_date": "2024-01-01",
        "original_text": "Hello.",
    }


@pytest.fixture
def ada(repository, ada_form):
    return repository.create(TranscriptCreate.model_validate(ada_form))


@pytest.fixture
def grace(repository):
    return repository.create(
        TranscriptCreate(
            speaker_name="Grace Hopper",
            reviewer_email="grace@example.com",
            talk_title="Nanoseconds",
            talk_date=date(2024, 3, 15),
            original_text="A nanosecond is a foot of wire.",
        )
    )
