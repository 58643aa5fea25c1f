"""Repository for transcript data access."""

from typing import List
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from transcript_review.db_models import Transcript, TranscriptStatus, utcnow
from transcript_review.domain.models import TranscriptCreate
from transcript_review.exceptions import (
    ConfigurationError,
    TranscriptAlreadyApprovedError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.interfaces import TranscriptStore
from transcript_review.logging import setup_logging

logger = setup_logging()


def parse_transcript_id(raw: UUID | str) -> UUID:
    """
    Turns a URL identifier into a UUID.

    Raises:
        TranscriptNotFoundError: If the identifier is not a valid UUID.
    """
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        raise TranscriptNotFoundError(raw)


def _store_error(operation: str, e: Exception) -> TranscriptStoreError:
    """Wraps a driver error, keeping the backend's detail and hint."""
    orig = getattr(e, "orig", None)
    diag = getattr(orig, "diag", None)
    return TranscriptStoreError(
        operation,
        message=str(orig) if orig is not None else str(e),
        details=getattr(diag, "message_detail", None),
        hint=getattr(diag, "message_hint", None),
        cause=e,
    )


class TranscriptRepository(TranscriptStore):
    """
    Handles all database operations for talk transcripts.

    Encapsulates SQL queries and transaction management and enforces the
    review workflow: an approved transcript can no longer be written.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def ping(self) -> None:
        try:
            with self._session_factory() as db_session:
                db_session.connection().execute(text("SELECT 1"))
        except ConfigurationError:
            raise
        except Exception as e:
            logger.exception("Database health check failed")
            raise ConfigurationError(
                "Unable to reach the transcript database. "
                "Check POSTGRES_HOST and POSTGRES_PASSWORD.",
                cause=e,
            ) from e

    def list_all(self) -> List[Transcript]:
        try:
            with self._session_factory() as db_session:
                statement = select(Transcript).order_by(
                    Transcript.talk_date.desc(), Transcript.created_at.desc()
                )
                return list(db_session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception("Failed to list transcripts")
            raise _store_error("read", e) from e

    def get_by_id(self, transcript_id: UUID | str) -> Transcript:
        transcript_id = parse_transcript_id(transcript_id)
        try:
            with self._session_factory() as db_session:
                transcript = db_session.get(Transcript, transcript_id)
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to read transcript",
                extra={"transcript_id": str(transcript_id)},
            )
            raise _store_error("read", e) from e

        if transcript is None:
            raise TranscriptNotFoundError(transcript_id)
        return transcript

    def create(self, data: TranscriptCreate) -> Transcript:
        transcript = Transcript(
            **data.model_dump(), status=TranscriptStatus.pending_review
        )
        try:
            with self._session_factory() as db_session:
                db_session.add(transcript)
                db_session.commit()
                db_session.refresh(transcript)
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to create transcript",
                extra={"talk_title": data.talk_title},
            )
            raise _store_error("create", e) from e

        logger.info(
            "Transcript created",
            extra={
                "transcript_id": str(transcript.id),
                "speaker": transcript.speaker_name,
            },
        )
        return transcript

    def save_draft(self, transcript_id: UUID | str, revised_text: str) -> Transcript:
        transcript_id = parse_transcript_id(transcript_id)
        try:
            with self._session_factory() as db_session:
                transcript = self._get_pending_for_update(db_session, transcript_id)
                transcript.revised_text = revised_text
                transcript.updated_at = utcnow()
                db_session.add(transcript)
                db_session.commit()
                db_session.refresh(transcript)
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to save draft",
                extra={"transcript_id": str(transcript_id)},
            )
            raise _store_error("update", e) from e

        logger.info("Draft saved", extra={"transcript_id": str(transcript_id)})
        return transcript

    def approve(self, transcript_id: UUID | str, revised_text: str) -> Transcript:
        transcript_id = parse_transcript_id(transcript_id)
        try:
            with self._session_factory() as db_session:
                transcript = self._get_pending_for_update(db_session, transcript_id)
                now = utcnow()
                transcript.revised_text = revised_text
                transcript.status = TranscriptStatus.approved
                transcript.approved_at = now
                transcript.updated_at = now
                db_session.add(transcript)
                db_session.commit()
                db_session.refresh(transcript)
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to approve transcript",
                extra={"transcript_id": str(transcript_id)},
            )
            raise _store_error("approve", e) from e

        logger.info("Transcript approved", extra={"transcript_id": str(transcript_id)})
        return transcript

    def delete(self, transcript_id: UUID | str) -> None:
        transcript_id = parse_transcript_id(transcript_id)
        try:
            with self._session_factory() as db_session:
                transcript = db_session.get(Transcript, transcript_id)
                if transcript is None:
                    raise TranscriptNotFoundError(transcript_id)
                db_session.delete(transcript)
                db_session.commit()
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to delete transcript",
                extra={"transcript_id": str(transcript_id)},
            )
            raise _store_error("delete", e) from e

        logger.info("Transcript deleted", extra={"transcript_id": str(transcript_id)})

    def _get_pending_for_update(
        self, db_session: Session, transcript_id: UUID
    ) -> Transcript:
        """Loads and locks a transcript that is still open for review."""
        statement = (
            select(Transcript).where(Transcript.id == transcript_id).with_for_update()
        )
        transcript = db_session.exec(statement).first()
        if transcript is None:
            raise TranscriptNotFoundError(transcript_id)
        if transcript.is_approved:
            raise TranscriptAlreadyApprovedError(transcript_id)
        return transcript
