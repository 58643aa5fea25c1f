import enum
from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime
from sqlalchemy.types import Text
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranscriptStatus(str, enum.Enum):
    pending_review = "pending_review"
    approved = "approved"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    TranscriptStatus.pending_review: "Pending Review",
    TranscriptStatus.approved: "Approved",
}


class Transcript(SQLModel, table=True):
    __tablename__ = "talk_transcripts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    speaker_name: str = Field(max_length=255)
    reviewer_email: Optional[str] = Field(default=None, max_length=255)
    talk_title: str = Field(max_length=255)
    talk_date: date = Field(index=True)
    original_text: str = Field(sa_column=Column(Text, nullable=False))
    revised_text: Optional[str] = Field(default=None, sa_column=Column(Text))
    status: TranscriptStatus = Field(default=TranscriptStatus.pending_review)
    approved_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    @property
    def effective_text(self) -> str:
        """The reviewer's version when one exists, otherwise the original."""
        if self.revised_text is not None:
            return self.revised_text
        return self.original_text

    @property
    def is_approved(self) -> bool:
        return self.status == TranscriptStatus.approved
