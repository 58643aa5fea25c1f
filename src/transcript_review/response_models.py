"""Response models for the transcript review API."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from transcript_review.db_models import TranscriptStatus


class TranscriptRow(BaseModel):
    """One dashboard table row."""

    id: UUID
    speaker_name: str
    reviewer_email: Optional[str]
    talk_title: str
    talk_date: date
    status: TranscriptStatus
    status_label: str
    review_link: str
    invite_available: bool


class DashboardResponse(BaseModel):
    """Everything the dashboard renders, including the configuration banner."""

    transcripts: List[TranscriptRow]
    config_error: Optional[str] = None


class TranscriptView(BaseModel):
    """Read-only view of a single transcript."""

    id: UUID
    speaker_name: str
    reviewer_email: Optional[str]
    talk_title: str
    talk_date: date
    status: TranscriptStatus
    status_label: str
    approved_at: Optional[datetime]
    text: str
    review_link: str


class ReviewPageResponse(BaseModel):
    """
    Review page state.

    While pending, `editable` is true and `content` seeds the editor.
    Once approved, `editable` is false and `approved_at` drives the banner.
    """

    id: UUID
    speaker_name: str
    talk_title: str
    talk_date: date
    status: TranscriptStatus
    status_label: str
    editable: bool
    content: str
    original_text: str
    approved_at: Optional[datetime]
    updated_at: datetime


class LinkResponse(BaseModel):
    review_link: str


class InviteResponse(BaseModel):
    to: str
    subject: str
    body: str
    mailto: str


class DeleteResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    status: str
    detail: Optional[str] = None
