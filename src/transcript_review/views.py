"""Builds the response models the two screens render from a transcript."""

from transcript_review.db_models import Transcript
from transcript_review.domain.sharing import build_review_link
from transcript_review.response_models import (
    ReviewPageResponse,
    TranscriptRow,
    TranscriptView,
)


def to_row(transcript: Transcript, origin: str) -> TranscriptRow:
    return TranscriptRow(
        id=transcript.id,
        speaker_name=transcript.speaker_name,
        reviewer_email=transcript.reviewer_email,
        talk_title=transcript.talk_title,
        talk_date=transcript.talk_date,
        status=transcript.status,
        status_label=transcript.status.label,
        review_link=build_review_link(origin, transcript.id),
        invite_available=bool(transcript.reviewer_email),
    )


def to_view(transcript: Transcript, origin: str) -> TranscriptView:
    return TranscriptView(
        id=transcript.id,
        speaker_name=transcript.speaker_name,
        reviewer_email=transcript.reviewer_email,
        talk_title=transcript.talk_title,
        talk_date=transcript.talk_date,
        status=transcript.status,
        status_label=transcript.status.label,
        approved_at=transcript.approved_at if transcript.is_approved else None,
        text=transcript.effective_text,
        review_link=build_review_link(origin, transcript.id),
    )


def to_review_page(transcript: Transcript) -> ReviewPageResponse:
    return ReviewPageResponse(
        id=transcript.id,
        speaker_name=transcript.speaker_name,
        talk_title=transcript.talk_title,
        talk_date=transcript.talk_date,
        status=transcript.status,
        status_label=transcript.status.label,
        editable=not transcript.is_approved,
        content=transcript.effective_text,
        original_text=transcript.original_text,
        approved_at=transcript.approved_at,
        updated_at=transcript.updated_at,
    )
