"""Reviewer endpoints reached through the shareable review link."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from transcript_review.dependencies import get_repository
from transcript_review.domain.models import ApproveRequest, DraftUpdate
from transcript_review.exceptions import (
    ConfigurationError,
    TranscriptAlreadyApprovedError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.logging import setup_logging
from transcript_review.repositories import TranscriptRepository
from transcript_review.response_models import ReviewPageResponse
from transcript_review.views import to_review_page

logger = setup_logging()

router = APIRouter(prefix="/review", tags=["review"])

RepositoryDep = Annotated[TranscriptRepository, Depends(get_repository)]


@router.get("/{transcript_id}", response_model=ReviewPageResponse)
def review_page(transcript_id: str, repo: RepositoryDep):
    """Editor state while pending, approval banner data once approved."""
    try:
        return to_review_page(repo.get_by_id(transcript_id))
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())


@router.put("/{transcript_id}/draft", response_model=ReviewPageResponse)
def save_draft(transcript_id: str, update: DraftUpdate, repo: RepositoryDep):
    """Persists the reviewer's edits without changing the status."""
    try:
        return to_review_page(repo.save_draft(transcript_id, update.revised_text))
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except TranscriptAlreadyApprovedError:
        raise HTTPException(status_code=409, detail="Transcript is already approved")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())


@router.post("/{transcript_id}/approve", response_model=ReviewPageResponse)
def approve(transcript_id: str, request: ApproveRequest, repo: RepositoryDep):
    """Saves the final text and approves the transcript. Irreversible."""
    if not request.confirm:
        raise HTTPException(
            status_code=400, detail="Confirmation required to approve transcript"
        )
    try:
        return to_review_page(repo.approve(transcript_id, request.revised_text))
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except TranscriptAlreadyApprovedError:
        raise HTTPException(status_code=409, detail="Transcript is already approved")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())
