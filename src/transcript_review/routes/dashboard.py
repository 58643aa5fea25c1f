"""Admin dashboard endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from transcript_review.dependencies import get_repository
from transcript_review.domain.models import TranscriptCreate
from transcript_review.domain.sharing import build_review_link, compose_invite
from transcript_review.exceptions import (
    ConfigurationError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.logging import setup_logging
from transcript_review.repositories import TranscriptRepository
from transcript_review.response_models import (
    DashboardResponse,
    DeleteResponse,
    InviteResponse,
    LinkResponse,
    TranscriptView,
)
from transcript_review.views import to_row, to_view

logger = setup_logging()

router = APIRouter(tags=["dashboard"])

RepositoryDep = Annotated[TranscriptRepository, Depends(get_repository)]


def request_origin(request: Request) -> str:
    return str(request.base_url).rstrip("/")


@router.get("/", response_model=DashboardResponse)
def dashboard(request: Request, repo: RepositoryDep):
    """Lists all transcripts, newest talk first, or the configuration banner."""
    try:
        repo.ping()
        transcripts = repo.list_all()
    except ConfigurationError as e:
        logger.warning("Dashboard configuration error", extra={"error": str(e)})
        return DashboardResponse(transcripts=[], config_error=str(e))
    except TranscriptStoreError as e:
        logger.warning("Dashboard load failed", extra=e.to_detail())
        return DashboardResponse(transcripts=[], config_error=str(e))

    origin = request_origin(request)
    return DashboardResponse(transcripts=[to_row(t, origin) for t in transcripts])


@router.post("/transcripts", response_model=TranscriptView, status_code=201)
def create_transcript(data: TranscriptCreate, request: Request, repo: RepositoryDep):
    """Creates a transcript in the pending_review state."""
    try:
        transcript = repo.create(data)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())
    return to_view(transcript, request_origin(request))


@router.get("/transcripts/{transcript_id}", response_model=TranscriptView)
def view_transcript(transcript_id: str, request: Request, repo: RepositoryDep):
    """Read-only view with the effective text."""
    try:
        transcript = repo.get_by_id(transcript_id)
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())
    return to_view(transcript, request_origin(request))


@router.delete("/transcripts/{transcript_id}", response_model=DeleteResponse)
def delete_transcript(transcript_id: str, repo: RepositoryDep, confirm: bool = False):
    """Hard-deletes a transcript. The caller must pass `confirm=true`."""
    if not confirm:
        raise HTTPException(
            status_code=400, detail="Confirmation required to delete transcript"
        )
    try:
        repo.delete(transcript_id)
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())
    return DeleteResponse(detail="Transcript deleted")


@router.get("/transcripts/{transcript_id}/link", response_model=LinkResponse)
def review_link(transcript_id: str, request: Request, repo: RepositoryDep):
    try:
        transcript = repo.get_by_id(transcript_id)
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())
    return LinkResponse(
        review_link=build_review_link(request_origin(request), transcript.id)
    )


@router.get("/transcripts/{transcript_id}/invite", response_model=InviteResponse)
def invite(transcript_id: str, request: Request, repo: RepositoryDep):
    """Composes the reviewer invitation email."""
    try:
        transcript = repo.get_by_id(transcript_id)
    except TranscriptNotFoundError:
        raise HTTPException(status_code=404, detail="Transcript not found")
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TranscriptStoreError as e:
        raise HTTPException(status_code=500, detail=e.to_detail())

    link = build_review_link(request_origin(request), transcript.id)
    composed = compose_invite(transcript, link)
    if composed is None:
        raise HTTPException(
            status_code=400, detail="No reviewer email is set for this transcript"
        )
    return InviteResponse(
        to=composed.to,
        subject=composed.subject,
        body=composed.body,
        mailto=composed.mailto,
    )
