"""Database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from transcript_review.dependencies import get_repository
from transcript_review.exceptions import ConfigurationError
from transcript_review.repositories import TranscriptRepository
from transcript_review.response_models import HealthResponse

router = APIRouter(tags=["health"])

RepositoryDep = Annotated[TranscriptRepository, Depends(get_repository)]


@router.get("/health", response_model=HealthResponse)
def health(repo: RepositoryDep):
    try:
        repo.ping()
    except ConfigurationError as e:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unavailable", detail=str(e)).model_dump(),
        )
    return HealthResponse(status="ok")
