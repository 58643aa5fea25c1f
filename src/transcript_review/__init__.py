from transcript_review.config import AppConfig, DatabaseConfig, ScreenConfig
from transcript_review.db_models import Transcript, TranscriptStatus
from transcript_review.exceptions import (
    ConfigurationError,
    FormValidationError,
    TranscriptAlreadyApprovedError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "DatabaseConfig",
    "ScreenConfig",
    "Transcript",
    "TranscriptStatus",
    "ConfigurationError",
    "FormValidationError",
    "TranscriptAlreadyApprovedError",
    "TranscriptNotFoundError",
    "TranscriptStoreError",
]
