from .models import ApproveRequest, DraftUpdate, TranscriptCreate
from .sharing import (
    ClipboardUnavailableError,
    Invite,
    build_review_link,
    compose_invite,
    copy_text,
)

__all__ = [
    "ApproveRequest",
    "DraftUpdate",
    "TranscriptCreate",
    "ClipboardUnavailableError",
    "Invite",
    "build_review_link",
    "compose_invite",
    "copy_text",
]
