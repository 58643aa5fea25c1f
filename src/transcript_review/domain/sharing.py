"""Review links, invite emails and clipboard copying."""

from typing import Callable, Optional
from urllib.parse import quote
from uuid import UUID

from pydantic import BaseModel

from transcript_review.db_models import Transcript

INVITE_MESSAGE = (
    "Thank you for speaking! We have prepared a transcript of your talk "
    "and would love for you to review it before we publish it.\n\n"
    "Please open the link below, correct anything that was misheard, and "
    'click "Approve Transcript" when you are happy with it. Your edits are '
    "saved automatically while you work."
)


class Invite(BaseModel):
    to: str
    subject: str
    body: str

    @property
    def mailto(self) -> str:
        return (
            f"mailto:{quote(self.to, safe='@')}"
            f"?subject={quote(self.subject, safe='')}"
            f"&body={quote(self.body, safe='')}"
        )


class ClipboardUnavailableError(Exception):
    """Raised by a clipboard callable that cannot be used in this environment."""


def build_review_link(origin: str, transcript_id: UUID | str) -> str:
    """Joins the site origin with the review path for a transcript."""
    return f"{origin.rstrip('/')}/review/{transcript_id}"


def first_name(speaker_name: str) -> str:
    parts = speaker_name.split()
    return parts[0] if parts else speaker_name


def compose_invite(transcript: Transcript, review_link: str) -> Optional[Invite]:
    """
    Builds the pre-filled invitation email for a transcript.

    Returns None when the transcript has no reviewer email, in which case
    there is nobody to invite.
    """
    if not transcript.reviewer_email:
        return None

    body = (
        f"Hi {first_name(transcript.speaker_name)},\n\n"
        f"{INVITE_MESSAGE}\n\n"
        f"{review_link}\n\n"
        "Thanks!"
    )
    return Invite(
        to=transcript.reviewer_email,
        subject=f"Please review your talk transcript: {transcript.talk_title}",
        body=body,
    )


def copy_text(
    text: str,
    clipboard: Optional[Callable[[str], None]],
    fallback: Callable[[str], None],
) -> None:
    """
    Copies text with the primary clipboard, or the legacy fallback.

    The fallback is used when no primary clipboard is available or the
    primary raises ClipboardUnavailableError.
    """
    if clipboard is not None:
        try:
            clipboard(text)
            return
        except ClipboardUnavailableError:
            pass
    fallback(text)
