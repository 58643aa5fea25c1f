"""Admin dashboard screen state."""

import time
from typing import Callable, List, Optional
from uuid import UUID

from pydantic import ValidationError

from transcript_review.db_models import Transcript
from transcript_review.domain.models import TranscriptCreate
from transcript_review.domain.sharing import (
    build_review_link,
    compose_invite,
    copy_text,
)
from transcript_review.exceptions import (
    ConfigurationError,
    FormValidationError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.interfaces import TranscriptStore
from transcript_review.logging import setup_logging
from transcript_review.response_models import TranscriptView
from transcript_review.screens.feedback import TransientFlags
from transcript_review.views import to_view

logger = setup_logging()

Clipboard = Callable[[str], None]
Alert = Callable[[str], None]
Confirm = Callable[[str], bool]

DELETE_PROMPT = "Delete the transcript for \"{title}\"? This cannot be undone."
NO_EMAIL_ALERT = "No reviewer email is set for this transcript."


def describe_store_error(error: TranscriptStoreError) -> str:
    """Formats a backend failure the way the admin sees it in an alert."""
    lines = [f"Error: {error.message}"]
    if error.details:
        lines.append(f"Details: {error.details}")
    if error.hint:
        lines.append(f"Hint: {error.hint}")
    return "\n".join(lines)


def validate_form(form: dict) -> TranscriptCreate:
    """
    Checks the create form before anything is sent to the store.

    Raises:
        FormValidationError: Listing every blank or invalid field.
    """
    try:
        return TranscriptCreate.model_validate(form)
    except ValidationError as e:
        fields = []
        for error in e.errors():
            name = str(error["loc"][0]) if error["loc"] else "form"
            if name not in fields:
                fields.append(name)
        raise FormValidationError(fields) from e


class DashboardScreen:
    """
    Holds what the dashboard shows: the transcript list, the create form,
    and the short-lived "copied" / "sent" confirmations per row.
    """

    def __init__(
        self,
        store: TranscriptStore,
        origin: str,
        alert: Alert,
        feedback_seconds: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._origin = origin
        self._alert = alert
        self.transcripts: List[Transcript] = []
        self.loading = True
        self.config_error: Optional[str] = None
        self.form_open = False
        self.form_error: Optional[str] = None
        self.creating = False
        self._copied = TransientFlags(feedback_seconds, clock)
        self._invited = TransientFlags(feedback_seconds, clock)

    def load(self) -> None:
        try:
            self._store.ping()
            self.transcripts = self._store.list_all()
            self.config_error = None
        except (ConfigurationError, TranscriptStoreError) as e:
            self.transcripts = []
            self.config_error = str(e)
        finally:
            self.loading = False

    def open_form(self) -> None:
        self.form_open = True
        self.form_error = None

    def close_form(self) -> None:
        self.form_open = False
        self.form_error = None

    def submit_form(self, form: dict) -> Optional[Transcript]:
        """
        Creates a transcript from the form fields.

        Returns the new transcript, or None when the store rejected it; the
        form then stays open with the backend message in `form_error`.

        Raises:
            FormValidationError: If required fields are blank. Nothing is sent.
        """
        data = validate_form(form)
        self.creating = True
        try:
            transcript = self._store.create(data)
        except TranscriptStoreError as e:
            self.form_error = describe_store_error(e)
            self._alert(self.form_error)
            return None
        except ConfigurationError as e:
            self.form_error = str(e)
            self._alert(self.form_error)
            return None
        finally:
            self.creating = False

        self.close_form()
        self.load()
        return transcript

    def delete(self, transcript_id: UUID, confirm: Confirm) -> bool:
        transcript = self._find(transcript_id)
        if not confirm(DELETE_PROMPT.format(title=transcript.talk_title)):
            return False

        try:
            self._store.delete(transcript_id)
        except (ConfigurationError, TranscriptStoreError, TranscriptNotFoundError) as e:
            logger.error(
                "Error deleting transcript",
                extra={"transcript_id": str(transcript_id), "error": str(e)},
            )
            message = (
                describe_store_error(e)
                if isinstance(e, TranscriptStoreError)
                else str(e)
            )
            self._alert(f"Error deleting transcript.\n{message}")
            return False

        self.transcripts = [t for t in self.transcripts if t.id != transcript_id]
        return True

    def review_link(self, transcript_id: UUID) -> str:
        return build_review_link(self._origin, transcript_id)

    def copy_link(
        self,
        transcript_id: UUID,
        clipboard: Optional[Clipboard],
        fallback: Clipboard,
    ) -> str:
        link = self.review_link(transcript_id)
        copy_text(link, clipboard, fallback)
        self._copied.mark(transcript_id)
        return link

    def link_copied(self, transcript_id: UUID) -> bool:
        return self._copied.is_set(transcript_id)

    def invite_available(self, transcript_id: UUID) -> bool:
        return bool(self._find(transcript_id).reviewer_email)

    def send_invite(self, transcript_id: UUID, compose_mail: Callable[[str], None]) -> bool:
        """Hands a pre-filled invite to the mail client, if there is an address."""
        transcript = self._find(transcript_id)
        invite = compose_invite(transcript, self.review_link(transcript_id))
        if invite is None:
            self._alert(NO_EMAIL_ALERT)
            return False

        compose_mail(invite.mailto)
        self._invited.mark(transcript_id)
        return True

    def invite_sent(self, transcript_id: UUID) -> bool:
        return self._invited.is_set(transcript_id)

    def view(self, transcript_id: UUID) -> TranscriptView:
        return to_view(self._find(transcript_id), self._origin)

    def copy_view_text(
        self,
        transcript_id: UUID,
        clipboard: Optional[Clipboard],
        fallback: Clipboard,
    ) -> None:
        copy_text(self._find(transcript_id).effective_text, clipboard, fallback)

    def _find(self, transcript_id: UUID) -> Transcript:
        for transcript in self.transcripts:
            if transcript.id == transcript_id:
                return transcript
        raise TranscriptNotFoundError(transcript_id)
