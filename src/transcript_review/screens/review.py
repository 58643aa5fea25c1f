"""Reviewer screen state: editing, debounced auto-save and approval."""

import time
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from transcript_review.db_models import Transcript
from transcript_review.exceptions import (
    ConfigurationError,
    TranscriptAlreadyApprovedError,
    TranscriptNotFoundError,
    TranscriptStoreError,
)
from transcript_review.interfaces import TranscriptStore
from transcript_review.logging import setup_logging

logger = setup_logging()

Confirm = Callable[[str], bool]

RESET_PROMPT = "Reset to original transcript? Your changes will be lost."
APPROVE_PROMPT = (
    "By approving, you confirm that this transcript accurately represents "
    "your talk and is ready for publication."
)

PERSIST_ERRORS = (
    ConfigurationError,
    TranscriptStoreError,
    TranscriptAlreadyApprovedError,
    TranscriptNotFoundError,
)


class ReviewScreen:
    """
    Editor for one transcript, reached through its review link.

    The screen is in one of two states. While the transcript is pending
    review the content is editable; every edit marks unsaved changes and
    pushes the auto-save deadline out to `autosave_seconds` after the most
    recent edit. `tick()` is driven by the caller's event loop and saves
    once that deadline passes. After approval the screen is read-only.

    Saves snapshot the content they send. If the content changes while a
    save is in flight, the save still completes but unsaved changes stay
    flagged for the next one.
    """

    def __init__(
        self,
        store: TranscriptStore,
        transcript_id: UUID | str,
        autosave_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._transcript_id = transcript_id
        self._autosave_seconds = autosave_seconds
        self._clock = clock
        self._autosave_at: Optional[float] = None

        self.transcript: Optional[Transcript] = None
        self.content = ""
        self.loading = True
        self.not_found = False
        self.saving = False
        self.has_changes = False
        self.last_saved: Optional[datetime] = None

    @property
    def is_approved(self) -> bool:
        return self.transcript is not None and self.transcript.is_approved

    @property
    def editable(self) -> bool:
        return self.transcript is not None and not self.transcript.is_approved

    @property
    def can_save(self) -> bool:
        return self.editable and self.has_changes and not self.saving

    @property
    def autosave_pending(self) -> bool:
        return self._autosave_at is not None

    def load(self) -> None:
        try:
            self.transcript = self._store.get_by_id(self._transcript_id)
            self.content = self.transcript.effective_text
        except TranscriptNotFoundError:
            self.not_found = True
        except (ConfigurationError, TranscriptStoreError):
            logger.exception(
                "Load error", extra={"transcript_id": str(self._transcript_id)}
            )
            self.not_found = True
        finally:
            self.loading = False

    def edit(self, content: str) -> None:
        if not self.editable:
            return
        self.content = content
        self.has_changes = True
        self._autosave_at = self._clock() + self._autosave_seconds

    def tick(self) -> bool:
        """Runs the auto-save if its deadline has passed. Returns True if it saved."""
        if self._autosave_at is None or self._clock() < self._autosave_at:
            return False
        self._autosave_at = None
        if not self.has_changes:
            return False
        return self.save()

    def save(self) -> bool:
        if not self.can_save:
            return False

        self.saving = True
        sent = self.content
        try:
            self.transcript = self._store.save_draft(self.transcript.id, sent)
        except PERSIST_ERRORS:
            logger.exception(
                "Save error", extra={"transcript_id": str(self.transcript.id)}
            )
            return False
        finally:
            self.saving = False

        self.has_changes = self.content != sent
        self.last_saved = datetime.now()
        return True

    def reset_to_original(self, confirm: Confirm) -> bool:
        if not self.editable or not confirm(RESET_PROMPT):
            return False
        self.edit(self.transcript.original_text)
        return True

    def approve(self, confirm: Confirm) -> bool:
        if not self.editable or self.saving or not confirm(APPROVE_PROMPT):
            return False

        self.saving = True
        try:
            self.transcript = self._store.approve(self.transcript.id, self.content)
        except PERSIST_ERRORS:
            logger.exception(
                "Approve error", extra={"transcript_id": str(self.transcript.id)}
            )
            return False
        finally:
            self.saving = False

        self.has_changes = False
        self._autosave_at = None
        return True

    def close(self) -> None:
        """Drops any pending auto-save, as when the page is left."""
        self._autosave_at = None
