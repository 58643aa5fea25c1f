"""Abstract interface for transcript table access."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from transcript_review.db_models import Transcript
from transcript_review.domain.models import TranscriptCreate


class TranscriptStore(ABC):
    """Abstract base class for the `talk_transcripts` table."""

    @abstractmethod
    def ping(self) -> None:
        """
        Verifies the store is reachable.

        Raises:
            ConfigurationError: If the store cannot be reached.
        """
        pass

    @abstractmethod
    def list_all(self) -> List[Transcript]:
        """
        Returns every transcript, most recent talk date first.

        Raises:
            TranscriptStoreError: If the query fails.
        """
        pass

    @abstractmethod
    def get_by_id(self, transcript_id: UUID) -> Transcript:
        """
        Raises:
            TranscriptNotFoundError: If the transcript does not exist.
            TranscriptStoreError: If the query fails.
        """
        pass

    @abstractmethod
    def create(self, data: TranscriptCreate) -> Transcript:
        """
        Inserts a new transcript in the pending_review state.

        Raises:
            TranscriptStoreError: If the insert fails.
        """
        pass

    @abstractmethod
    def save_draft(self, transcript_id: UUID, revised_text: str) -> Transcript:
        """
        Persists the reviewer's edited text.

        Raises:
            TranscriptNotFoundError: If the transcript does not exist.
            TranscriptAlreadyApprovedError: If the transcript is approved.
            TranscriptStoreError: If the update fails.
        """
        pass

    @abstractmethod
    def approve(self, transcript_id: UUID, revised_text: str) -> Transcript:
        """
        Persists the final text and moves the transcript to approved.

        Raises:
            TranscriptNotFoundError: If the transcript does not exist.
            TranscriptAlreadyApprovedError: If the transcript is approved.
            TranscriptStoreError: If the update fails.
        """
        pass

    @abstractmethod
    def delete(self, transcript_id: UUID) -> None:
        """
        Hard-deletes a transcript.

        Raises:
            TranscriptNotFoundError: If the transcript does not exist.
            TranscriptStoreError: If the delete fails.
        """
        pass
