"""Abstract interfaces for infrastructure dependencies."""

from .transcript_store import TranscriptStore

__all__ = ["TranscriptStore"]
