from .transcript_repository import TranscriptRepository, parse_transcript_id

__all__ = ["TranscriptRepository", "parse_transcript_id"]
