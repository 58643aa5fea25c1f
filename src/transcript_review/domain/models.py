from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, StringConstraints, field_validator

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TranscriptCreate(BaseModel):
    """Fields an admin fills in to create a transcript."""

    speaker_name: RequiredText
    reviewer_email: Optional[str] = None
    talk_title: RequiredText
    talk_date: date
    original_text: RequiredText

    @field_validator("reviewer_email", mode="before")
    @classmethod
    def _blank_email_is_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class DraftUpdate(BaseModel):
    revised_text: str


class ApproveRequest(BaseModel):
    revised_text: str
    confirm: bool = False
