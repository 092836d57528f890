"""
History Request/Response Models

Models for saving and listing processed transcripts (POST/GET /api/history).
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class HistoryCreateRequest(BaseModel):
    """
    Request body for saving a processed transcript.

    Attributes:
        video_id: YouTube video id the transcript came from
        video_title: Display title of the video
        original_transcript: Transcript as fetched
        formatted_transcript: Transcript after reformatting
        format_template_id: Template used, if any
        custom_prompt: Custom prompt used, if any
    """
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")
    video_title: str = Field(..., alias="videoTitle")
    original_transcript: str = Field(..., alias="originalTranscript")
    formatted_transcript: str = Field(..., alias="formattedTranscript")
    format_template_id: Optional[int] = Field(default=None, alias="formatTemplateId")
    custom_prompt: Optional[str] = Field(default=None, alias="customPrompt")

    @field_validator("video_id")
    @classmethod
    def video_id_must_not_be_empty(cls, v: str) -> str:
        """Validate that the video id is not blank."""
        if not v.strip():
            raise ValueError("videoId cannot be empty")
        return v.strip()


class HistoryEntryRead(BaseModel):
    """A saved history entry."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    video_id: str = Field(..., alias="videoId")
    video_title: str = Field(..., alias="videoTitle")
    original_transcript: str = Field(..., alias="originalTranscript")
    formatted_transcript: str = Field(..., alias="formattedTranscript")
    format_template_id: Optional[int] = Field(default=None, alias="formatTemplateId")
    custom_prompt: Optional[str] = Field(default=None, alias="customPrompt")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
