"""
Transcript Request/Response Models

This module defines the Pydantic models for the transcript endpoints:
GET /api/transcript/{video_id}, POST /api/process-transcript and
POST /api/suggest-templates. Field names are camelCase on the wire.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TranscriptResponse(BaseModel):
    """Response from the transcript fetch endpoint."""
    transcript: str = Field(
        ...,
        description="Full transcript text with caption fragments joined by spaces"
    )


class ProcessTranscriptRequest(BaseModel):
    """
    Request body for the transcript reformatting endpoint.

    Attributes:
        transcript: Transcript text to reformat (required; checked by the router)
        template_id: Optional id of a stored format template
        custom_prompt: Optional prompt used when no template id is given
    """
    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = Field(
        default=None,
        description="Transcript text to reformat"
    )
    template_id: Optional[int] = Field(
        default=None,
        alias="templateId",
        description="Id of the format template to apply"
    )
    custom_prompt: Optional[str] = Field(
        default=None,
        alias="customPrompt",
        description="Custom instruction used when no template is selected"
    )


class ProcessTranscriptResponse(BaseModel):
    """Response from the transcript reformatting endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    formatted_transcript: str = Field(
        ...,
        alias="formattedTranscript",
        description="Reformatted and normalized transcript"
    )


class SuggestTemplatesRequest(BaseModel):
    """Request body for the template suggestion endpoint."""
    transcript: Optional[str] = Field(
        default=None,
        description="Transcript to classify; only the first 1000 characters are used"
    )


class TemplateSuggestion(BaseModel):
    """A template matched against a transcript, with its keyword score."""
    id: Optional[int] = None
    name: str
    description: str
    score: int = Field(..., gt=0, description="Number of matching keywords")


class ErrorResponse(BaseModel):
    """Structured failure body returned by every endpoint."""
    error: str
    details: Optional[str] = None
