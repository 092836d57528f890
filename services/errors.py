"""Exceptions raised by the transcript services.

Every error carries a short user-facing message and an optional details
string with the underlying failure, which the routers return as
``{"error": ..., "details": ...}``.
"""
from typing import Optional


class TranscriptFormatterError(Exception):
    """Base class for transcript pipeline failures."""

    message = "Transcript processing failed"

    def __init__(self, details: Optional[str] = None):
        super().__init__(self.message if details is None else f"{self.message}: {details}")
        self.details = details


class TranscriptUnavailable(TranscriptFormatterError):
    """Both the preferred-language and default caption requests failed."""

    message = "Failed to fetch transcript"

    def __init__(self, video_id: str, details: Optional[str] = None):
        super().__init__(details)
        self.video_id = video_id


class TemplateNotFound(TranscriptFormatterError):
    """The requested format template does not exist."""

    message = "Template not found"

    def __init__(self, template_id: int):
        super().__init__(f"No template with id {template_id}")
        self.template_id = template_id


class NoPromptProvided(TranscriptFormatterError):
    """Neither a template id nor a custom prompt was supplied."""

    message = "No prompt provided"

    def __init__(self):
        super().__init__("Either templateId or customPrompt is required")


class GenerationFailed(TranscriptFormatterError):
    """A call to the text generation service failed."""

    message = "Failed to process transcript"

    def __init__(self, details: Optional[str] = None, chunk_index: Optional[int] = None):
        super().__init__(details)
        self.chunk_index = chunk_index
