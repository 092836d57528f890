"""Data models for the transcript formatter service."""
from .transcript_models import (
    TranscriptResponse,
    ProcessTranscriptRequest,
    ProcessTranscriptResponse,
    SuggestTemplatesRequest,
    TemplateSuggestion,
    ErrorResponse,
)
from .template_models import FormatTemplateRead
from .history_models import HistoryCreateRequest, HistoryEntryRead
from .export_models import ExportRequest
from .db_models import FormatTemplateModel, TranscriptHistoryModel

__all__ = [
    # Transcript endpoints
    "TranscriptResponse",
    "ProcessTranscriptRequest",
    "ProcessTranscriptResponse",
    "SuggestTemplatesRequest",
    "TemplateSuggestion",
    "ErrorResponse",
    # Templates
    "FormatTemplateRead",
    # History
    "HistoryCreateRequest",
    "HistoryEntryRead",
    # Export
    "ExportRequest",
    # Database models
    "FormatTemplateModel",
    "TranscriptHistoryModel",
]
