"""
Transcript router for fetching, reformatting and classifying transcripts.
"""
import logging
import uuid
from typing import List
from fastapi import APIRouter

from models.transcript_models import (
    ProcessTranscriptRequest,
    ProcessTranscriptResponse,
    SuggestTemplatesRequest,
    TemplateSuggestion,
    TranscriptResponse,
)
from services.errors import (
    GenerationFailed,
    NoPromptProvided,
    TemplateNotFound,
    TranscriptUnavailable,
)
from services.reformatting_service import ReformattingService
from services.suggestion_service import SuggestionService
from services.template_store import TemplateStore
from services.transcript_service import TranscriptService
from utils.response_utils import error_response, service_error_response
from utils.text_utils import extract_video_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transcripts"])


@router.get("/transcript/{video_id:path}", response_model=TranscriptResponse)
async def get_transcript(video_id: str):
    """
    Fetch the transcript for a YouTube video.

    Args:
        video_id: An 11-character video id or a full YouTube URL

    Returns:
        TranscriptResponse with the decoded, space-joined caption text

    Errors:
        400 if no video id can be extracted, 404 if no captions are available
    """
    resolved_id = extract_video_id(video_id)
    if not resolved_id:
        logger.warning(f"Invalid video id rejected: value={video_id!r}")
        return error_response(400, "Invalid YouTube video id", f"Could not extract a video id from {video_id!r}")

    try:
        transcript_service = TranscriptService()
        transcript = await transcript_service.fetch_transcript(resolved_id)
    except TranscriptUnavailable as e:
        logger.error(f"Transcript fetch failed: video_id={resolved_id}, details={e.details}")
        return service_error_response(404, e)
    except Exception as e:
        logger.error(f"Transcript fetch error: video_id={resolved_id}, error={e}", exc_info=True)
        return error_response(500, "Failed to fetch transcript", str(e))

    return TranscriptResponse(transcript=transcript)


@router.post("/process-transcript", response_model=ProcessTranscriptResponse)
async def process_transcript(body: ProcessTranscriptRequest):
    """
    Reformat a transcript with a stored template or a custom prompt.

    Returns:
        ProcessTranscriptResponse with the formatted transcript

    Errors:
        400 for a missing transcript or prompt, 404 for an unknown template,
        502 when the generation service fails, 500 otherwise
    """
    processing_id = str(uuid.uuid4())

    if body.transcript is None:
        logger.warning(f"Missing transcript rejected: processing_id={processing_id}")
        return error_response(400, "Transcript is required")

    logger.info(
        f"Processing started: processing_id={processing_id}, "
        f"length={len(body.transcript)} chars, template_id={body.template_id}, "
        f"custom_prompt={'yes' if body.custom_prompt else 'no'}"
    )

    try:
        reformatting_service = ReformattingService()
        formatted = await reformatting_service.format_transcript(
            body.transcript,
            template_id=body.template_id,
            custom_prompt=body.custom_prompt
        )
    except NoPromptProvided as e:
        logger.warning(f"No prompt provided: processing_id={processing_id}")
        return service_error_response(400, e)
    except TemplateNotFound as e:
        logger.warning(f"Unknown template: processing_id={processing_id}, template_id={e.template_id}")
        return service_error_response(404, e)
    except GenerationFailed as e:
        logger.error(
            f"Processing failed: processing_id={processing_id}, "
            f"chunk_index={e.chunk_index}, details={e.details}"
        )
        return service_error_response(502, e)
    except Exception as e:
        logger.error(f"Processing error: processing_id={processing_id}, error={e}", exc_info=True)
        return error_response(500, "Failed to process transcript", str(e))

    logger.info(f"Processing complete: processing_id={processing_id}, length={len(formatted)} chars")
    return ProcessTranscriptResponse(formatted_transcript=formatted)


@router.post("/suggest-templates", response_model=List[TemplateSuggestion])
async def suggest_templates(body: SuggestTemplatesRequest):
    """
    Suggest format templates for a transcript, best match first.

    Returns:
        Templates with a positive keyword score; an empty list means no suggestions

    Errors:
        400 for a missing transcript, 502 when the generation service fails
    """
    if not body.transcript:
        logger.warning("Suggestion request without transcript rejected")
        return error_response(400, "Transcript is required")

    try:
        templates = await TemplateStore().list_templates()
        suggestion_service = SuggestionService()
        suggestions = await suggestion_service.suggest_templates(body.transcript, templates)
    except GenerationFailed as e:
        logger.error(f"Template suggestion failed: details={e.details}")
        return service_error_response(502, e)
    except Exception as e:
        logger.error(f"Template suggestion error: error={e}", exc_info=True)
        return error_response(500, "Failed to suggest templates", str(e))

    return suggestions
