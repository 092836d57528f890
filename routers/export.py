"""
Export router for downloading a formatted transcript as a Markdown or text file.
"""
import logging
from fastapi import APIRouter
from fastapi.responses import Response

from models.export_models import ExportRequest
from services.export_service import build_export
from utils.response_utils import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["export"])


@router.post("/export")
async def export_transcript(body: ExportRequest):
    """
    Return the content as a file attachment.

    Errors:
        400 for an unsupported format
    """
    try:
        export = build_export(body.content, body.format, body.file_name)
    except ValueError as e:
        logger.warning(f"Export rejected: format={body.format!r}")
        return error_response(400, "Unsupported export format", str(e))

    logger.info(f"Export built: filename={export.filename}, length={len(export.content)} chars")
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'}
    )
