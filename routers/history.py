"""
History router for saving and listing processed transcripts.
"""
import logging
from typing import List
from fastapi import APIRouter, Query

from models.history_models import HistoryCreateRequest, HistoryEntryRead
from services.history_store import HistoryStore
from utils.response_utils import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["history"])


@router.post("/history", response_model=HistoryEntryRead)
async def save_history(body: HistoryCreateRequest):
    """Save a processed transcript and return the stored entry."""
    try:
        entry = await HistoryStore().save_entry(body)
    except Exception as e:
        logger.error(f"Failed to save history: video_id={body.video_id}, error={e}", exc_info=True)
        return error_response(500, "Failed to save history", str(e))

    return HistoryEntryRead.model_validate(entry)


@router.get("/history", response_model=List[HistoryEntryRead])
async def list_history(limit: int = Query(default=50, ge=1, le=500)):
    """List saved transcripts, newest first."""
    try:
        entries = await HistoryStore().list_entries(limit=limit)
    except Exception as e:
        logger.error(f"Failed to fetch history: error={e}", exc_info=True)
        return error_response(500, "Failed to fetch history", str(e))

    return [HistoryEntryRead.model_validate(entry) for entry in entries]
