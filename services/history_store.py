"""HistoryStore for saving and listing processed transcripts."""
import logging
from typing import List

from sqlmodel import select

from models.db_models import TranscriptHistoryModel
from models.history_models import HistoryCreateRequest
from services.database import get_async_session

logger = logging.getLogger(__name__)


class HistoryStore:
    """Persistence for the transcript_history table."""

    async def save_entry(self, entry: HistoryCreateRequest) -> TranscriptHistoryModel:
        """Insert a history entry and return the stored row."""
        record = TranscriptHistoryModel(**entry.model_dump(by_alias=False))

        async with get_async_session() as session:
            session.add(record)
            await session.commit()
            await session.refresh(record)

        logger.info(
            f"History entry saved: id={record.id}, video_id={record.video_id}, "
            f"template_id={record.format_template_id}"
        )
        return record

    async def list_entries(self, limit: int = 50) -> List[TranscriptHistoryModel]:
        """Return up to limit entries, newest first."""
        async with get_async_session() as session:
            result = await session.execute(
                select(TranscriptHistoryModel)
                .order_by(TranscriptHistoryModel.created_at.desc(), TranscriptHistoryModel.id.desc())
                .limit(limit)
            )
            return list(result.scalars().all())
