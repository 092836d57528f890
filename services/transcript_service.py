"""TranscriptService for fetching YouTube captions with a language fallback."""
import os
import asyncio
import logging
from typing import List

from youtube_transcript_api import YouTubeTranscriptApi

from services.errors import TranscriptUnavailable
from utils.text_utils import decode_html_entities

logger = logging.getLogger(__name__)


class TranscriptService:
    """Service for fetching a video's caption text.

    The preferred language track is requested first; on any failure the
    first track YouTube lists for the video is used instead. There are no
    further retries and nothing is cached.
    """

    def __init__(self):
        """Initialize the caption client and preferred language from environment."""
        self.language = os.getenv("TRANSCRIPT_PRIMARY_LANGUAGE", "en")
        self.api = YouTubeTranscriptApi()

    async def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch captions for a video and join them into one string.

        Args:
            video_id: YouTube video id

        Returns:
            Decoded caption fragments joined with single spaces

        Raises:
            TranscriptUnavailable: If both the preferred and default tracks fail
        """
        logger.info(f"Fetching transcript: video_id={video_id}, language={self.language}")

        try:
            fragments = await asyncio.to_thread(self._fetch_preferred_track, video_id)
        except Exception as preferred_error:
            logger.warning(
                f"Preferred caption track failed, trying default: video_id={video_id}, "
                f"language={self.language}, error={type(preferred_error).__name__}: {preferred_error}"
            )
            try:
                fragments = await asyncio.to_thread(self._fetch_default_track, video_id)
            except Exception as default_error:
                logger.error(
                    f"Transcript unavailable: video_id={video_id}, "
                    f"error={type(default_error).__name__}: {default_error}"
                )
                raise TranscriptUnavailable(video_id, details=str(default_error)) from default_error

        transcript = " ".join(decode_html_entities(fragment) for fragment in fragments)
        logger.info(
            f"Transcript fetched: video_id={video_id}, fragments={len(fragments)}, "
            f"length={len(transcript)} chars"
        )
        return transcript

    def _fetch_preferred_track(self, video_id: str) -> List[str]:
        """Fetch the preferred-language track (blocking)."""
        fetched = self.api.fetch(video_id, languages=[self.language])
        return [snippet.text for snippet in fetched]

    def _fetch_default_track(self, video_id: str) -> List[str]:
        """Fetch the first track listed for the video (blocking)."""
        transcripts = list(self.api.list(video_id))
        if not transcripts:
            raise LookupError(f"No caption tracks available for video {video_id}")

        fetched = transcripts[0].fetch()
        return [snippet.text for snippet in fetched]
