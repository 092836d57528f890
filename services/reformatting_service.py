"""ReformattingService for rewriting transcripts with a template or custom prompt."""
import os
import logging
from typing import List, Optional

from services.errors import GenerationFailed, NoPromptProvided, TemplateNotFound
from services.generation_service import GenerationService
from services.template_store import TemplateStore
from utils.text_utils import DEFAULT_CHUNK_SIZE, chunk_text, clean_formatted_text

logger = logging.getLogger(__name__)

FORMATTING_INSTRUCTIONS = (
    "Formatting requirements:\n"
    "- Use minimal spacing: at most one blank line between sections\n"
    "- Use consistent markdown headers (#, ##, ###) for sections\n"
    "- Keep paragraphs compact and focused\n"
    "- Use bullet points only where they improve readability\n"
    "- Return only the formatted content, without commentary"
)


def build_chunk_prompt(prompt: str, chunk: str) -> str:
    """Combine the resolved prompt, formatting rules and one transcript chunk."""
    return f"{prompt}\n\n{FORMATTING_INSTRUCTIONS}\n\nTranscript:\n{chunk}"


class ReformattingService:
    """Service for reformatting a transcript through the generation service.

    Long transcripts are split into fixed-size chunks that are sent one at a
    time, in order. Completions are joined with newlines and passed through
    the cleanup normalizer. A failure on any chunk fails the whole request.
    """

    def __init__(
        self,
        template_store: Optional[TemplateStore] = None,
        generation_service: Optional[GenerationService] = None,
        chunk_size: Optional[int] = None,
    ):
        """Initialize with collaborators; defaults are built from environment."""
        self.template_store = template_store or TemplateStore()
        self.generation_service = generation_service or GenerationService()
        self.chunk_size = chunk_size or int(os.getenv("TRANSCRIPT_CHUNK_SIZE", DEFAULT_CHUNK_SIZE))
        logger.info(f"ReformattingService initialized with chunk_size={self.chunk_size}")

    async def resolve_prompt(
        self,
        template_id: Optional[int] = None,
        custom_prompt: Optional[str] = None
    ) -> str:
        """
        Pick the prompt for a request.

        A template id takes precedence over a custom prompt. An empty custom
        prompt counts as missing.

        Raises:
            TemplateNotFound: If template_id does not exist
            NoPromptProvided: If neither source is given
        """
        if template_id is not None:
            template = await self.template_store.get_by_id(template_id)
            if template is None:
                logger.warning(f"Template lookup failed: template_id={template_id}")
                raise TemplateNotFound(template_id)
            return template.prompt

        if custom_prompt:
            return custom_prompt

        raise NoPromptProvided()

    async def format_transcript(
        self,
        transcript: str,
        template_id: Optional[int] = None,
        custom_prompt: Optional[str] = None
    ) -> str:
        """
        Reformat a transcript.

        Args:
            transcript: Full transcript text
            template_id: Id of the format template to use
            custom_prompt: Prompt used when template_id is not given

        Returns:
            The joined, normalized completions

        Raises:
            TemplateNotFound: If template_id does not exist
            NoPromptProvided: If neither template_id nor custom_prompt is given
            GenerationFailed: If any chunk's generation call fails
        """
        prompt = await self.resolve_prompt(template_id, custom_prompt)

        chunks = chunk_text(transcript, self.chunk_size)
        logger.info(
            f"Reformatting transcript: length={len(transcript)} chars, "
            f"chunks={len(chunks)}, template_id={template_id}"
        )

        completions = await self._generate_completions(prompt, chunks)

        formatted = clean_formatted_text("\n".join(completions))
        logger.info(f"Reformatting complete: formatted_length={len(formatted)}")
        return formatted

    async def _generate_completions(self, prompt: str, chunks: List[str]) -> List[str]:
        """Run the generation call for each chunk, strictly one after another."""
        completions = []
        for i, chunk in enumerate(chunks):
            logger.info(f"Processing chunk {i+1}/{len(chunks)}: length={len(chunk)}")
            try:
                completion = await self.generation_service.generate(build_chunk_prompt(prompt, chunk))
            except Exception as e:
                logger.error(
                    f"Generation failed: chunk={i+1}/{len(chunks)}, "
                    f"error={type(e).__name__}: {e}",
                    exc_info=True
                )
                raise GenerationFailed(details=str(e), chunk_index=i) from e
            completions.append(completion)
        return completions
