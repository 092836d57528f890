"""SuggestionService for ranking format templates against a transcript."""
import re
import logging
from typing import List, Optional, Sequence

from models.db_models import FormatTemplateModel
from models.transcript_models import TemplateSuggestion
from services.errors import GenerationFailed
from services.generation_service import GenerationService

logger = logging.getLogger(__name__)

SAMPLE_LENGTH = 1000
MIN_STEM_LENGTH = 4

_WORD_PATTERN = re.compile(r"\w+")

KEYWORD_PROMPT = (
    "Analyze the following transcript sample and describe it with keywords. "
    "Consider its subject, tone and format (for example: technical, business, "
    "educational, tutorial, interview, lecture, casual, news, summary, study). "
    "Respond with a single comma-separated list of lowercase keywords and nothing else.\n\n"
    "Transcript sample:\n{sample}"
)


def parse_keywords(response: str) -> List[str]:
    """Split a comma-separated response into lowercase, trimmed, non-empty keywords."""
    keywords = [keyword.strip().lower() for keyword in response.split(",")]
    return [keyword for keyword in keywords if keyword]


def keyword_matches(keyword: str, field: str) -> bool:
    """
    Check a keyword against a lowercased template field.

    The keyword matches when it is a substring of the field, or when a word of
    the field with at least MIN_STEM_LENGTH characters starts the keyword
    ("tech" in "Tech Talk" matches the keyword "technical").
    """
    if keyword in field:
        return True
    return any(
        len(word) >= MIN_STEM_LENGTH and keyword.startswith(word)
        for word in _WORD_PATTERN.findall(field)
    )


def score_templates(
    keywords: Sequence[str],
    templates: Sequence[FormatTemplateModel]
) -> List[TemplateSuggestion]:
    """
    Score templates by keyword overlap with their name and description.

    Each keyword adds at most 1: when it matches the lowercased name or the
    lowercased description. Templates scoring 0 are dropped; the rest are
    sorted by score, highest first, keeping input order for ties.
    """
    suggestions = []
    for template in templates:
        name = template.name.lower()
        description = template.description.lower()
        score = sum(
            1 for keyword in keywords
            if keyword_matches(keyword, name) or keyword_matches(keyword, description)
        )
        if score > 0:
            suggestions.append(TemplateSuggestion(
                id=template.id,
                name=template.name,
                description=template.description,
                score=score
            ))

    # sorted() is stable, so equal scores keep input order
    return sorted(suggestions, key=lambda suggestion: suggestion.score, reverse=True)


class SuggestionService:
    """Service that classifies a transcript sample and ranks templates."""

    def __init__(self, generation_service: Optional[GenerationService] = None):
        self.generation_service = generation_service or GenerationService()

    async def extract_keywords(self, transcript: str) -> List[str]:
        """
        Ask the generation service for keywords describing the transcript start.

        Raises:
            GenerationFailed: If the generation call fails
        """
        sample = transcript[:SAMPLE_LENGTH]
        try:
            response = await self.generation_service.generate(KEYWORD_PROMPT.format(sample=sample))
        except Exception as e:
            logger.error(f"Keyword extraction failed: error={type(e).__name__}: {e}", exc_info=True)
            raise GenerationFailed(details=str(e)) from e

        keywords = parse_keywords(response)
        logger.info(f"Extracted keywords: count={len(keywords)}, keywords={keywords}")
        return keywords

    async def suggest_templates(
        self,
        transcript: str,
        templates: Sequence[FormatTemplateModel]
    ) -> List[TemplateSuggestion]:
        """Return templates matching the transcript's keywords, best first."""
        keywords = await self.extract_keywords(transcript)
        suggestions = score_templates(keywords, templates)
        logger.info(
            f"Template suggestions: templates={len(templates)}, matches={len(suggestions)}"
        )
        return suggestions
