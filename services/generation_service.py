"""GenerationService wrapping the OpenAI chat completions API."""
import os
import logging
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class GenerationService:
    """Thin async client for single-prompt text generation.

    Errors from the OpenAI client are not caught here; callers decide how a
    failed call affects their operation.
    """

    def __init__(self):
        """Initialize with OpenAI API key and model from environment."""
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required")

        self.client = AsyncOpenAI(api_key=api_key)
        self.model = os.getenv("OPENAI_MODEL", "gpt-4o")
        logger.info(f"GenerationService initialized with model={self.model}")

    async def generate(self, prompt: str, temperature: float = 0.3) -> str:
        """
        Send a prompt and return the completion text.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature

        Returns:
            The completion text (empty string if the model returned no content)

        Raises:
            openai.OpenAIError: If the API call fails
        """
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
        )
        content = completion.choices[0].message.content or ""
        logger.debug(f"Generation complete: prompt_length={len(prompt)}, completion_length={len(content)}")
        return content
