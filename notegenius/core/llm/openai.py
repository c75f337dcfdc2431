"""
OpenAI LLM provider using official SDK.
"""

from openai import AsyncOpenAI

from notegenius.core.llm.base import LLMProvider
from notegenius.utils.exceptions import LLMError, ValidationError
from notegenius.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(LLMProvider):
    """
    OpenAI LLM provider for text generation.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize OpenAI LLM provider.

        Args:
            api_key: OpenAI API key
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini")
            organization: Optional organization ID
            base_url: Optional custom base URL
            timeout: Request timeout in seconds
        """
        self.model = model

        self.client = AsyncOpenAI(
            api_key=api_key, organization=organization, base_url=base_url, timeout=timeout
        )

    async def complete(
        self,
        prompt: str,
        system: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        **kwargs,
    ) -> str:
        """
        Generate completion using OpenAI chat completions.

        Args:
            prompt: Input prompt
            system: Optional system prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop, presence_penalty)
        Returns:
            Generated text
        Raises:
            ValidationError: If the prompt is empty
            LLMError: If OpenAI API call fails or returns nothing
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        params = {
            "model": self.model,
            "messages": self.build_messages(prompt, system),
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        }

        try:
            response = await self.client.chat.completions.create(**params)
        except Exception as e:
            logger.bind(model=self.model, error_type=type(e).__name__).error(f"OpenAI API error: {e}")
            raise LLMError(f"OpenAI API error: {e}", context={"model": self.model}) from e

        content = response.choices[0].message.content
        if not content:
            raise LLMError("OpenAI returned empty content", context={"model": self.model})

        return content

    async def close(self):
        """Close OpenAI client."""
        await self.client.close()
