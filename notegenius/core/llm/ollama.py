"""
Ollama LLM provider using native ollama-python SDK.
"""

import ollama

from notegenius.core.llm.base import LLMProvider
from notegenius.utils.exceptions import LLMError, ValidationError
from notegenius.utils.logger import get_logger

logger = get_logger(__name__)


class OllamaLLM(LLMProvider):
    """
    Ollama LLM provider for text generation.

    Uses native ollama-python SDK for chat completions.
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.1:8b",
        timeout: float = 120.0,
    ):
        """
        Initialize Ollama LLM provider.

        Args:
            host: Ollama server URL
            model: Model name for text generation (e.g., "llama3.1", "mistral")
            timeout: Request timeout in seconds
        """
        self.host = host
        self.model = model
        self.timeout = timeout

        self.client = ollama.AsyncClient(host=host, timeout=timeout)

    async def complete(
        self,
        prompt: str,
        system: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        **kwargs,
    ) -> str:
        """
        Generate completion using Ollama.

        Args:
            prompt: Input prompt
            system: Optional system prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional options (``options`` is merged into the Ollama options)

        Returns:
            Generated text

        Raises:
            ValidationError: If the prompt is empty
            LLMError: If the Ollama call fails or returns nothing
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        options = {
            "temperature": temperature,
            "num_predict": max_tokens,
            **kwargs.get("options", {}),
        }

        try:
            response = await self.client.chat(
                model=self.model,
                messages=self.build_messages(prompt, system),
                options=options,
                **{k: v for k, v in kwargs.items() if k != "options"},
            )
        except Exception as e:
            logger.bind(model=self.model, error_type=type(e).__name__).error(f"Ollama API error: {e}")
            raise LLMError(f"Ollama API error: {e}", context={"model": self.model}) from e

        content = response["message"]["content"]
        if not content:
            raise LLMError("Ollama returned empty content", context={"model": self.model})

        return content

    async def close(self):
        """Close client (Ollama SDK handles cleanup internally)."""
        pass
