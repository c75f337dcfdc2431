"""
Factory for creating LLM providers.
"""

from notegenius.config import LLMConfig
from notegenius.core.llm.base import LLMProvider
from notegenius.core.llm.ollama import OllamaLLM
from notegenius.core.llm.openai import OpenAILLM
from notegenius.utils.exceptions import ConfigurationError


class LLMFactory:
    """Factory for creating LLM providers from configuration."""

    @staticmethod
    def create(config: LLMConfig) -> LLMProvider:
        """
        Create LLM provider from configuration.

        Args:
            config: LLM configuration

        Returns:
            LLM provider instance

        Raises:
            ConfigurationError: If provider is not supported or the API key is missing
        """
        if config.provider == "ollama":
            return OllamaLLM(
                host=config.base_url,
                model=config.model,
                timeout=config.timeout,
            )
        elif config.provider == "openai":
            if not config.api_key:
                raise ConfigurationError("OpenAI API key is required")
            # The default base_url points at a local Ollama server
            base_url = None if config.base_url == LLMConfig().base_url else config.base_url
            return OpenAILLM(
                api_key=config.api_key,
                model=config.model,
                base_url=base_url,
                timeout=config.timeout,
            )
        else:
            raise ConfigurationError(f"Unsupported LLM provider: {config.provider}")
