"""
Tests for OpenAI LLM provider.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notegenius.core.llm.openai import OpenAILLM
from notegenius.utils.exceptions import LLMError, ValidationError


@pytest.fixture
def openai_llm():
    """Create OpenAI LLM for testing."""
    return OpenAILLM(api_key="test-key", model="gpt-4o", timeout=120.0)


def _response(content):
    mock_response = MagicMock()
    mock_response.choices = [MagicMock(message=MagicMock(content=content))]
    return mock_response


@pytest.mark.unit
@pytest.mark.asyncio
class TestOpenAILLM:
    """Test OpenAI LLM provider."""

    async def test_initialization(self, openai_llm):
        """Test provider initialization."""
        assert openai_llm.model == "gpt-4o"
        assert openai_llm.client is not None

    async def test_initialization_with_base_url(self):
        """Test initialization with custom base URL."""
        llm = OpenAILLM(api_key="test-key", base_url="https://custom.openai.com")
        assert llm.client is not None

    async def test_complete_simple(self, openai_llm):
        """Test simple completion."""
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _response("test response")

            result = await openai_llm.complete("test prompt")

            assert result == "test response"
            mock_create.assert_called_once()

    async def test_complete_with_parameters(self, openai_llm):
        """Test parameters reach the API."""
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _response("ok")

            await openai_llm.complete(
                "test", system="be brief", temperature=0.3, max_tokens=200, stop=["\n"]
            )

            kwargs = mock_create.call_args.kwargs
            assert kwargs["model"] == "gpt-4o"
            assert kwargs["messages"][0]["role"] == "system"
            assert kwargs["temperature"] == 0.3
            assert kwargs["max_tokens"] == 200
            assert kwargs["stop"] == ["\n"]

    async def test_empty_prompt(self, openai_llm):
        """Test empty prompts are rejected."""
        with pytest.raises(ValidationError):
            await openai_llm.complete("")

    async def test_api_error(self, openai_llm):
        """Test API errors become LLMError."""
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = RuntimeError("rate limit")

            with pytest.raises(LLMError, match="OpenAI API error: rate limit"):
                await openai_llm.complete("test")

    async def test_empty_content(self, openai_llm):
        """Test a None message body becomes LLMError."""
        with patch.object(
            openai_llm.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _response(None)

            with pytest.raises(LLMError, match="empty content"):
                await openai_llm.complete("test")

    async def test_close(self, openai_llm):
        """Test close delegates to the client."""
        with patch.object(openai_llm.client, "close", new_callable=AsyncMock) as mock_close:
            await openai_llm.close()

            mock_close.assert_called_once()
