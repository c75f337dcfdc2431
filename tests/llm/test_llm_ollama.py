"""
Tests for Ollama LLM provider.
"""

from unittest.mock import AsyncMock, patch

import pytest

from notegenius.core.llm.ollama import OllamaLLM
from notegenius.utils.exceptions import LLMError, ValidationError


@pytest.fixture
def ollama_llm():
    """Create Ollama LLM for testing."""
    return OllamaLLM(host="http://localhost:11434", model="llama3.1:8b", timeout=120.0)


@pytest.mark.unit
@pytest.mark.asyncio
class TestOllamaLLM:
    """Test Ollama LLM provider."""

    async def test_initialization(self, ollama_llm):
        """Test provider initialization."""
        assert ollama_llm.host == "http://localhost:11434"
        assert ollama_llm.model == "llama3.1:8b"
        assert ollama_llm.timeout == 120.0
        assert ollama_llm.client is not None

    async def test_complete_simple(self, ollama_llm):
        """Test simple text completion."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.return_value = {"message": {"content": "A short summary"}}

            result = await ollama_llm.complete("Summarize this note", max_tokens=50)

            assert result == "A short summary"
            mock_chat.assert_called_once()

    async def test_complete_with_system_and_temperature(self, ollama_llm):
        """Test system prompt and sampling options are passed through."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.return_value = {"message": {"content": "test"}}

            await ollama_llm.complete("test", system="be brief", temperature=0.2, max_tokens=100)

            call_args = mock_chat.call_args
            assert call_args.kwargs["model"] == "llama3.1:8b"
            assert call_args.kwargs["messages"][0] == {"role": "system", "content": "be brief"}
            assert call_args.kwargs["options"]["temperature"] == 0.2
            assert call_args.kwargs["options"]["num_predict"] == 100

    async def test_complete_with_extra_options(self, ollama_llm):
        """Test completion with extra options."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.return_value = {"message": {"content": "test"}}

            await ollama_llm.complete("test", options={"top_p": 0.9, "top_k": 40})

            call_args = mock_chat.call_args
            assert call_args.kwargs["options"]["top_p"] == 0.9
            assert call_args.kwargs["options"]["top_k"] == 40

    async def test_empty_prompt(self, ollama_llm):
        """Test empty prompts are rejected before calling Ollama."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            with pytest.raises(ValidationError, match="Prompt cannot be empty"):
                await ollama_llm.complete("   ")

            mock_chat.assert_not_called()

    async def test_api_error(self, ollama_llm):
        """Test client errors become LLMError."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.side_effect = ConnectionError("connection refused")

            with pytest.raises(LLMError, match="Ollama API error"):
                await ollama_llm.complete("test")

    async def test_empty_content(self, ollama_llm):
        """Test empty responses become LLMError."""
        with patch.object(ollama_llm.client, "chat", new_callable=AsyncMock) as mock_chat:
            mock_chat.return_value = {"message": {"content": ""}}

            with pytest.raises(LLMError, match="empty content"):
                await ollama_llm.complete("test")

    async def test_close(self, ollama_llm):
        """Test close is safe to call."""
        await ollama_llm.close()
