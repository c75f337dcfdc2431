"""
Shared test fixtures for all test modules.
"""

import pytest

from notegenius.config import EditorConfig
from notegenius.core.llm.base import LLMProvider
from notegenius.models.note import Note
from notegenius.services.editor_session import EditorSession

SAMPLE_CHECKLIST = "- [ ] Buy milk\n- [x] Pay rent\n- [ ] Call Sam"


class MockLLM(LLMProvider):
    """Mock LLM provider recording every call."""

    def __init__(self, response: str = "generated text"):
        self.response = response
        self.calls: list[dict] = []
        self.closed = False

    async def complete(self, prompt: str, system=None, max_tokens=1000, temperature=0.7, **kwargs):
        self.calls.append(
            {
                "prompt": prompt,
                "system": system,
                "max_tokens": max_tokens,
                "temperature": temperature,
                **kwargs,
            }
        )
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def sample_checklist() -> str:
    """Three-task checklist buffer."""
    return SAMPLE_CHECKLIST


@pytest.fixture
def note(sample_checklist) -> Note:
    """Note holding the sample checklist."""
    return Note.create(title="Errands", content=sample_checklist, tags=["home"])


@pytest.fixture
def session(note) -> EditorSession:
    """Editor session over the sample note."""
    return EditorSession(note, EditorConfig())


@pytest.fixture
def mock_llm() -> MockLLM:
    """LLM provider that returns a fixed response."""
    return MockLLM()
