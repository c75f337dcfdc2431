"""
Factory modules for creating NoteGenius components.
"""

from notegenius.core.factory.llm_factory import LLMFactory

__all__ = [
    "LLMFactory",
]
