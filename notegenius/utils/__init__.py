"""Utility modules for NoteGenius."""

from notegenius.utils.exceptions import (
    ConfigurationError,
    LLMError,
    NoteGeniusError,
    NoteLockedError,
    NotFoundError,
    ValidationError,
)
from notegenius.utils.id_generator import generate_folder_placeholder_id, generate_note_id
from notegenius.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_note_id",
    "generate_folder_placeholder_id",
    # Exceptions
    "NoteGeniusError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "LLMError",
    "NoteLockedError",
]
