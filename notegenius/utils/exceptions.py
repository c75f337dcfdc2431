"""
Exception hierarchy for NoteGenius.

The content core (task parsing, statistics, edit history) is total and never
raises. These exceptions belong to the surrounding layers: the note
collection, the editor session and the AI collaborators.
"""


class NoteGeniusError(Exception):
    """
    Base exception for all NoteGenius errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize NoteGenius error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(NoteGeniusError):
    """
    Validation errors.
    Raised when caller input is rejected (blank folder name, empty AI response).
    """

    pass


class NotFoundError(NoteGeniusError):
    """
    Resource not found errors.
    Raised when a requested note doesn't exist in the collection.
    """

    pass


class ConfigurationError(NoteGeniusError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class LLMError(NoteGeniusError):
    """
    LLM operation errors.
    Raised when text generation fails (API errors, timeouts, empty output).
    """

    pass


class NoteLockedError(NoteGeniusError):
    """Raised when an editing operation targets a locked note."""

    pass
