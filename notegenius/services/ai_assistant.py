"""
AI Assistant - feature prompts around the text generation service.

The core hands the provider plain text (note content or free input) and
takes plain text back. The response is not parsed; accepting it simply
creates a note, or replaces a session's buffer via accept_generated.
"""

from enum import Enum

from notegenius.config import LLMConfig
from notegenius.core.llm.base import LLMProvider
from notegenius.models.note import Note, NoteType
from notegenius.utils.exceptions import LLMError, ValidationError
from notegenius.utils.logger import get_logger

logger = get_logger(__name__)

AI_FOLDER = "AI Generated"
AI_TAG = "ai-generated"
DEFAULT_TRANSLATION_LANGUAGE = "Spanish"


class AIFeature(str, Enum):
    """Assistant features offered on notes and free input."""

    SUMMARIZE = "summarize"
    TODO = "todo"
    EMAIL = "email"
    EXPAND = "expand"
    KEYWORDS = "keywords"
    GRAMMAR = "grammar"
    TITLE = "title"
    TRANSLATE = "translate"
    ANALYZE = "analyze"
    BRAINSTORM = "brainstorm"
    CHAT = "chat"


# Features that work from free input alone
FREE_INPUT_FEATURES = {AIFeature.EXPAND, AIFeature.BRAINSTORM, AIFeature.CHAT}

_NOTE_PROMPTS = {
    AIFeature.SUMMARIZE: "Please provide a comprehensive summary of the following note, highlighting key points and main ideas:",
    AIFeature.TODO: (
        "Analyze the following text and create an actionable to-do list. "
        "Write every item as a checklist line of the form '- [ ] <item>':"
    ),
    AIFeature.EMAIL: "Transform the following note into a professional, well-structured email with appropriate subject line, greeting, body, and closing:",
    AIFeature.KEYWORDS: "Extract and categorize key terms, topics, and important keywords from the following text. Organize them by relevance and provide brief explanations:",
    AIFeature.GRAMMAR: "Please review and improve the grammar, spelling, style, and clarity of the following text. Provide the corrected version and explain major changes:",
    AIFeature.TITLE: "Suggest 5 creative, engaging, and descriptive titles for the following content:",
    AIFeature.ANALYZE: "Analyze the following text for sentiment, tone, key themes, and provide insights about the content:",
}

CHAT_SYSTEM_SUFFIX = (
    " Answer questions about productivity, note-taking, organization, and help users "
    "be more efficient with their work."
)


def build_prompt(
    feature: AIFeature, note_content: str | None = None, user_input: str | None = None
) -> str:
    """
    Build the prompt for a feature.

    Args:
        feature: Assistant feature
        note_content: Selected note content
        user_input: Free text typed by the user

    Returns:
        Prompt text

    Raises:
        ValidationError: If the feature has nothing to work on
    """
    feature = AIFeature(feature)
    note_content = (note_content or "").strip()
    user_input = (user_input or "").strip()

    if feature is AIFeature.CHAT:
        if not user_input:
            raise ValidationError("Chat requires a message")
        return user_input

    if feature in FREE_INPUT_FEATURES:
        source = user_input or note_content
        if not source:
            raise ValidationError(f"{feature.value} requires input text or a note")
        if feature is AIFeature.EXPAND:
            return (
                "Expand on the following idea with detailed explanations, examples, "
                f"practical applications, and related concepts:\n\n{source}"
            )
        return (
            "Based on the following topic or idea, generate creative brainstorming "
            f"suggestions, related concepts, and actionable next steps:\n\n{source}"
        )

    if not note_content:
        raise ValidationError(f"{feature.value} requires a note", context={"feature": feature.value})

    if feature is AIFeature.TRANSLATE:
        language = user_input or DEFAULT_TRANSLATION_LANGUAGE
        return (
            f"Translate the following text to {language} while maintaining the original "
            f"meaning and tone:\n\n{note_content}"
        )

    return f"{_NOTE_PROMPTS[feature]}\n\n{note_content}"


class AIAssistant:
    """
    Runs assistant features against an LLM provider.
    """

    def __init__(self, llm: LLMProvider, config: LLMConfig | None = None):
        """
        Initialize AI assistant.

        Args:
            llm: Text generation provider
            config: LLM settings (system prompt, temperature, max tokens)
        """
        self.llm = llm
        self.config = config or LLMConfig()

    async def generate(
        self,
        feature: AIFeature,
        note_content: str | None = None,
        user_input: str | None = None,
    ) -> str:
        """
        Run one feature and return the generated text.

        Raises:
            ValidationError: If the feature has nothing to work on
            LLMError: If generation fails
        """
        feature = AIFeature(feature)
        prompt = build_prompt(feature, note_content, user_input)
        system = self.config.system_prompt
        if feature is AIFeature.CHAT:
            system += CHAT_SYSTEM_SUFFIX

        try:
            text = await self.llm.complete(
                prompt,
                system=system,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except LLMError:
            raise
        except Exception as e:
            logger.error(f"AI feature '{feature.value}' failed: {e}")
            raise LLMError(f"AI generation failed: {e}", context={"feature": feature.value}) from e

        logger.debug(f"AI feature '{feature.value}' returned {len(text)} characters")
        return text

    @staticmethod
    def create_note_from_response(feature: AIFeature, text: str) -> Note:
        """
        Turn an accepted response into a new note.

        Raises:
            ValidationError: If the response is empty
        """
        feature = AIFeature(feature)
        if not text or not text.strip():
            raise ValidationError("Cannot create a note from an empty response")
        return Note.create(
            title=f"AI Generated: {feature.value.capitalize()}",
            content=text,
            tags=[AI_TAG, feature.value],
            folder=AI_FOLDER,
            type=NoteType.CHECKLIST if feature is AIFeature.TODO else NoteType.NOTE,
            ai_generated=True,
        )
