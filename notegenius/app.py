"""
NoteGenius application wiring.

Builds the collaborators from configuration: logging, the LLM provider,
the note collection and the AI assistant. Editor sessions are opened per
note and get an auto-saver when a save callback is supplied.
"""

from notegenius.config import Config
from notegenius.core.factory import LLMFactory
from notegenius.core.llm.base import LLMProvider
from notegenius.models.note import Note
from notegenius.services.ai_assistant import AIAssistant, AIFeature
from notegenius.services.autosave import AutoSaver, SaveCallback
from notegenius.services.editor_session import EditorSession
from notegenius.services.note_collection import NoteCollection
from notegenius.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


class NoteGeniusApp:
    """
    Composition root for one user's notes.
    """

    def __init__(self, config: Config | None = None, llm: LLMProvider | None = None):
        """
        Initialize the application.

        Args:
            config: Configuration (defaults when omitted)
            llm: Optional provider override; otherwise built by LLMFactory
        """
        self.config = config or Config()
        self.llm = llm or LLMFactory.create(self.config.llm)
        self.notes = NoteCollection()
        self.assistant = AIAssistant(self.llm, self.config.llm)
        self._sessions: dict[str, EditorSession] = {}

        logger.info(
            f"NoteGenius ready: LLM={self.config.llm.provider}/{self.config.llm.model}, "
            f"history_limit={self.config.editor.history_limit}"
        )

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "NoteGeniusApp":
        """Load config from the environment, set up logging and build the app."""
        config = Config.from_env(env_file=env_file)
        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file,
            rotation=config.logging.rotation,
            retention=config.logging.retention,
        )
        return cls(config)

    def open_session(self, note_id: str) -> EditorSession:
        """Return the editor session for a note, creating it on first use."""
        note = self.notes.get(note_id)
        session = self._sessions.get(note_id)
        if session is None or session.note is not note:
            session = EditorSession(note, self.config.editor)
            self._sessions[note_id] = session
        return session

    def close_session(self, note_id: str) -> None:
        self._sessions.pop(note_id, None)

    def delete_note(self, note_id: str) -> Note:
        self.close_session(note_id)
        return self.notes.delete(note_id)

    def autosaver_for(self, session: EditorSession, save: SaveCallback) -> AutoSaver:
        return AutoSaver(
            session.get_snapshot_for_save, save, delay=self.config.editor.autosave_delay
        )

    async def ask(
        self,
        feature: AIFeature,
        note_id: str | None = None,
        user_input: str | None = None,
    ) -> str:
        """Run an AI feature on a stored note and/or free input."""
        content = self.notes.get(note_id).content if note_id else None
        return await self.assistant.generate(feature, note_content=content, user_input=user_input)

    def accept_response(self, feature: AIFeature, text: str) -> Note:
        """Store an AI response as a new note."""
        return self.notes.add(self.assistant.create_note_from_response(feature, text))

    async def close(self) -> None:
        self._sessions.clear()
        await self.llm.close()
        logger.info("NoteGenius closed")
