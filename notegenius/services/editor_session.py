"""
Editor Session - the explicit editing state for one note.

Bundles the note, its undo/redo history and the editor settings into one
value that every editing operation goes through. All buffer writes funnel
through set_content, so derived views (tasks, statistics) always reflect
the current buffer.
"""

from datetime import datetime

from notegenius.config import EditorConfig
from notegenius.models.note import Note, SaveSnapshot
from notegenius.models.stats import TextStats, WritingGoal
from notegenius.models.task import Task
from notegenius.services import formatting
from notegenius.services.edit_history import EditHistory, HistoryState
from notegenius.services.formatting import FormatType
from notegenius.services.tasks import parse_tasks, toggle_task
from notegenius.services.text_statistics import analyze, writing_goals
from notegenius.utils.logger import get_logger


class EditorSession:
    """
    Editing state for a single note.

    Features:
    - Single write path (set_content) keeping updated_at fresh
    - Snapshot-before-edit for every formatting action
    - Undo/redo over whole-buffer snapshots
    - Task toggling and tag management
    - Derived stats and tasks recomputed on every read
    """

    def __init__(self, note: Note, config: EditorConfig | None = None):
        """
        Initialize editor session.

        Args:
            note: Note being edited (mutated in place)
            config: Editor settings (history limit, reading speed)
        """
        self.note = note
        self.config = config or EditorConfig()
        self.history = EditHistory(limit=self.config.history_limit)
        self.logger = get_logger(__name__, note_id=note.id)

    # ---------- Read side ----------

    @property
    def content(self) -> str:
        return self.note.get_content()

    @property
    def title(self) -> str:
        return self.note.title

    @property
    def tags(self) -> list[str]:
        return self.note.get_tags()

    @property
    def tasks(self) -> list[Task]:
        return parse_tasks(self.content)

    @property
    def stats(self) -> TextStats:
        return analyze(self.content, words_per_minute=self.config.words_per_minute)

    @property
    def writing_goals(self) -> list[WritingGoal]:
        return writing_goals(self.stats)

    @property
    def history_state(self) -> HistoryState:
        return self.history.state

    def get_snapshot_for_save(self) -> SaveSnapshot:
        return self.note.get_snapshot_for_save()

    # ---------- Write side ----------

    def _ensure_editable(self) -> None:
        self.note.ensure_unlocked()

    def set_content(self, text: str) -> None:
        """Replace the buffer. Free typing goes here without a snapshot."""
        self._ensure_editable()
        if text == self.note.content:
            return
        self.note.set_content(text)

    def _edit(self, text: str) -> None:
        """Snapshot, then write. An edit that changes nothing leaves history alone."""
        self._ensure_editable()
        if text == self.content:
            self.logger.debug("Edit left the buffer unchanged, no snapshot")
            return
        self.history.record_before_edit(self.content)
        self.set_content(text)

    def set_title(self, title: str) -> None:
        self._ensure_editable()
        self.note.set_title(title)

    def add_tag(self, candidate: str) -> bool:
        self._ensure_editable()
        return self.note.add_tag(candidate)

    def remove_tag(self, target: str) -> bool:
        self._ensure_editable()
        return self.note.remove_tag(target)

    def apply_format(self, fmt: FormatType, start: int, end: int) -> None:
        """Format the [start, end) selection, undoable."""
        self._edit(formatting.apply_format(self.content, fmt, start, end))

    def insert_checkbox(self) -> None:
        self._edit(self.content + formatting.CHECKBOX_SNIPPET)

    def insert_divider(self) -> None:
        self._edit(self.content + formatting.DIVIDER_SNIPPET)

    def insert_table(self) -> None:
        self._edit(self.content + formatting.TABLE_SNIPPET)

    def insert_link(self, text: str, url: str) -> bool:
        if not text or not url:
            return False
        self._edit(self.content + formatting.link_snippet(text, url))
        return True

    def insert_image(self, alt_text: str, url: str) -> bool:
        if not alt_text or not url:
            return False
        self._edit(self.content + formatting.image_snippet(alt_text, url))
        return True

    def insert_code_block(self, language: str = "") -> None:
        self._edit(self.content + formatting.code_block_snippet(language))

    def insert_timestamp(self, now: datetime | None = None) -> None:
        self._edit(self.content + formatting.timestamp_snippet(now))

    def find_replace(self, find: str, replacement: str) -> int:
        """
        Replace all occurrences of find, undoable.

        Returns:
            Number of replacements made (0 leaves history untouched)
        """
        updated, count = formatting.find_replace(self.content, find, replacement)
        if count:
            self._edit(updated)
        return count

    def toggle_task(self, index: int) -> bool:
        """
        Flip the index-th task's completion marker.

        Returns:
            True if a task was toggled; out-of-range indices return False
        """
        self._ensure_editable()
        updated = toggle_task(self.content, index)
        if updated == self.content:
            return False
        self.set_content(updated)
        return True

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False when nothing to undo."""
        self._ensure_editable()
        previous = self.history.undo(self.content)
        if previous is None:
            return False
        self.set_content(previous)
        return True

    def redo(self) -> bool:
        """Re-apply the next snapshot. Returns False when nothing to redo."""
        self._ensure_editable()
        following = self.history.redo(self.content)
        if following is None:
            return False
        self.set_content(following)
        return True

    def append_dictation(self, chunk: str) -> bool:
        """Append a finalized dictation chunk, separated by a space."""
        if not chunk or not chunk.strip():
            return False
        self._ensure_editable()
        self.set_content(f"{self.content} {chunk}")
        return True

    def accept_generated(self, text: str | None) -> bool:
        """
        Replace the buffer with AI output, undoable.

        An empty or missing response leaves the note untouched.
        """
        if not text:
            self.logger.debug("No generated content to accept")
            return False
        self._edit(text)
        return True
