"""
Note model - one user document.

The note's content is the single source of truth for structure. Tasks and
text statistics are projections of it and are never stored on the note.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from notegenius.models.stats import TextStats
from notegenius.models.task import Task
from notegenius.utils.exceptions import NoteLockedError
from notegenius.utils.id_generator import generate_note_id


class NoteType(str, Enum):
    """Display hint for a note. Not enforced against content."""

    NOTE = "note"
    CHECKLIST = "checklist"
    TASK = "task"


def add_tag(tags: list[str], candidate: str) -> list[str]:
    """
    Return tags with candidate appended.

    The candidate is trimmed first. Blank candidates and exact
    (case-sensitive) duplicates leave the list unchanged.

    Args:
        tags: Current tag list
        candidate: Raw tag input

    Returns:
        New tag list (the input list is not mutated)
    """
    tag = candidate.strip()
    if not tag or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: list[str], target: str) -> list[str]:
    """Return tags without any entry exactly equal to target."""
    return [tag for tag in tags if tag != target]


def _dedupe(tags: list[str]) -> list[str]:
    seen: list[str] = []
    for tag in tags:
        if tag not in seen:
            seen.append(tag)
    return seen


class SaveSnapshot(BaseModel):
    """What the auto-save collaborator receives for persistence."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    updated_at: datetime


class Note(BaseModel):
    """
    A user document plus its metadata.

    Invariants:
    - id never changes after creation
    - updated_at >= created_at
    - any content, title or tag mutation through the accessors refreshes updated_at
    - tags hold no duplicates; insertion order is kept for display
    """

    model_config = {"validate_assignment": True}

    # Core identity
    id: str = Field(default_factory=generate_note_id, frozen=True, description="Note ID (note_xxx)")

    # Content
    title: str = Field(default="", description="User-visible title")
    content: str = Field(default="", description="Full text buffer")
    tags: list[str] = Field(default_factory=list, description="Ordered, duplicate-free tags")
    folder: str = Field(default="General", description="Folder name shared by sibling notes")

    # Flags
    is_locked: bool = Field(default=False, description="Locked notes reject edits")
    is_private: bool = Field(default=False, description="Hidden from folder listings by default")
    reminder: datetime | None = Field(default=None, description="Optional reminder time")
    type: NoteType = Field(default=NoteType.NOTE, description="Display hint")
    ai_generated: bool = Field(default=False, description="Content came from the AI assistant")

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=datetime.now, description="Last update timestamp")

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, value: list[str]) -> list[str]:
        return _dedupe(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Note":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    @classmethod
    def create(
        cls,
        title: str = "",
        content: str = "",
        tags: list[str] | None = None,
        folder: str = "General",
        **kwargs,
    ) -> "Note":
        """
        Create a note with both timestamps set to now.

        Args:
            title: Note title
            content: Initial buffer
            tags: Initial tags (duplicates dropped)
            folder: Folder name
            **kwargs: Any other Note field (is_private, reminder, type, ...)

        Returns:
            New Note
        """
        now = datetime.now()
        return cls(
            title=title,
            content=content,
            tags=tags or [],
            folder=folder,
            created_at=now,
            updated_at=now,
            **kwargs,
        )

    @property
    def tasks(self) -> list[Task]:
        """Checklist tasks parsed from the current content."""
        from notegenius.services.tasks import parse_tasks

        return parse_tasks(self.content)

    @property
    def stats(self) -> TextStats:
        """Text statistics of the current content at the default reading speed."""
        from notegenius.services.text_statistics import analyze

        return analyze(self.content)

    def ensure_unlocked(self) -> None:
        """Raise NoteLockedError when the note is locked."""
        if self.is_locked:
            raise NoteLockedError(f"Note {self.id} is locked", context={"note_id": self.id})

    def touch(self) -> None:
        """Refresh updated_at, never moving it before created_at."""
        self.updated_at = max(datetime.now(), self.created_at)

    def get_content(self) -> str:
        return self.content

    def set_content(self, text: str) -> None:
        self.content = text
        self.touch()

    def set_title(self, title: str) -> None:
        self.title = title
        self.touch()

    def get_tags(self) -> list[str]:
        return list(self.tags)

    def set_tags(self, tags: list[str]) -> None:
        self.tags = _dedupe(list(tags))
        self.touch()

    def add_tag(self, candidate: str) -> bool:
        """
        Add a tag to the note.

        Returns:
            True if the tag list changed
        """
        updated = add_tag(self.tags, candidate)
        if updated == self.tags:
            return False
        self.set_tags(updated)
        return True

    def remove_tag(self, target: str) -> bool:
        """
        Remove every tag exactly equal to target.

        Returns:
            True if the tag list changed
        """
        updated = remove_tag(self.tags, target)
        if updated == self.tags:
            return False
        self.set_tags(updated)
        return True

    def get_snapshot_for_save(self) -> SaveSnapshot:
        """Current state for the auto-save collaborator."""
        return SaveSnapshot(
            title=self.title,
            content=self.content,
            tags=list(self.tags),
            updated_at=self.updated_at,
        )
