"""
Note Collection - the in-memory owner of all notes.

Handles:
- Adding, fetching and deleting notes
- Folders (a folder is the set of notes sharing a folder name)
- Privacy and lock toggles (a locked note keeps its content and folder;
  privacy and the lock itself can still be switched)
- Calendar lookups by reminder or creation date
- Task dashboard stats and filters across notes
"""

from collections.abc import Iterator
from datetime import date, datetime, timedelta

from notegenius.models.note import Note, NoteType
from notegenius.models.stats import FolderStats
from notegenius.models.task import TaskFilter, TaskStats
from notegenius.services.tasks import format_task_line, parse_tasks, toggle_task
from notegenius.utils.exceptions import NotFoundError, ValidationError
from notegenius.utils.id_generator import generate_folder_placeholder_id
from notegenius.utils.logger import get_logger

TASKS_FOLDER = "Tasks"
FOLDER_PLACEHOLDER_TAG = "folder-placeholder"


def _is_overdue(note: Note, now: datetime) -> bool:
    return note.reminder is not None and note.reminder < now


class NoteCollection:
    """
    Ordered, in-memory set of notes keyed by id.

    Deleting a note needs no cascade: tasks and statistics are derived from
    content and have no separate storage.
    """

    def __init__(self, notes: list[Note] | None = None):
        self._notes: dict[str, Note] = {}
        for note in notes or []:
            self.add(note)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes.values()))

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    # ---------- Notes ----------

    def add(self, note: Note) -> Note:
        """Add or replace a note (same id replaces)."""
        self._notes[note.id] = note
        get_logger(__name__, note_id=note.id).info(f"Stored note in folder '{note.folder}'")
        return note

    def get(self, note_id: str) -> Note:
        """
        Fetch a note by id.

        Raises:
            NotFoundError: If no note has this id
        """
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(f"Note not found: {note_id}", context={"note_id": note_id})
        return note

    def delete(self, note_id: str) -> Note:
        """
        Remove a note from the collection.

        Raises:
            NotFoundError: If no note has this id
        """
        note = self.get(note_id)
        del self._notes[note_id]
        get_logger(__name__, note_id=note_id).info("Deleted note")
        return note

    # ---------- Folders ----------

    def folders(self) -> list[str]:
        """Unique folder names in first-seen order."""
        return list(dict.fromkeys(note.folder for note in self._notes.values()))

    def notes_in_folder(self, folder: str, include_private: bool = False) -> list[Note]:
        return [
            note
            for note in self._notes.values()
            if note.folder == folder and (include_private or not note.is_private)
        ]

    def folder_stats(self, folder: str, now: datetime | None = None) -> FolderStats:
        now = now or datetime.now()
        day_ago = now - timedelta(days=1)
        members = self.notes_in_folder(folder, include_private=True)
        return FolderStats(
            total=len(members),
            private=sum(1 for note in members if note.is_private),
            locked=sum(1 for note in members if note.is_locked),
            recent=sum(1 for note in members if note.updated_at > day_ago),
        )

    def create_folder(self, name: str) -> Note:
        """
        Open a new folder by creating its placeholder note.

        Raises:
            ValidationError: If the name is blank or the folder already exists
        """
        folder = name.strip()
        if not folder:
            raise ValidationError("Folder name cannot be empty")
        if folder in self.folders():
            raise ValidationError(f"Folder already exists: {folder}", context={"folder": folder})

        now = datetime.now()
        placeholder = Note(
            id=generate_folder_placeholder_id(),
            title="Welcome to your new folder",
            content=f"This is your new folder: {folder}. Start adding notes here!",
            tags=[FOLDER_PLACEHOLDER_TAG],
            folder=folder,
            created_at=now,
            updated_at=now,
        )
        return self.add(placeholder)

    def move_to_folder(self, note_id: str, folder: str) -> Note:
        """
        Move a note to another folder.

        Raises:
            NoteLockedError: If the note is locked
        """
        note = self.get(note_id)
        note.ensure_unlocked()
        note.folder = folder
        note.touch()
        return note

    def toggle_privacy(self, note_id: str) -> Note:
        note = self.get(note_id)
        note.is_private = not note.is_private
        note.touch()
        return note

    def toggle_lock(self, note_id: str) -> Note:
        note = self.get(note_id)
        note.is_locked = not note.is_locked
        note.touch()
        return note

    # ---------- Calendar ----------

    def notes_on_date(self, day: date) -> list[Note]:
        """Notes whose reminder falls on the given day."""
        return [
            note
            for note in self._notes.values()
            if note.reminder is not None and note.reminder.date() == day
        ]

    def notes_created_on(self, day: date) -> list[Note]:
        return [note for note in self._notes.values() if note.created_at.date() == day]

    # ---------- Tasks ----------

    def task_stats(self, now: datetime | None = None) -> TaskStats:
        """
        Task totals across every note.

        Open tasks in a note whose reminder has passed count as overdue.
        """
        now = now or datetime.now()
        total = completed = overdue = 0
        for note in self._notes.values():
            tasks = parse_tasks(note.content)
            done = sum(1 for task in tasks if task.completed)
            total += len(tasks)
            completed += done
            if _is_overdue(note, now):
                overdue += len(tasks) - done

        return TaskStats(
            total=total,
            completed=completed,
            pending=total - completed,
            overdue=overdue,
            completion_rate=int(completed * 100 / total + 0.5) if total else 0,
        )

    def task_notes(self, task_filter: TaskFilter = TaskFilter.ALL, now: datetime | None = None) -> list[Note]:
        """Notes that contain at least one task, narrowed by the filter."""
        now = now or datetime.now()
        task_filter = TaskFilter(task_filter)
        selected = []
        for note in self._notes.values():
            tasks = parse_tasks(note.content)
            if not tasks:
                continue
            has_open = any(not task.completed for task in tasks)
            if task_filter is TaskFilter.PENDING and not has_open:
                continue
            if task_filter is TaskFilter.COMPLETED and has_open:
                continue
            if task_filter is TaskFilter.OVERDUE and not (has_open and _is_overdue(note, now)):
                continue
            selected.append(note)
        return selected

    def create_task(self, title: str) -> Note:
        """
        Create a single-task checklist note in the Tasks folder.

        Raises:
            ValidationError: If the title is blank
        """
        if not title.strip():
            raise ValidationError("Task title cannot be empty")
        note = Note.create(
            title=title,
            content=format_task_line(title),
            tags=["task"],
            folder=TASKS_FOLDER,
            type=NoteType.CHECKLIST,
        )
        return self.add(note)

    def toggle_task(self, note_id: str, index: int) -> Note:
        """
        Toggle one task inside a stored note.

        Out-of-range indices leave the note, including updated_at, untouched.

        Raises:
            NoteLockedError: If the note is locked
        """
        note = self.get(note_id)
        note.ensure_unlocked()
        updated = toggle_task(note.content, index)
        if updated != note.content:
            note.set_content(updated)
        return note
