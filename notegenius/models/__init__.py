"""
Data models for NoteGenius.

Core models:
- Note: user document, the owner of the text buffer
- NoteType: display hint enum
- SaveSnapshot: auto-save payload
- Task, TaskFilter, TaskStats: derived checklist views
- TextStats, FolderStats, WritingGoal: derived statistics
"""

from notegenius.models.note import Note, NoteType, SaveSnapshot, add_tag, remove_tag
from notegenius.models.stats import FolderStats, TextStats, WritingGoal
from notegenius.models.task import Task, TaskFilter, TaskStats

__all__ = [
    # Note
    "Note",
    "NoteType",
    "SaveSnapshot",
    "add_tag",
    "remove_tag",
    # Tasks
    "Task",
    "TaskFilter",
    "TaskStats",
    # Statistics
    "TextStats",
    "FolderStats",
    "WritingGoal",
]
