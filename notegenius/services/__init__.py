"""
Services for NoteGenius.

Content core (pure, synchronous):
- text_statistics: analyze()
- tasks: parse_tasks(), toggle_task()
- edit_history: EditHistory
- formatting: selection formatting and snippets

Around the core:
- EditorSession: editing state for one note
- NoteCollection: folders, task dashboard, calendar lookups
- AIAssistant: feature prompts over an LLM provider
- AutoSaver: debounced save snapshots
- pump_dictation: dictation chunks into a session
"""

from notegenius.services.ai_assistant import AIAssistant, AIFeature, build_prompt
from notegenius.services.autosave import AutoSaver
from notegenius.services.dictation import DictationSource, pump_dictation
from notegenius.services.edit_history import EditHistory, HistoryState
from notegenius.services.editor_session import EditorSession
from notegenius.services.formatting import FormatType, apply_format, render_preview
from notegenius.services.note_collection import NoteCollection
from notegenius.services.tasks import format_task_line, is_task_line, parse_tasks, toggle_task
from notegenius.services.text_statistics import analyze, writing_goals

__all__ = [
    "analyze",
    "writing_goals",
    "parse_tasks",
    "toggle_task",
    "is_task_line",
    "format_task_line",
    "EditHistory",
    "HistoryState",
    "FormatType",
    "apply_format",
    "render_preview",
    "EditorSession",
    "NoteCollection",
    "AIAssistant",
    "AIFeature",
    "build_prompt",
    "AutoSaver",
    "DictationSource",
    "pump_dictation",
]
