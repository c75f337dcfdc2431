"""NoteGenius - note content model: checklist tasks, edit history and text statistics."""

__version__ = "1.0.0"
