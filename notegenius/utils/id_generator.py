"""
ID generation utilities for NoteGenius.

- Notes: note_xxx
- Folder placeholder notes: folder_xxx
"""

from uuid import uuid4


def generate_note_id() -> str:
    """
    Generate unique Note ID.

    Returns:
        ID in format "note_xxx" where xxx is 12 hex characters
    """
    return f"note_{uuid4().hex[:12]}"


def generate_folder_placeholder_id() -> str:
    """
    Generate ID for the placeholder note that opens a new folder.

    Returns:
        ID in format "folder_xxx" where xxx is 12 hex characters
    """
    return f"folder_{uuid4().hex[:12]}"
