"""
Dictation capability.

A dictation source only needs to yield finalized transcript chunks; how the
audio is captured and recognized is its own business. The pump appends each
chunk to an editor session.
"""

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from notegenius.services.editor_session import EditorSession
from notegenius.utils.logger import get_logger



@runtime_checkable
class DictationSource(Protocol):
    """Anything that yields finalized text chunks."""

    def chunks(self) -> AsyncIterator[str]: ...


async def pump_dictation(source: DictationSource, session: EditorSession) -> int:
    """
    Append every finalized chunk from source to the session.

    Returns:
        Number of chunks applied (blank chunks are skipped)
    """
    applied = 0
    async for chunk in source.chunks():
        if session.append_dictation(chunk):
            applied += 1
    get_logger(__name__, note_id=session.note.id).debug(f"Dictation applied {applied} chunks")
    return applied
