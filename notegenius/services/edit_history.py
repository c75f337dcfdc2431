"""
Bounded undo/redo history of whole-buffer snapshots.

Snapshots are recorded explicitly before formatting actions; free typing is
not snapshotted. Recording after an undo discards the redo history, as in
any text editor.
"""

from collections import deque
from enum import Enum

DEFAULT_HISTORY_LIMIT = 20


class HistoryState(str, Enum):
    """Which history action is currently meaningful."""

    CLEAN = "clean"
    UNDO_AVAILABLE = "undo_available"
    REDO_AVAILABLE = "redo_available"


class EditHistory:
    """
    Undo/redo stacks for one editable buffer.

    The undo stack keeps at most ``limit`` snapshots; the oldest is evicted
    on overflow. The redo stack is ordered front-first: the next redo is at
    index 0.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self.limit = limit
        self._undo: deque[str] = deque(maxlen=limit)
        self._redo: deque[str] = deque()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def state(self) -> HistoryState:
        if self._redo:
            return HistoryState.REDO_AVAILABLE
        if self._undo:
            return HistoryState.UNDO_AVAILABLE
        return HistoryState.CLEAN

    def __len__(self) -> int:
        return len(self._undo)

    def record_before_edit(self, current: str) -> None:
        """Snapshot the buffer ahead of a reversible edit and drop redo history."""
        self._undo.append(current)
        self._redo.clear()

    def undo(self, current: str) -> str | None:
        """
        Step back one snapshot.

        Args:
            current: Buffer as it is now (becomes the next redo)

        Returns:
            Previous buffer, or None when there is nothing to undo
        """
        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.appendleft(current)
        return previous

    def redo(self, current: str) -> str | None:
        """
        Step forward one snapshot.

        Args:
            current: Buffer as it is now (becomes the next undo)

        Returns:
            Next buffer, or None when there is nothing to redo
        """
        if not self._redo:
            return None
        following = self._redo.popleft()
        self._undo.append(current)
        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
