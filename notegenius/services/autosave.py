"""
Auto-save debouncer.

Waits for a quiet period after the last change, then hands the current
save snapshot to a persistence callback. The callback owns the storage
destination and its failures.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable

from notegenius.models.note import SaveSnapshot
from notegenius.utils.logger import get_logger

logger = get_logger(__name__)

SaveCallback = Callable[[SaveSnapshot], Awaitable[None] | None]


class AutoSaver:
    """
    Debounced saver for one note.

    Every notify_change() restarts the timer; only the last change in a burst
    triggers a save. Must be used from a running event loop.
    """

    def __init__(
        self,
        source: Callable[[], SaveSnapshot],
        save: SaveCallback,
        delay: float = 2.0,
    ):
        """
        Initialize auto-saver.

        Args:
            source: Returns the current snapshot (e.g. session.get_snapshot_for_save)
            save: Sync or async persistence callback
            delay: Quiet period in seconds before saving
        """
        self.source = source
        self.save = save
        self.delay = delay
        self.saves = 0
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def notify_change(self) -> None:
        """Restart the debounce timer."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run_after_delay())

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Save now, dropping any pending timer. Save errors propagate."""
        self.cancel()
        try:
            await self._save()
        except Exception as e:
            logger.error(f"Save failed: {e}")
            raise

    async def _run_after_delay(self) -> None:
        await asyncio.sleep(self.delay)
        try:
            await self._save()
        except Exception as e:
            logger.error(f"Auto-save failed: {e}")

    async def _save(self) -> None:
        snapshot = self.source()
        result = self.save(snapshot)
        if inspect.isawaitable(result):
            await result
        self.saves += 1
        logger.debug(f"Auto-saved '{snapshot.title}' ({len(snapshot.content)} characters)")
