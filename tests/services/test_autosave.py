"""
Tests for the debounced auto-saver.
"""

import asyncio

import pytest

from notegenius.services.autosave import AutoSaver


@pytest.mark.unit
@pytest.mark.asyncio
class TestAutoSaver:
    """Tests for AutoSaver."""

    async def test_burst_saves_once(self, session):
        """Test several quick changes produce a single save."""
        saved = []
        saver = AutoSaver(session.get_snapshot_for_save, saved.append, delay=0.05)

        for text in ["a", "ab", "abc"]:
            session.set_content(text)
            saver.notify_change()
        await asyncio.sleep(0.15)

        assert saver.saves == 1
        assert [snapshot.content for snapshot in saved] == ["abc"]
        assert saver.pending is False

    async def test_async_callback(self, session):
        """Test async save callbacks are awaited."""
        saved = []

        async def save(snapshot):
            saved.append(snapshot.title)

        saver = AutoSaver(session.get_snapshot_for_save, save, delay=0.01)
        saver.notify_change()
        await asyncio.sleep(0.05)

        assert saved == ["Errands"]

    async def test_cancel_drops_pending_save(self, session):
        """Test cancel stops the timer."""
        saved = []
        saver = AutoSaver(session.get_snapshot_for_save, saved.append, delay=0.05)

        saver.notify_change()
        assert saver.pending is True
        saver.cancel()
        await asyncio.sleep(0.1)

        assert saved == []

    async def test_flush_saves_immediately(self, session):
        """Test flush saves now and clears the timer."""
        saved = []
        saver = AutoSaver(session.get_snapshot_for_save, saved.append, delay=10)

        saver.notify_change()
        await saver.flush()

        assert len(saved) == 1
        assert saver.pending is False

    async def test_flush_propagates_errors(self, session):
        """Test save failures surface from flush."""

        def save(snapshot):
            raise OSError("disk full")

        saver = AutoSaver(session.get_snapshot_for_save, save)

        with pytest.raises(OSError, match="disk full"):
            await saver.flush()
        assert saver.saves == 0

    async def test_background_errors_are_contained(self, session):
        """Test a failing timed save doesn't crash the loop."""

        def save(snapshot):
            raise OSError("disk full")

        saver = AutoSaver(session.get_snapshot_for_save, save, delay=0.01)
        saver.notify_change()
        await asyncio.sleep(0.05)

        assert saver.saves == 0
        assert saver.pending is False
