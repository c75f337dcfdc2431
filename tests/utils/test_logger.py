"""
Tests for logging setup.
"""

import pytest
from loguru import logger

from notegenius.utils.logger import NO_NOTE, get_logger, setup_logging


@pytest.fixture
def records():
    """Records emitted while the test runs."""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    try:
        yield captured
    finally:
        logger.remove(handler_id)


@pytest.mark.unit
class TestLogger:
    """Tests for bound loggers and sinks."""

    def test_note_id_bound(self, records):
        """Test a note logger carries module and note id."""
        get_logger("notegenius.services.editor_session", note_id="note_1").info("hello")

        assert records[-1]["extra"] == {
            "module": "notegenius.services.editor_session",
            "note_id": "note_1",
        }

    def test_note_id_defaults_to_placeholder(self, records):
        """Test loggers without a note fall back to the placeholder id."""
        get_logger("notegenius.app").info("hello")

        assert records[-1]["extra"]["module"] == "notegenius.app"
        assert records[-1]["extra"]["note_id"] == NO_NOTE

    def test_file_sink(self, tmp_path):
        """Test setup_logging writes to the log file when one is given."""
        log_file = tmp_path / "logs" / "notegenius.log"
        try:
            setup_logging(level="DEBUG", log_file=str(log_file))
            get_logger("tests", note_id="note_2").debug("written to file")
            logger.remove()

            contents = log_file.read_text()
            assert "written to file" in contents
            assert "tests [note_2]" in contents
        finally:
            setup_logging()
