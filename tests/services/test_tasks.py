"""
Tests for checklist task parsing and toggling.

Tests cover:
1. Recognizing task lines and ignoring everything else
2. Document order and index assignment
3. Toggling a single task without touching other lines
4. Out-of-range indices as a silent no-op
"""

import pytest

from notegenius.services.tasks import (
    format_task_line,
    is_task_line,
    parse_tasks,
    toggle_task,
)


@pytest.mark.unit
class TestParseTasks:
    """Tests for parse_tasks."""

    def test_concrete_scenario(self, sample_checklist):
        """Test the three-line checklist parses into ordered tasks."""
        tasks = parse_tasks(sample_checklist)

        assert [(t.text, t.completed) for t in tasks] == [
            ("Buy milk", False),
            ("Pay rent", True),
            ("Call Sam", False),
        ]
        assert [t.index for t in tasks] == [0, 1, 2]

    def test_empty_buffer(self):
        """Test empty text has no tasks."""
        assert parse_tasks("") == []

    def test_order_preserved_with_interleaved_text(self):
        """Test non-task lines between tasks don't change order."""
        text = "# Plan\n- [ ] A\nsome prose\n\n- [x] B\n* bullet\n- [ ] C\n"

        assert [t.text for t in parse_tasks(text)] == ["A", "B", "C"]

    @pytest.mark.parametrize(
        "line",
        [
            "- [X] uppercase marker",
            "-[ ] missing space after dash",
            "- [ ]missing space after box",
            "- [ ]",
            "  - [ ] indented",
            "* [ ] star bullet",
            "- [-] other marker",
            "text - [ ] in the middle",
        ],
    )
    def test_malformed_lines_ignored(self, line):
        """Test lenient parse: malformed checkbox syntax is just text."""
        assert parse_tasks(line) == []
        assert not is_task_line(line)

    def test_empty_task_text(self):
        """Test a bare checkbox with trailing space is a task with empty text."""
        tasks = parse_tasks("- [ ] ")

        assert len(tasks) == 1
        assert tasks[0].text == ""

    def test_task_text_trimmed(self):
        """Test surrounding whitespace is trimmed from task text."""
        tasks = parse_tasks("- [x]   spaced out   \r")

        assert tasks[0].text == "spaced out"
        assert tasks[0].completed is True

    def test_appending_prose_keeps_task_count(self, sample_checklist):
        """Test non-checklist text never changes the task count."""
        before = len(parse_tasks(sample_checklist))
        after = len(parse_tasks(sample_checklist + "\nJust a thought.\n\n- not a task"))

        assert before == after == 3

    def test_format_task_line_is_recognized(self):
        """Test generated lines round through the parser."""
        assert parse_tasks(format_task_line("Write tests"))[0].text == "Write tests"
        assert parse_tasks(format_task_line("Done", completed=True))[0].completed is True


@pytest.mark.unit
class TestToggleTask:
    """Tests for toggle_task."""

    def test_toggle_first_only_changes_first_line(self, sample_checklist):
        """Test toggling index 0 leaves the other lines byte-identical."""
        result = toggle_task(sample_checklist, 0)

        lines = result.split("\n")
        assert lines[0] == "- [x] Buy milk"
        assert lines[1:] == sample_checklist.split("\n")[1:]

    def test_toggle_completed_task(self, sample_checklist):
        """Test toggling a completed task unchecks it."""
        result = toggle_task(sample_checklist, 1)

        assert result.split("\n")[1] == "- [ ] Pay rent"

    def test_index_counts_only_task_lines(self):
        """Test the index skips non-task lines."""
        text = "intro\n- [ ] one\n\nnotes\n- [ ] two"

        assert toggle_task(text, 1) == "intro\n- [ ] one\n\nnotes\n- [x] two"

    def test_double_toggle_is_identity(self, sample_checklist):
        """Test toggling twice restores the buffer for every valid index."""
        for index in range(len(parse_tasks(sample_checklist))):
            assert toggle_task(toggle_task(sample_checklist, index), index) == sample_checklist

    def test_marker_in_task_text_untouched(self):
        """Test only the leading marker flips, not bracket text later on the line."""
        text = "- [ ] check [x] and [ ] literally"

        assert toggle_task(text, 0) == "- [x] check [x] and [ ] literally"

    def test_preserves_crlf_and_trailing_newline(self):
        """Test line endings survive a toggle."""
        text = "- [ ] a\r\n- [ ] b\r\n"

        assert toggle_task(text, 0) == "- [x] a\r\n- [ ] b\r\n"

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_out_of_range_is_noop(self, sample_checklist, index):
        """Test out-of-range indices return the buffer unchanged."""
        assert toggle_task(sample_checklist, index) == sample_checklist

    def test_toggle_without_tasks(self):
        """Test toggling in a buffer without tasks is a no-op."""
        assert toggle_task("plain text", 0) == "plain text"
