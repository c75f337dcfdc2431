"""
Checklist tasks derived from note content.

A task line is exactly ``- [ ] <text>`` or ``- [x] <text>`` at the start of
a line. This is the one wire format the core defines: anything that writes
checklist content (quick-task creation, AI insertion, the editor's checkbox
snippet) must produce this shape for parse_tasks to recognize it.

Parsing is lenient: ``[X]``, ``-[ ]``, indented items and markers without
the trailing space are ordinary text, not errors.
"""

import re

from notegenius.models.task import Task
from notegenius.utils.logger import get_logger

logger = get_logger(__name__)

TASK_LINE = re.compile(r"- \[(?P<mark>[ x])\] (?P<text>.*)")
MARKER_COLUMN = 3  # "- [" precedes the marker character

UNCHECKED = " "
CHECKED = "x"


def _match(line: str) -> re.Match[str] | None:
    return TASK_LINE.fullmatch(line)


def is_task_line(line: str) -> bool:
    """Check whether a single line (without newline) is a task line."""
    return _match(line) is not None


def format_task_line(text: str, completed: bool = False) -> str:
    """Build a task line in the checklist wire format."""
    return f"- [{CHECKED if completed else UNCHECKED}] {text}"


def parse_tasks(text: str) -> list[Task]:
    """
    Extract checklist tasks in document order.

    Args:
        text: Note buffer

    Returns:
        Tasks; each index is the ordinal toggle_task expects
    """
    tasks: list[Task] = []
    for line in text.split("\n"):
        match = _match(line)
        if match is None:
            continue
        tasks.append(
            Task(
                text=match.group("text").strip(),
                completed=match.group("mark") == CHECKED,
                index=len(tasks),
            )
        )
    return tasks


def toggle_task(text: str, index: int) -> str:
    """
    Flip the completion marker of the index-th task line.

    Only the marker character of that one line changes; every other line,
    task lines included, is returned byte-identical.

    Out-of-range indices (negative or >= the task count) are a silent no-op:
    the buffer is returned unchanged and no error is raised.

    Args:
        text: Note buffer
        index: Zero-based task ordinal as produced by parse_tasks

    Returns:
        Updated buffer
    """
    if index < 0:
        logger.debug(f"Task index {index} out of range, buffer unchanged")
        return text

    lines = text.split("\n")
    seen = 0
    for position, line in enumerate(lines):
        match = _match(line)
        if match is None:
            continue
        if seen == index:
            flipped = UNCHECKED if match.group("mark") == CHECKED else CHECKED
            lines[position] = line[:MARKER_COLUMN] + flipped + line[MARKER_COLUMN + 1 :]
            return "\n".join(lines)
        seen += 1

    logger.debug(f"Task index {index} out of range ({seen} tasks), buffer unchanged")
    return text
