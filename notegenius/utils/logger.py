"""
Logging for NoteGenius, on top of Loguru.

Every record carries two extras: ``module`` (the emitting module) and
``note_id`` ("-" when the record isn't about a single note). Services that
work on one note bind its id through get_logger, so a note's editing
history can be filtered out of a shared log.
"""

import sys

from loguru import logger

NO_NOTE = "-"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> <magenta>[{extra[note_id]}]</magenta> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} [{extra[note_id]}] - {message}"

# Records from modules that never call get_logger still render
logger.configure(extra={"module": "notegenius", "note_id": NO_NOTE})


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace Loguru's handlers with the NoteGenius console sink.

    Args:
        level: Minimum level for every sink
        log_file: Optional path of a rotating log file (parent dirs are created)
        rotation: When the log file rotates
        retention: How long rotated files are kept
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            enqueue=True,
        )


def get_logger(name: str, note_id: str | None = None):
    """Logger bound to a module and, when given, to one note."""
    if note_id is None:
        return logger.bind(module=name)
    return logger.bind(module=name, note_id=note_id)
