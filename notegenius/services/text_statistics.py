"""
Text statistics for a note buffer.

Pure projection of the buffer: word, character, sentence and paragraph
counts, an estimated reading time and a bounded readability heuristic.
"""

import math
import re

from notegenius.models.stats import TextStats, WritingGoal

SENTENCE_BREAK = re.compile(r"[.!?]+")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

DEFAULT_WORDS_PER_MINUTE = 200


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _count_segments(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for segment in pattern.split(text) if segment.strip())


def readability_score(words: int, sentences: int) -> int:
    """
    Sentence-length readability heuristic.

    100 - 2 * (words / sentences), clamped to [0, 100]. Shorter sentences
    score higher. This is a proxy, not Flesch or any other standard metric.
    """
    avg = words / sentences if sentences else 0.0
    return int(_round_half_up(max(0.0, min(100.0, 100.0 - avg * 2))))


def analyze(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> TextStats:
    """
    Compute statistics for a text buffer.

    Args:
        text: Buffer to analyze
        words_per_minute: Reading speed used for reading_time_minutes

    Returns:
        TextStats; the empty string yields all zeros and readability 100
    """
    words = len(text.split())
    sentences = _count_segments(SENTENCE_BREAK, text)
    paragraphs = _count_segments(PARAGRAPH_BREAK, text)

    avg_words = words / sentences if sentences else 0.0
    avg_sentences = sentences / paragraphs if paragraphs else 0.0

    return TextStats(
        words=words,
        characters=len(text),
        sentences=sentences,
        paragraphs=paragraphs,
        reading_time_minutes=math.ceil(words / words_per_minute),
        readability_score=readability_score(words, sentences),
        avg_words_per_sentence=_round_half_up(avg_words, 1),
        avg_sentences_per_paragraph=_round_half_up(avg_sentences, 1),
    )


# (goal name, TextStats field, target)
WRITING_GOALS: list[tuple[str, str, int]] = [
    ("Daily Word Count", "words", 500),
    ("Reading Time", "reading_time_minutes", 5),
    ("Readability Score", "readability_score", 80),
]


def writing_goals(stats: TextStats) -> list[WritingGoal]:
    """Progress toward each writing goal for already computed stats."""
    goals = []
    for name, field, target in WRITING_GOALS:
        current = getattr(stats, field)
        goals.append(
            WritingGoal(
                name=name,
                target=target,
                current=current,
                progress=int(_round_half_up(min(100.0, current * 100 / target))),
            )
        )
    return goals
