"""
Derived statistics models.
"""

from pydantic import BaseModel, Field


class TextStats(BaseModel):
    """
    Statistics computed from a text buffer.

    readability_score is a heuristic based on average sentence length only.
    It is not a validated readability formula.
    """

    words: int = 0
    characters: int = 0
    sentences: int = 0
    paragraphs: int = 0
    reading_time_minutes: int = 0
    readability_score: int = Field(default=100, ge=0, le=100)
    avg_words_per_sentence: float = 0.0
    avg_sentences_per_paragraph: float = 0.0


class FolderStats(BaseModel):
    """Counts for the notes sharing one folder name."""

    total: int = 0
    private: int = 0
    locked: int = 0
    recent: int = Field(default=0, description="Notes updated within the last day")


class WritingGoal(BaseModel):
    """Progress of one writing target, measured against a TextStats value."""

    name: str
    target: int = Field(..., gt=0)
    current: int = Field(default=0, ge=0)
    progress: int = Field(default=0, ge=0, le=100, description="Percent of target, capped at 100")

    @property
    def achieved(self) -> bool:
        return self.progress >= 100
